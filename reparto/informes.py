# reparto/informes.py
# -*- coding: utf-8 -*-
# Tablas y textos para mostrar pedidos y optimizaciones

import math

import pandas as pd

COLUMNAS_PEDIDO = ["id", "restaurante", "destino", "precio"]


def formatear_camino(camino) -> str:
    return " → ".join(camino) if camino else "N/A"


def formatear_distancia(distancia) -> str:
    if math.isinf(distancia):
        return "N/A (ruta no encontrada)"
    return f"{distancia} km"


def tabla_pedidos(pedidos) -> pd.DataFrame:
    """Una fila por pedido, en el orden recibido (cola: del más antiguo al más nuevo)."""
    filas = [{
        "id": p.id,
        "restaurante": p.restaurante,
        "destino": p.destino,
        "precio": p.precio,
    } for p in pedidos]
    return pd.DataFrame(filas, columns=COLUMNAS_PEDIDO)


def tabla_optimizacion(opt) -> pd.DataFrame:
    filas = []
    for nombre, tramo in (("agente", opt.tramo_agente), ("entrega", opt.tramo_entrega)):
        filas.append({
            "tramo": nombre,
            "secuencia": formatear_camino(tramo.camino),
            "distancia": tramo.distancia if tramo.alcanzable else None,
            "alcanzable": tramo.alcanzable,
        })
    return pd.DataFrame(filas)
