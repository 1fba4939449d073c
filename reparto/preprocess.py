# reparto/preprocess.py
# -*- coding: utf-8 -*-
# Carga masiva del mapa (ubicaciones + rutas) desde una tabla origen/destino/distancia

import logging

import pandas as pd

logger = logging.getLogger(__name__)

COLUMNAS_RUTA = ["origen", "destino", "distancia"]


def preparar_mapa(rutas: pd.DataFrame) -> pd.DataFrame:
    """
    Devuelve una copia normalizada con:
      origen, destino (str sin espacios)
      distancia (entero >= 0)
    Se descartan filas sin nombre o con distancia no entera o negativa.
    """
    faltan = [c for c in COLUMNAS_RUTA if c not in rutas.columns]
    if faltan:
        raise ValueError(f"Faltan columnas en la tabla de rutas: {faltan}")

    df = rutas[COLUMNAS_RUTA].copy()
    for col in ["origen", "destino"]:
        df[col] = df[col].astype("string").str.strip()
    df["distancia"] = pd.to_numeric(df["distancia"], errors="coerce")

    valido = (
        df["origen"].notna() & (df["origen"] != "")
        & df["destino"].notna() & (df["destino"] != "")
        & df["distancia"].notna() & (df["distancia"] >= 0) & (df["distancia"] % 1 == 0)
    ).fillna(False).astype(bool)
    df = df.loc[valido].copy()
    df["distancia"] = df["distancia"].astype(int)
    df["origen"] = df["origen"].astype(str)
    df["destino"] = df["destino"].astype(str)
    return df.reset_index(drop=True)


def cargar_mapa(sistema, rutas: pd.DataFrame) -> dict:
    """Registra todas las ubicaciones y rutas de la tabla en el sistema."""
    df = preparar_mapa(rutas)
    descartadas = len(rutas) - len(df)
    if descartadas:
        logger.warning(f"{descartadas} fila(s) de rutas descartadas por datos no válidos")

    nuevas = 0
    for nombre in pd.unique(df[["origen", "destino"]].values.ravel()):
        if sistema.grafo.agregar_ubicacion(nombre):
            nuevas += 1
    for _, r in df.iterrows():
        sistema.grafo.agregar_ruta(r["origen"], r["destino"], int(r["distancia"]))

    return {"ubicaciones_nuevas": nuevas, "rutas": len(df), "descartadas": descartadas}
