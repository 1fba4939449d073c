# reparto/comandos.py
# -*- coding: utf-8 -*-
# Interfaz petición/respuesta: cada comando devuelve un Resultado estructurado

import inspect
import logging
from dataclasses import dataclass
from typing import Any

from .errores import EntradaInvalida, ErrorReparto
from .informes import formatear_camino, formatear_distancia
from .sistema import SistemaReparto

logger = logging.getLogger(__name__)


@dataclass
class Resultado:
    ok: bool
    comando: str
    mensaje: str
    datos: Any = None
    error: str | None = None


def _nombre(valor, campo):
    nombre = str(valor).strip() if valor is not None else ""
    if not nombre:
        raise EntradaInvalida(campo, valor)
    return nombre


def _entero(valor, campo, minimo=None):
    if isinstance(valor, bool):
        raise EntradaInvalida(campo, valor)
    try:
        numero = int(str(valor).strip())
    except (TypeError, ValueError):
        raise EntradaInvalida(campo, valor) from None
    if minimo is not None and numero < minimo:
        raise EntradaInvalida(campo, valor)
    return numero


def _decimal(valor, campo):
    try:
        return float(str(valor).strip())
    except (TypeError, ValueError):
        raise EntradaInvalida(campo, valor) from None


def _add_location(sistema, nombre):
    nombre = _nombre(nombre, "nombre")
    creada = sistema.grafo.agregar_ubicacion(nombre)
    mensaje = f"Ubicación añadida: {nombre}" if creada else f"La ubicación {nombre} ya existe."
    return mensaje, {"nombre": nombre, "creada": creada}


def _add_route(sistema, origen, destino, distancia):
    origen, destino = _nombre(origen, "origen"), _nombre(destino, "destino")
    distancia = _entero(distancia, "distancia", minimo=0)
    sistema.grafo.agregar_ruta(origen, destino, distancia)
    return (f"Ruta añadida: {origen} <-> {destino} ({distancia} km)",
            {"origen": origen, "destino": destino, "distancia": distancia})


def _place_order(sistema, restaurante, destino, precio):
    pedido = sistema.pedidos.realizar_pedido(
        _nombre(restaurante, "restaurante"), _nombre(destino, "destino"), _decimal(precio, "precio")
    )
    return f"Nuevo pedido (ID: {pedido.id}): {pedido.restaurante} -> {pedido.destino}", pedido


def _process_next(sistema):
    pedido = sistema.pedidos.procesar_siguiente()
    return f"Pedido {pedido.id} entregado correctamente.", pedido


def _track_last(sistema):
    pedido = sistema.pedidos.ultimo_completado()
    return f"Última entrega (ID: {pedido.id}): {pedido.restaurante} a {pedido.destino}", pedido


def _list_pending(sistema):
    pendientes = sistema.pedidos.listar_pendientes()
    if not pendientes:
        return "La cola de pedidos está vacía.", pendientes
    return f"{len(pendientes)} pedido(s) pendiente(s).", pendientes


def _optimize_route(sistema, pedido_id):
    opt = sistema.pedidos.optimizar_ruta(_entero(pedido_id, "pedido_id"))
    lineas = [f"Optimización de ruta para el pedido {opt.pedido.id}"]
    for i, (titulo, tramo) in enumerate((("Repartidor (Depot a restaurante)", opt.tramo_agente),
                                         ("Entrega (restaurante a destino)", opt.tramo_entrega)), 1):
        lineas.append(f"{i}. {titulo}: {formatear_distancia(tramo.distancia)}")
        if tramo.alcanzable:
            lineas.append(f"   {formatear_camino(tramo.camino)}")
    if opt.calculable:
        lineas.append(f"Distancia total estimada: {opt.total} km")
    else:
        lineas.append("Distancia total estimada: no se puede calcular (falta ruta).")
    return "\n".join(lineas), opt


def _revert_last(sistema):
    pedido = sistema.pedidos.revertir_ultimo()
    return f"Entrega {pedido.id} revertida y devuelta a la cola de pendientes.", pedido


def _status(sistema):
    estado = sistema.pedidos.estado()
    mensaje = (f"Pendientes: {estado.pendientes} | Completados: {estado.completados} | "
               f"Siguiente ID: {estado.siguiente_id} | Ubicaciones ({estado.total_ubicaciones}): "
               f"{', '.join(estado.ubicaciones)}")
    return mensaje, estado


COMANDOS = {
    "add-location": _add_location,
    "add-route": _add_route,
    "place-order": _place_order,
    "process-next": _process_next,
    "track-last": _track_last,
    "list-pending": _list_pending,
    "optimize-route": _optimize_route,
    "revert-last": _revert_last,
    "status": _status,
}


def ejecutar(sistema: SistemaReparto, comando: str, **args) -> Resultado:
    """Ejecuta un comando; los errores del dominio se devuelven como Resultado(ok=False)."""
    manejador = COMANDOS.get(comando)
    if manejador is None:
        return Resultado(False, comando, f"Comando desconocido: {comando}", error="ComandoDesconocido")
    try:
        inspect.signature(manejador).bind(sistema, **args)
    except TypeError as e:
        logger.warning(f"{comando}: argumentos no válidos: {e}")
        return Resultado(False, comando, f"Argumentos no válidos para {comando}: {e}", error="EntradaInvalida")
    try:
        mensaje, datos = manejador(sistema, **args)
    except ErrorReparto as e:
        logger.warning(f"{comando}: {e}")
        return Resultado(False, comando, str(e), error=type(e).__name__)
    except ValueError as e:
        # p. ej. distancia negativa desde el propio grafo
        return Resultado(False, comando, str(e), error="EntradaInvalida")
    return Resultado(True, comando, mensaje, datos)
