# reparto/shortest_path.py
# -*- coding: utf-8 -*-
# Rutinas de camino más corto (Dijkstra con cola de prioridad y borrado perezoso)

import heapq
import logging
import math

from .graph import GrafoRutas

logger = logging.getLogger(__name__)

INFINITO = float("inf")


def es_alcanzable(distancia) -> bool:
    return not math.isinf(distancia)


def dijkstra(grafo: GrafoRutas, origen: str):
    """
    Distancias mínimas desde `origen` a todas las ubicaciones conocidas.

    Devuelve (distancias, predecesores). Las ubicaciones no alcanzables
    quedan con distancia INFINITO y sin predecesor. Si `origen` no existe
    devuelve dos diccionarios vacíos.

    La frontera no admite decrease-key: al mejorar una distancia se vuelve
    a insertar el nodo, y las entradas de nodos ya visitados se descartan
    al extraerlas.
    """
    if not grafo.tiene_ubicacion(origen):
        logger.warning(f"Origen '{origen}' no está en el grafo")
        return {}, {}

    distancias = {nodo: INFINITO for nodo in grafo.ubicaciones()}
    distancias[origen] = 0
    predecesores = {}
    visitados = set()
    frontera = [(0, origen)]

    while frontera:
        dist_actual, actual = heapq.heappop(frontera)
        if actual in visitados:
            continue
        visitados.add(actual)

        for vecino, peso in grafo.vecinos(actual).items():
            nueva = dist_actual + peso
            if nueva < distancias[vecino]:
                distancias[vecino] = nueva
                predecesores[vecino] = actual
                heapq.heappush(frontera, (nueva, vecino))

    logger.debug(f"Dijkstra desde '{origen}': {len(visitados)} de {len(distancias)} ubicaciones alcanzadas")
    return distancias, predecesores


def reconstruir_camino(predecesores: dict, distancias: dict, origen: str, destino: str):
    """Recorre los predecesores desde `destino` hacia atrás; [] si no llega a `origen`."""
    if not es_alcanzable(distancias.get(destino, INFINITO)):
        return []
    if destino == origen:
        return [origen]

    camino = [destino]
    actual = destino
    while actual in predecesores:
        actual = predecesores[actual]
        camino.append(actual)
        if actual == origen:
            camino.reverse()
            return camino
    return []


def ruta_mas_corta(grafo: GrafoRutas, origen: str, destino: str):
    """(camino origen..destino, distancia) o ([], INFINITO) si no hay ruta."""
    distancias, predecesores = dijkstra(grafo, origen)
    camino = reconstruir_camino(predecesores, distancias, origen, destino)
    if not camino:
        logger.warning(f"No hay ruta de '{origen}' a '{destino}'")
        return [], INFINITO
    return camino, distancias[destino]


def distancia_camino(grafo: GrafoRutas, camino) -> float:
    """Suma de pesos (km) siguiendo la secuencia de nodos; INFINITO si se rompe."""
    km = 0
    for i in range(len(camino) - 1):
        peso = grafo.distancia(camino[i], camino[i + 1])
        if peso is None:
            return INFINITO
        km += peso
    return km
