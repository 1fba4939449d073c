# reparto/graph.py
# -*- coding: utf-8 -*-
# Grafo de rutas no dirigido y ponderado entre ubicaciones con nombre

import logging
import numbers

import networkx as nx

from .errores import UbicacionDesconocida

logger = logging.getLogger(__name__)


class GrafoRutas:
    """
    Grafo simple no dirigido sobre networkx:
      - Nodos = ubicaciones (solo se insertan, nunca se eliminan)
      - Aristas = rutas con peso entero no negativo (km) en "weight"
    Reinsertar una ruta existente sobrescribe su distancia.
    """

    def __init__(self):
        self._G = nx.Graph()

    def agregar_ubicacion(self, nombre: str) -> bool:
        """Devuelve False si la ubicación ya existía (no es un error)."""
        if nombre in self._G:
            logger.info(f"La ubicación '{nombre}' ya existe")
            return False
        self._G.add_node(nombre)
        logger.info(f"Ubicación añadida: {nombre}")
        return True

    def agregar_ruta(self, origen: str, destino: str, distancia: int):
        faltan = [n for n in (origen, destino) if n not in self._G]
        if faltan:
            logger.warning(f"Ruta rechazada {origen} <-> {destino}: faltan {faltan}")
            raise UbicacionDesconocida(*faltan)
        if isinstance(distancia, bool) or not isinstance(distancia, numbers.Integral):
            raise ValueError(f"Distancia no entera entre '{origen}' y '{destino}': {distancia!r}")
        if distancia < 0:
            raise ValueError(f"Distancia negativa entre '{origen}' y '{destino}': {distancia}")
        # add_edge sobre un par existente reemplaza el peso en ambos sentidos
        self._G.add_edge(origen, destino, weight=distancia)
        logger.info(f"Ruta añadida: {origen} <-> {destino} ({distancia} km)")

    def vecinos(self, nodo: str) -> dict:
        if nodo not in self._G:
            return {}
        return {v: datos["weight"] for v, datos in self._G[nodo].items()}

    def distancia(self, origen: str, destino: str):
        """Peso de la arista directa o None si no existe."""
        if not self._G.has_edge(origen, destino):
            return None
        return self._G[origen][destino]["weight"]

    def tiene_ubicacion(self, nombre: str) -> bool:
        return nombre in self._G

    def ubicaciones(self) -> set:
        return set(self._G.nodes)

    def rutas(self):
        return [(u, v, d["weight"]) for u, v, d in self._G.edges(data=True)]

    def num_rutas(self) -> int:
        return self._G.number_of_edges()

    @property
    def nx(self) -> nx.Graph:
        """Vista de solo lectura del grafo networkx (para dibujarlo)."""
        return self._G.copy(as_view=True)

    def __contains__(self, nombre) -> bool:
        return nombre in self._G

    def __len__(self) -> int:
        return self._G.number_of_nodes()
