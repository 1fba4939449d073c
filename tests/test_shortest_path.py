import itertools
import random

import math
import networkx as nx
import pytest

from reparto.graph import GrafoRutas
from reparto.shortest_path import (INFINITO, dijkstra, distancia_camino, es_alcanzable,
                                   reconstruir_camino, ruta_mas_corta)


def _construir(rutas, extra=()):
    G = GrafoRutas()
    for u, v, _ in rutas:
        G.agregar_ubicacion(u)
        G.agregar_ubicacion(v)
    for n in extra:
        G.agregar_ubicacion(n)
    for u, v, w in rutas:
        G.agregar_ruta(u, v, w)
    return G


def _aleatorio(seed, n=12, m=20):
    rnd = random.Random(seed)
    base = nx.gnm_random_graph(n, m, seed=seed)
    rutas = [(f"L{u}", f"L{v}", rnd.randint(0, 20)) for u, v in base.edges()]
    return _construir(rutas, extra=[f"L{i}" for i in range(n)])


@pytest.fixture
def grafo():
    #  A --1-- B --2-- C
    #  |               |
    #  4               1
    #  |               |
    #  D ------5------ E       X (aislado)
    return _construir([("A", "B", 1), ("B", "C", 2), ("A", "D", 4), ("D", "E", 5), ("C", "E", 1)],
                      extra=["X"])


def test_camino_mas_corto_basico(grafo):
    camino, km = ruta_mas_corta(grafo, "A", "E")
    assert camino == ["A", "B", "C", "E"]
    assert km == 4


def test_mismo_origen_y_destino(grafo):
    assert ruta_mas_corta(grafo, "C", "C") == (["C"], 0)
    assert ruta_mas_corta(grafo, "X", "X") == (["X"], 0)


def test_origen_desconocido():
    G = _construir([("A", "B", 1)])
    assert ruta_mas_corta(G, "Z", "A") == ([], INFINITO)
    assert dijkstra(G, "Z") == ({}, {})


def test_destino_desconocido(grafo):
    camino, km = ruta_mas_corta(grafo, "A", "Z")
    assert camino == []
    assert not es_alcanzable(km)


def test_inalcanzable(grafo):
    camino, km = ruta_mas_corta(grafo, "A", "X")
    assert camino == []
    assert math.isinf(km)


def test_dijkstra_distancias_y_no_alcanzables(grafo):
    distancias, predecesores = dijkstra(grafo, "A")
    assert distancias == {"A": 0, "B": 1, "C": 3, "D": 4, "E": 4, "X": INFINITO}
    assert "A" not in predecesores
    assert "X" not in predecesores


def test_reconstruir_camino_cadena_rota():
    distancias = {"A": 0, "B": 1, "C": 2}
    assert reconstruir_camino({"C": "B"}, distancias, "A", "C") == []


def test_pesos_cero():
    G = _construir([("A", "B", 0), ("B", "C", 0), ("A", "C", 1)])
    camino, km = ruta_mas_corta(G, "A", "C")
    assert km == 0
    assert camino == ["A", "B", "C"]


def test_distancia_camino(grafo):
    assert distancia_camino(grafo, []) == 0
    assert distancia_camino(grafo, ["A"]) == 0
    assert distancia_camino(grafo, ["A", "B", "C"]) == 3
    assert distancia_camino(grafo, ["A", "C"]) == INFINITO


@pytest.mark.parametrize("seed", range(5))
def test_coincide_con_networkx(seed):
    G = _aleatorio(seed)
    for origen in sorted(G.ubicaciones()):
        distancias, _ = dijkstra(G, origen)
        esperadas = nx.single_source_dijkstra_path_length(G.nx, origen, weight="weight")
        for nodo, d in distancias.items():
            assert d == esperadas.get(nodo, INFINITO)


@pytest.mark.parametrize("seed", range(5))
def test_simetria_y_distancia_del_camino(seed):
    G = _aleatorio(seed)
    for a, b in itertools.combinations(sorted(G.ubicaciones()), 2):
        camino, km = ruta_mas_corta(G, a, b)
        assert km == ruta_mas_corta(G, b, a)[1]
        if camino:
            assert camino[0] == a and camino[-1] == b
            assert distancia_camino(G, camino) == km


@pytest.mark.parametrize("seed", range(3))
def test_desigualdad_triangular(seed):
    G = _aleatorio(seed, n=8, m=12)
    nodos = sorted(G.ubicaciones())
    dist = {n: dijkstra(G, n)[0] for n in nodos}
    for a, b, c in itertools.product(nodos, repeat=3):
        if es_alcanzable(dist[a][b]) and es_alcanzable(dist[b][c]):
            assert dist[a][c] <= dist[a][b] + dist[b][c]
