from reparto.informes import formatear_camino, formatear_distancia, tabla_optimizacion, tabla_pedidos
from reparto.models import OptimizacionRuta, Pedido, Tramo
from reparto.shortest_path import INFINITO


def test_tabla_pedidos_orden_y_columnas():
    pedidos = [Pedido(1001, "A", "B", 10.0), Pedido(1002, "B", "C", 7.5)]
    df = tabla_pedidos(pedidos)
    assert list(df.columns) == ["id", "restaurante", "destino", "precio"]
    assert list(df["id"]) == [1001, 1002]


def test_tabla_pedidos_vacia():
    df = tabla_pedidos([])
    assert df.empty
    assert list(df.columns) == ["id", "restaurante", "destino", "precio"]


def test_tabla_optimizacion_con_tramo_roto():
    opt = OptimizacionRuta(
        Pedido(1001, "A", "Z", 1.0),
        Tramo("Depot", "A", ["Depot", "A"], 5),
        Tramo("A", "Z", [], INFINITO),
        None,
    )
    df = tabla_optimizacion(opt)
    assert list(df["tramo"]) == ["agente", "entrega"]
    assert list(df["secuencia"]) == ["Depot → A", "N/A"]
    assert list(df["alcanzable"]) == [True, False]
    assert df["distancia"].iloc[0] == 5
    assert df["distancia"].isna().iloc[1]


def test_formatos():
    assert formatear_camino(["A", "B", "C"]) == "A → B → C"
    assert formatear_camino([]) == "N/A"
    assert formatear_distancia(8) == "8 km"
    assert formatear_distancia(INFINITO) == "N/A (ruta no encontrada)"
