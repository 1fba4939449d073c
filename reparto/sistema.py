# reparto/sistema.py
# -*- coding: utf-8 -*-
# Instancia del sistema: grafo + libro de pedidos con el Depot ya registrado

from .config import DEPOT_ID, PRIMER_ID_PEDIDO
from .graph import GrafoRutas
from .pedidos import LibroPedidos


class SistemaReparto:
    def __init__(self, depot: str = DEPOT_ID, primer_id: int = PRIMER_ID_PEDIDO):
        self.grafo = GrafoRutas()
        self.grafo.agregar_ubicacion(depot)
        self.pedidos = LibroPedidos(self.grafo, primer_id=primer_id, depot=depot)

    @property
    def depot(self) -> str:
        return self.pedidos.depot
