# reparto/pedidos.py
# -*- coding: utf-8 -*-
# Libro de pedidos: cola de pendientes (FIFO), pila de completados (LIFO) e índice por id

import logging
from collections import deque

from .config import DEPOT_ID, PRIMER_ID_PEDIDO
from .errores import ColeccionVacia, DepotAusente, PedidoNoEncontrado, UbicacionDesconocida
from .graph import GrafoRutas
from .models import EstadoSistema, OptimizacionRuta, Pedido, Tramo
from .shortest_path import distancia_camino, es_alcanzable, ruta_mas_corta

logger = logging.getLogger(__name__)


class LibroPedidos:
    """
    Ciclo de vida de los pedidos:
      pendiente --procesar_siguiente--> completado --revertir_ultimo--> pendiente
    Los ids nunca se reutilizan; un pedido revertido conserva el suyo.
    """

    distancia_camino = staticmethod(distancia_camino)

    def __init__(self, grafo: GrafoRutas, primer_id: int = PRIMER_ID_PEDIDO, depot: str = DEPOT_ID):
        self.grafo = grafo
        self.depot = depot
        self.siguiente_id = primer_id
        self._pendientes = deque()
        self._completados = []
        self._indice = {}

    @property
    def num_pendientes(self) -> int:
        return len(self._pendientes)

    @property
    def num_completados(self) -> int:
        return len(self._completados)

    def realizar_pedido(self, restaurante: str, destino: str, precio: float) -> Pedido:
        faltan = [n for n in (restaurante, destino) if not self.grafo.tiene_ubicacion(n)]
        if faltan:
            logger.warning(f"Pedido rechazado {restaurante} -> {destino}: faltan {faltan}")
            raise UbicacionDesconocida(*faltan)

        pedido = Pedido(self.siguiente_id, restaurante, destino, precio)
        self.siguiente_id += 1
        self._indice[pedido.id] = pedido
        self._pendientes.append(pedido)
        logger.info(f"Pedido {pedido.id} registrado: {restaurante} -> {destino}")
        return pedido

    def procesar_siguiente(self) -> Pedido:
        if not self._pendientes:
            raise ColeccionVacia("la cola de pendientes")
        pedido = self._pendientes.popleft()
        self._completados.append(pedido)
        logger.info(f"Pedido {pedido.id} entregado")
        return pedido

    def ultimo_completado(self) -> Pedido:
        if not self._completados:
            raise ColeccionVacia("la pila de completados")
        return self._completados[-1]

    def revertir_ultimo(self) -> Pedido:
        if not self._completados:
            raise ColeccionVacia("la pila de completados")
        pedido = self._completados.pop()
        self._pendientes.append(pedido)
        logger.info(f"Pedido {pedido.id} revertido y devuelto a la cola")
        return pedido

    def listar_pendientes(self) -> list:
        return list(self._pendientes)

    def completados(self) -> list:
        """Completados del más reciente al más antiguo."""
        return self._completados[::-1]

    def obtener(self, pedido_id: int) -> Pedido:
        try:
            return self._indice[pedido_id]
        except KeyError:
            raise PedidoNoEncontrado(pedido_id) from None

    def optimizar_ruta(self, pedido_id: int, grafo: GrafoRutas | None = None, buscador=ruta_mas_corta) -> OptimizacionRuta:
        """
        Ruta en dos tramos para un pedido (pendiente o ya completado):
          1) Depot -> restaurante (repartidor va a recoger)
          2) restaurante -> destino (entrega)
        Si algún tramo no tiene ruta, total = None pero se informa del otro.
        """
        if grafo is None:
            grafo = self.grafo
        pedido = self.obtener(pedido_id)
        if not grafo.tiene_ubicacion(self.depot):
            raise DepotAusente(self.depot)

        camino1, d1 = buscador(grafo, self.depot, pedido.restaurante)
        camino2, d2 = buscador(grafo, pedido.restaurante, pedido.destino)
        tramo_agente = Tramo(self.depot, pedido.restaurante, camino1, d1)
        tramo_entrega = Tramo(pedido.restaurante, pedido.destino, camino2, d2)

        total = d1 + d2 if es_alcanzable(d1) and es_alcanzable(d2) else None
        if total is None:
            logger.warning(f"Pedido {pedido_id}: distancia total no calculable (falta ruta)")
        return OptimizacionRuta(pedido, tramo_agente, tramo_entrega, total)

    def estado(self) -> EstadoSistema:
        return EstadoSistema(
            pendientes=self.num_pendientes,
            completados=self.num_completados,
            siguiente_id=self.siguiente_id,
            ubicaciones=sorted(self.grafo.ubicaciones()),
        )
