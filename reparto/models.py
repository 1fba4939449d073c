# reparto/models.py
# -*- coding: utf-8 -*-
# Modelos de datos simples para tipificar el flujo
from dataclasses import dataclass, field
import math


@dataclass(frozen=True)
class Pedido:
    id: int
    restaurante: str
    destino: str
    precio: float


@dataclass
class Tramo:
    """Uno de los dos segmentos de camino más corto de una optimización."""
    origen: str
    destino: str
    camino: list
    distancia: float   # km, INFINITO si no hay ruta

    @property
    def alcanzable(self) -> bool:
        return bool(self.camino) and not math.isinf(self.distancia)


@dataclass
class OptimizacionRuta:
    pedido: Pedido
    tramo_agente: Tramo     # Depot -> restaurante
    tramo_entrega: Tramo    # restaurante -> destino
    total: int | None       # None si algún tramo no tiene ruta

    @property
    def calculable(self) -> bool:
        return self.total is not None


@dataclass
class EstadoSistema:
    pendientes: int
    completados: int
    siguiente_id: int
    ubicaciones: list = field(default_factory=list)

    @property
    def total_ubicaciones(self) -> int:
        return len(self.ubicaciones)
