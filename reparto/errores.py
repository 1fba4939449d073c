# reparto/errores.py
# -*- coding: utf-8 -*-
# Errores recuperables del sistema de reparto


class ErrorReparto(Exception):
    """Base de todos los errores del dominio."""


class UbicacionDesconocida(ErrorReparto):
    def __init__(self, *nombres):
        self.nombres = tuple(nombres)
        super().__init__(f"Ubicación(es) no registrada(s): {', '.join(self.nombres)}")


class ColeccionVacia(ErrorReparto):
    def __init__(self, coleccion: str):
        self.coleccion = coleccion
        super().__init__(f"No hay elementos en {coleccion}")


class PedidoNoEncontrado(ErrorReparto):
    def __init__(self, pedido_id):
        self.pedido_id = pedido_id
        super().__init__(f"Pedido {pedido_id} no encontrado")


class DepotAusente(ErrorReparto):
    def __init__(self, depot: str):
        self.depot = depot
        super().__init__(f"Falta la ubicación '{depot}' para optimizar la ruta")


class EntradaInvalida(ErrorReparto, ValueError):
    def __init__(self, campo: str, valor):
        self.campo = campo
        self.valor = valor
        super().__init__(f"Valor no válido para {campo}: {valor!r}")
