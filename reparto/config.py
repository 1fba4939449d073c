# reparto/config.py
# -*- coding: utf-8 -*-
# Constantes del sistema de reparto y configuración de logging

import logging
import os

# Punto de partida fijo de los repartidores
DEPOT_ID = "Depot"

# Primer identificador de pedido
PRIMER_ID_PEDIDO = 1001

LOG_LEVEL = os.getenv("REPARTO_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configurar_logging(nivel: str | None = None):
    """Configura el logging raíz con el nivel indicado o el de REPARTO_LOG_LEVEL."""
    nivel = (nivel or LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, nivel, logging.INFO), format=LOG_FORMAT)
