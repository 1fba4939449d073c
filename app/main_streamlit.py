# -*- coding: utf-8 -*-
# Interfaz web con Streamlit (simulador de reparto con estado persistente en sesión)

import os, sys
import streamlit as st
import pandas as pd

# --- Resolver imports relativos desde la raíz del proyecto ---
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from reparto.config import configurar_logging, PRIMER_ID_PEDIDO
from reparto.comandos import ejecutar
from reparto.informes import tabla_pedidos, tabla_optimizacion, formatear_camino
from reparto.preprocess import cargar_mapa
from reparto.sistema import SistemaReparto


# ==============================
#  Estado de sesión (persistencia)
# ==============================
if "sistema" not in st.session_state:
    configurar_logging()
    st.session_state.sistema = SistemaReparto()  # registra el Depot antes de cualquier otra acción
if "historial" not in st.session_state: st.session_state.historial = []

sistema = st.session_state.sistema


def _mostrar(resultado):
    """Pinta un Resultado y lo guarda en el historial."""
    st.session_state.historial.append(resultado)
    if not resultado.ok:
        st.error(resultado.mensaje)
    elif isinstance(resultado.datos, dict) and resultado.datos.get("creada") is False:
        st.info(resultado.mensaje)
    else:
        st.success(resultado.mensaje)


# ==============================
#  Configuración de página
# ==============================
st.set_page_config(page_title="Reparto de comida – Simulador", layout="wide")
st.title("Reparto de comida – Pedidos y rutas más cortas")

# ==============================
#  1) Mapa: ubicaciones y rutas
# ==============================
st.subheader("1) Mapa de reparto")

col1, col2 = st.columns(2)
with col1:
    with st.form("add_location", clear_on_submit=True):
        nombre = st.text_input("Nueva ubicación")
        if st.form_submit_button("Añadir ubicación"):
            _mostrar(ejecutar(sistema, "add-location", nombre=nombre))
with col2:
    with st.form("add_route", clear_on_submit=True):
        ubicaciones = sorted(sistema.grafo.ubicaciones())
        origen = st.selectbox("Origen", ubicaciones, key="ruta_origen")
        destino = st.selectbox("Destino", ubicaciones, key="ruta_destino")
        distancia = st.number_input("Distancia (km)", min_value=0, value=1, step=1)
        if st.form_submit_button("Añadir ruta"):
            _mostrar(ejecutar(sistema, "add-route", origen=origen, destino=destino, distancia=int(distancia)))

rutas_file = st.file_uploader("Rutas CSV (origen, destino, distancia)", type=["csv"], key="rutas_csv")
if st.button("Cargar rutas desde fichero"):
    if not rutas_file:
        st.error("Sube primero el CSV de rutas.")
    else:
        try:
            resumen = cargar_mapa(sistema, pd.read_csv(rutas_file))
            st.success(f"Ubicaciones nuevas: {resumen['ubicaciones_nuevas']} | "
                       f"Rutas: {resumen['rutas']} | Filas descartadas: {resumen['descartadas']}")
        except Exception as e:
            st.exception(e)

# ==============================
#  2) Pedidos
# ==============================
st.subheader("2) Pedidos")

with st.form("place_order", clear_on_submit=True):
    c1, c2, c3 = st.columns(3)
    ubicaciones = sorted(sistema.grafo.ubicaciones())
    restaurante = c1.selectbox("Restaurante", ubicaciones, key="pedido_restaurante")
    destino_pedido = c2.selectbox("Destino del cliente", ubicaciones, key="pedido_destino")
    precio = c3.number_input("Precio ($)", value=10.0, step=0.5, format="%.2f")
    if st.form_submit_button("Realizar pedido"):
        _mostrar(ejecutar(sistema, "place-order", restaurante=restaurante,
                          destino=destino_pedido, precio=precio))

b1, b2, b3 = st.columns(3)
with b1:
    if st.button("Procesar siguiente pedido"):
        _mostrar(ejecutar(sistema, "process-next"))
with b2:
    if st.button("Ver última entrega"):
        _mostrar(ejecutar(sistema, "track-last"))
with b3:
    if st.button("Revertir última entrega"):
        _mostrar(ejecutar(sistema, "revert-last"))

pendientes = ejecutar(sistema, "list-pending")
st.write("**Cola de pendientes (del más antiguo al más nuevo)**")
if pendientes.datos:
    st.dataframe(tabla_pedidos(pendientes.datos), use_container_width=True)
else:
    st.info(pendientes.mensaje)

# ==============================
#  3) Optimización de ruta
# ==============================
st.subheader("3) Optimizar ruta de un pedido")

pedido_id = st.number_input("ID de pedido", min_value=0, value=max(sistema.pedidos.siguiente_id - 1, PRIMER_ID_PEDIDO), step=1)
if st.button("Optimizar ruta"):
    resultado = ejecutar(sistema, "optimize-route", pedido_id=int(pedido_id))
    st.session_state.historial.append(resultado)
    if not resultado.ok:
        st.error(resultado.mensaje)
    else:
        opt = resultado.datos
        st.dataframe(tabla_optimizacion(opt), use_container_width=True)
        colA, colB, colC = st.columns(3)
        colA.metric("Depot → restaurante", formatear_camino(opt.tramo_agente.camino))
        colB.metric("Restaurante → destino", formatear_camino(opt.tramo_entrega.camino))
        colC.metric("Total (km)", opt.total if opt.calculable else "N/A")
        if not opt.calculable:
            st.warning("Distancia total no calculable: falta ruta en algún tramo.")

# ==============================
#  Historial de comandos
# ==============================
with st.expander("Historial de comandos"):
    for r in reversed(st.session_state.historial):
        st.text(f"[{'OK' if r.ok else r.error}] {r.comando}: {r.mensaje}")

# ==============================
#  Sidebar: estado del sistema (tras ejecutar los comandos de esta pasada)
# ==============================
st.sidebar.header("Estado del sistema")
estado = ejecutar(sistema, "status").datos
st.sidebar.metric("Pendientes", estado.pendientes)
st.sidebar.metric("Completados", estado.completados)
st.sidebar.metric("Siguiente ID", estado.siguiente_id)
st.sidebar.write(f"**Ubicaciones ({estado.total_ubicaciones})**")
st.sidebar.write(", ".join(estado.ubicaciones))
if st.sidebar.button("Reiniciar sistema"):
    st.session_state.sistema = SistemaReparto()
    st.session_state.historial = []
    st.rerun()
