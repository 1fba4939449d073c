import os, sys
import streamlit as st
import pandas as pd
import networkx as nx
import matplotlib.pyplot as plt

ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from reparto.informes import formatear_camino
from reparto.shortest_path import ruta_mas_corta, es_alcanzable

st.set_page_config(page_title="Grafo de rutas", layout="wide")
st.title("Grafo de rutas (ubicaciones y distancias en km)")

if "sistema" not in st.session_state:
    st.info("Abre primero la página principal para crear el sistema.")
    st.stop()

grafo = st.session_state.sistema.grafo
G = grafo.nx

# -------------------------
# Tabla de rutas
# -------------------------
st.subheader("Rutas registradas")
df_rutas = pd.DataFrame(grafo.rutas(), columns=["origen", "destino", "distancia"])
st.dataframe(df_rutas, use_container_width=True)

# -------------------------
# Camino más corto entre dos ubicaciones (resaltado en el dibujo)
# -------------------------
ubicaciones = sorted(grafo.ubicaciones())
c1, c2 = st.columns(2)
origen = c1.selectbox("Desde", ubicaciones)
destino = c2.selectbox("Hasta", ubicaciones)
camino, km = ruta_mas_corta(grafo, origen, destino)
if es_alcanzable(km):
    st.write(f"**{formatear_camino(camino)}** ({km} km)")
else:
    st.warning(f"No hay ruta entre {origen} y {destino}.")

# -------------------------
# Dibujo
# -------------------------
fig, ax = plt.subplots(figsize=(8, 6))
pos = nx.spring_layout(G, seed=42, weight=None)
aristas_camino = set(zip(camino, camino[1:]))
colores = ["tab:red" if (u, v) in aristas_camino or (v, u) in aristas_camino else "tab:gray"
           for u, v in G.edges()]
nx.draw_networkx(G, pos, ax=ax, node_color="tab:blue", font_color="white", edge_color=colores, width=2)
nx.draw_networkx_edge_labels(G, pos, ax=ax, edge_labels=nx.get_edge_attributes(G, "weight"))
ax.set_axis_off()
st.pyplot(fig)
