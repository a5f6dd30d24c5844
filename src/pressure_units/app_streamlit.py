# src/pressure_units/app_streamlit.py
import streamlit as st

from pressure_units.errors import PressureUnitsError
from pressure_units.pressure import Pressure
from pressure_units.tables import conversion_frame, units_frame

st.set_page_config(page_title="Conversor de presión", layout="centered")

st.title("Conversor de presión")
st.caption("Pa, bar, psi, atm, at y Torr. Todas las conversiones pasan por Pa.")

# --- Sidebar: Inputs ---
st.sidebar.header("Entrada")
labels = {m.symbol_ascii: f"{m.names[0]} ({m.symbols[0]})" for m in Pressure.units()}
options = list(labels)

value = st.sidebar.number_input("Valor", value=1.0)
from_unit = st.sidebar.selectbox("Desde", options=options, format_func=labels.get, index=0)
to_unit = st.sidebar.selectbox("Hacia", options=options, format_func=labels.get, index=1)

try:
    pressure = Pressure(value, from_unit)
except PressureUnitsError as e:
    st.error(str(e))
    st.stop()

c1, c2 = st.columns(2)
c1.metric("Entrada", pressure.to_string(from_unit))
c2.metric("Resultado", pressure.to_string(to_unit))

st.subheader("Equivalencias")
df = conversion_frame([value], from_unit)
st.dataframe(df, use_container_width=True)

with st.expander("Unidades soportadas"):
    st.dataframe(units_frame(), use_container_width=True)

csv_bytes = df.to_csv(index=False).encode("utf-8")
st.download_button(
    "⬇️ Descargar CSV",
    data=csv_bytes,
    file_name="pressure_streamlit_results.csv",
    mime="text/csv",
)
