# client/pages/2_Browse.py
import streamlit as st
import api as API
from components import show_table

st.title("📚 Browse")

c1, c2 = st.columns(2)
with c1:
    limit = st.number_input("limit", 1, 200, 50, key="veh_limit")
with c2:
    provider = st.text_input("provider (client-side filter)", placeholder="acme-motors", key="veh_provider")

if st.button("Fetch vehicles", key="btn_fetch_vehicles"):
    try:
        rows = API.vehicles(limit=int(limit))
        if provider:
            rows = [r for r in rows if r.get("provider") == provider]
        show_table(rows, caption=f"{len(rows)} vehicle(s)")
    except Exception as e:
        st.error(e)
