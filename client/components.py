# client/components.py
import streamlit as st
import pandas as pd

def show_table(rows, caption: str | None = None):
    """Render a list of vehicle/warning dicts as a dataframe."""
    if caption:
        st.caption(caption)
    if not rows:
        st.info("Nothing to show.")
        return
    df = pd.DataFrame(rows)
    # registry order first when the rows are vehicles
    lead = [c for c in ("provider", "vin", "make", "model", "year", "price") if c in df.columns]
    st.dataframe(df[lead + [c for c in df.columns if c not in lead]])

def show_json(obj, caption: str | None = None):
    if caption:
        st.caption(caption)
    st.json(obj)
