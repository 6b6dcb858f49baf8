# client/streamlit_app.py
import os
import requests
import streamlit as st

st.set_page_config(page_title="Vehicle Import Client", layout="wide")
st.title("🚗 Vehicle Import Client")

st.markdown("""
This is the home page.

Use the **sidebar Pages** to open:
- **📥 Import** — Generate a synthetic provider CSV or upload your own and POST it to `/import`. Shows imported/dropped counts and date warnings.
- **📚 Browse** — Call `/vehicles` and see stored records in a table.
""")

with st.sidebar:
    st.header("Settings")
    api_url = os.getenv("API_BASE_URL", "http://localhost:8000")
    st.text_input("API Base URL (from env)", value=api_url, disabled=True)
    if st.button("Health check"):
        try:
            r = requests.get(f"{api_url}/healthz", timeout=5)
            st.success(r.json())
        except requests.RequestException as e:
            st.error(f"Health check failed: {e}")

st.info("Tip: set `API_BASE_URL` in `client/.env` or export it before running `streamlit run client/streamlit_app.py`.")
