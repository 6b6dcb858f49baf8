import random
import requests
import streamlit as st
import api as API
from gen_data import HEADER_STYLES, gen_vehicle_csv
from components import show_json, show_table

st.title("📥 Import")

# ------------------------
# Session state
# ------------------------
if "generated_csv" not in st.session_state:
    st.session_state.generated_csv = ""

provider = st.text_input("Provider", placeholder="acme-motors", key="imp_provider")

def _post(content: bytes, filename: str):
    if not provider.strip():
        st.warning("Enter a provider first.")
        return
    try:
        resp = API.import_csv(content, provider.strip(), filename=filename)
    except requests.HTTPError as e:
        msg = e.response.text[:400] if e.response is not None else str(e)
        st.error(f"HTTP error: {msg}")
        return
    except requests.RequestException as e:
        st.error(e)
        return
    st.success(f"Imported {resp['imported']} of {resp['received']} row(s); "
               f"dropped {resp['dropped']}, failed {resp['failed']}.")
    if resp.get("warnings"):
        st.warning(f"{len(resp['warnings'])} warning(s)")
        show_table(resp["warnings"])
    if resp.get("errors"):
        show_json(resp["errors"], caption="Storage errors")

# ------------------------
# Generate & Preview
# ------------------------
st.subheader("Synthetic provider file")
c1, c2, c3, c4 = st.columns(4)
with c1:
    total_n = st.number_input("Rows", 1, 10000, 100, key="imp_total")
with c2:
    style = st.selectbox("Header style", list(HEADER_STYLES), key="imp_style")
with c3:
    blank_every = st.number_input("Blank line every N rows (0 = none)", 0, 1000, 0, key="imp_blank")
with c4:
    bad_dates = st.number_input("Corrupt dates", 0, 1000, 0, key="imp_bad")

with st.expander("Advanced options"):
    seed = st.number_input("Random seed", 0, 999999, 0, key="imp_seed")

cA, cB = st.columns(2)
with cA:
    if st.button("🎲 Generate CSV", key="btn_gen"):
        if seed:
            random.seed(int(seed))
        st.session_state.generated_csv = gen_vehicle_csv(int(total_n), style, int(blank_every), int(bad_dates))
        st.success(f"Generated {int(total_n)} row(s).")
with cB:
    if st.session_state.generated_csv:
        st.download_button("⬇️ Download generated CSV", data=st.session_state.generated_csv,
                           file_name="generated.csv", mime="text/csv")

if st.session_state.generated_csv:
    st.code("\n".join(st.session_state.generated_csv.splitlines()[:6]), language="text")
    if st.button("➡️ Import generated CSV", key="btn_import_gen"):
        _post(st.session_state.generated_csv.encode("utf-8"), "generated.csv")

st.divider()

# ------------------------
# Upload a real file
# ------------------------
st.caption("Or upload a provider CSV and POST it directly to `/import`")
up = st.file_uploader("Upload CSV file", type=["csv"], key="imp_upload")
if up and st.button("POST uploaded CSV", key="btn_upload_post"):
    _post(up.getvalue(), up.name)
