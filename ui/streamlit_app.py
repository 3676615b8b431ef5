import os

import requests
import streamlit as st
from dotenv import load_dotenv

load_dotenv()

# =========================
# CONFIG
# =========================
st.set_page_config(
    page_title="WeightBuddy",
    page_icon="🟩",
    layout="centered",
)

API_URL = os.getenv("WEIGHTBUDDY_API_URL", "http://127.0.0.1:8080").rstrip("/")

GREEN = "#16a34a"
TEXT = "#0f172a"
MUTED = "#64748b"

st.markdown(
    f"""
<style>
#MainMenu {{visibility: hidden;}}
footer {{visibility: hidden;}}

.wb-topbar {{
    background: {GREEN};
    color: white;
    border-radius: 14px;
    padding: 14px 18px;
    margin-bottom: 16px;
}}
.wb-title {{
    font-size: 18px;
    font-weight: 800;
}}
.wb-sub {{
    font-size: 12px;
    opacity: 0.9;
}}
.wb-result {{
    font-size: 34px;
    font-weight: 900;
    color: {TEXT};
}}
.wb-muted {{
    color: {MUTED};
    font-size: 13px;
}}
</style>
""",
    unsafe_allow_html=True,
)


@st.cache_data(ttl=300)
def fetch_materials():
    r = requests.get(f"{API_URL}/materials", timeout=10)
    r.raise_for_status()
    return r.json()


def call_backend(filename: str, data: bytes, params: dict):
    r = requests.post(
        f"{API_URL}/calculate_weight",
        params=params,
        files={"file": (filename, data, "model/stl")},
        timeout=60,
    )
    body = r.json()
    if r.status_code != 200:
        raise ValueError(body.get("error") or body.get("detail") or f"HTTP {r.status_code}")
    return body


st.markdown(
    """
<div class="wb-topbar">
  <div class="wb-title">WeightBuddy</div>
  <div class="wb-sub">STL weight estimate • FastAPI</div>
</div>
""",
    unsafe_allow_html=True,
)

try:
    materials = fetch_materials()
except requests.RequestException as exc:
    st.error(f"Backend not reachable at {API_URL}: {exc}")
    st.stop()

names = [m.upper() for m in materials["densities_g_cm3"]]
default = materials.get("default", "PLA")

with st.form("weight_form"):
    stl = st.file_uploader("STL model", type=["stl"])
    c1, c2, c3 = st.columns(3)
    x = c1.number_input("X (mm)", min_value=0.01, value=100.0)
    y = c2.number_input("Y (mm)", min_value=0.01, value=100.0)
    z = c3.number_input("Z (mm)", min_value=0.01, value=100.0)
    infill = st.slider("Infill (%)", min_value=0, max_value=100, value=20)
    material = st.selectbox("Material", names, index=names.index(default) if default in names else 0)
    shell = st.checkbox("Count walls and top/bottom layers as solid", value=False)
    submitted = st.form_submit_button("Estimate weight", use_container_width=True)

if submitted:
    if stl is None:
        st.warning("Upload an STL file first.")
        st.stop()

    params = {
        "x_dim": x,
        "y_dim": y,
        "z_dim": z,
        "infill_percentage": infill,
        "material": material.lower(),
        "shell": str(shell).lower(),
        "inspect": "true",
    }
    with st.spinner("Weighing your model..."):
        try:
            result = call_backend(stl.name, stl.getvalue(), params)
        except (requests.RequestException, ValueError) as exc:
            st.error(str(exc))
            st.stop()

    st.markdown(f'<div class="wb-result">{result["weight_grams"]} g</div>', unsafe_allow_html=True)
    density = materials["densities_g_cm3"].get(material.lower())
    st.markdown(
        f'<div class="wb-muted">{material} @ {density} g/cm³, {infill}% infill, {x:g} × {y:g} × {z:g} mm</div>',
        unsafe_allow_html=True,
    )

    mesh = result.get("mesh") or {}
    if mesh and mesh.get("mesh_issue") != "ok":
        st.warning(f"Mesh check: {mesh.get('mesh_issue')}. The estimate may be off.")
