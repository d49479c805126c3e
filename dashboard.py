import streamlit as st
import requests
import pandas as pd
import os
import logging

# ==============================================================================
# Application Configuration
# ==============================================================================
st.set_page_config(
    page_title="Open Clinic: Medicine Information",
    page_icon="🏥",
    layout="wide"
)

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", 8000))
API_BASE = f"http://{API_HOST}:{API_PORT}"

FIELD_LABELS = {
    "brandName": "Brand Name",
    "genericName": "Generic Name",
    "manufacturer": "Manufacturer",
    "indications": "Indications",
    "mechanism": "Mechanism of Action",
    "sideEffects": "Side Effects",
    "dosage": "Dosage",
    "precautions": "Precautions",
    "contraindications": "Contraindications",
    "drugInteractions": "Drug Interactions",
}

# ==============================================================================
# Main Application UI
# ==============================================================================

st.title("🏥 Open Clinic: Medicine Information")
st.markdown("""
Type a brand or generic medicine name. The service looks it up in the
openFDA drug-label database and shows the key label sections.
""")
st.info(f"**API Status:** Using the backend server at `{API_BASE}`")

# --- Search Box with Suggestions ---
st.header("1. Search a Medicine")
medicine_name = st.text_input("Medicine name", placeholder="e.g. Ibuprofen")

if medicine_name and len(medicine_name.strip()) >= 2:
    try:
        resp = requests.get(f"{API_BASE}/api/suggestions", params={"q": medicine_name}, timeout=5)
        suggestions = resp.json().get("suggestions", [])
        if suggestions:
            st.caption("Did you mean: " + ", ".join(suggestions))
    except requests.exceptions.RequestException as e:
        logging.warning(f"Suggestions unavailable: {e}")

# --- Lookup and Result Display ---
if st.button("Search", disabled=not medicine_name):
    logging.info(f"Looking up: {medicine_name}")

    with st.spinner('Searching the FDA label database...'):
        try:
            response = requests.get(f"{API_BASE}/api/medicine", params={"name": medicine_name}, timeout=60)
            data = response.json()

            if response.status_code == 200:
                st.success(f"Found label information for **{data['name']}**")
                st.header("2. Label Information")

                col1, col2 = st.columns(2)
                with col1:
                    st.subheader("💊 Overview")
                    st.write(f"**Brand Name:** {data['brandName']}")
                    st.write(f"**Generic Name:** {data['genericName']}")
                    st.write(f"**Manufacturer:** {data['manufacturer']}")
                with col2:
                    st.subheader("📋 Indications")
                    st.markdown(data['indications'])

                st.markdown("---")

                df_fields = pd.DataFrame(
                    [(label, data.get(key, "")) for key, label in FIELD_LABELS.items()],
                    columns=["Section", "Details"]
                )
                st.dataframe(df_fields, use_container_width=True, hide_index=True)
            elif response.status_code == 404:
                st.warning(data.get("error", "No information found."))
                for tip in data.get("suggestions", []):
                    st.write(f"- {tip}")
            else:
                st.error(f"{data.get('error', 'Lookup failed.')} (Status Code: {response.status_code})")
                if data.get("details"):
                    st.caption(data["details"])

        except requests.exceptions.RequestException as e:
            st.error(f"**Connection Error:** Could not connect to the API server. Error: {e}")
