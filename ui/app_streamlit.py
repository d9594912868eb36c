"""
Streamlit developer console for the Job Hunt API.

Talks to the API over HTTP (default http://127.0.0.1:8000) and renders every
response envelope as-is. Run with: streamlit run ui/app_streamlit.py
"""
import sys
from pathlib import Path

import requests
import streamlit as st

# Allow `streamlit run ui/app_streamlit.py` from the project root
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from config.settings import settings
from models.schemas import Envelope
from ui.checkbox import Checkbox

API_URL = st.text_input("API URL", settings.CONSOLE_API_URL, key="api_url")

st.title("🧰 Job Hunt API: Developer Console")


def call_api(method: str, path: str, payload: dict | None = None, timeout: int = 30) -> Envelope | None:
    """Call the API and parse the envelope; shows the error and returns None on transport failure."""
    try:
        resp = requests.request(method, f"{API_URL}{path}", json=payload, timeout=timeout)
        return Envelope.model_validate(resp.json())
    except requests.exceptions.RequestException as e:
        st.error(f"API Error: {str(e)}")
    except ValueError as e:
        st.error(f"Malformed response: {str(e)}")
    return None


def show(envelope: Envelope | None, success_text: str) -> None:
    if envelope is None:
        return
    if envelope.success:
        st.success(f"✅ {envelope.message or success_text}")
        st.json(envelope.data)
    else:
        st.error(f"❌ {envelope.message or 'Request failed'}: {envelope.error}")
    if envelope.timestamp:
        st.caption(f"Server time: {envelope.timestamp}")


# ==================== SESSION ====================
st.header("🔐 Dev Session")
if st.button("Load dev session"):
    show(call_api("GET", "/api/auth/dev-session"), "Session loaded")

# ==================== AUTO-APPLY ====================
st.header("🤖 Auto-apply")
config_id = st.text_input("Job board configuration ID", "", key="config_id")


def _on_mode_change(checked: bool) -> None:
    st.toast("Real automation enabled" if checked else "Demo mode")


real_mode = Checkbox(checked=False, on_checked_change=_on_mode_change)
use_real = real_mode.render("Use real automation", key="use_real_automation",
                            help="Unchecked runs the automation in demo mode")

if st.button("🚀 Run automation"):
    with st.spinner("Running automation..."):
        show(
            call_api("POST", "/api/auto-apply", {"configId": config_id, "useRealAutomation": use_real}, timeout=600),
            "Automation completed",
        )

# ==================== AUTOMATION TEST ====================
st.header("🧪 Automation test")
col1, col2 = st.columns(2)
with col1:
    if st.button("Check availability"):
        show(call_api("GET", "/api/test-automation"), "Available")
with col2:
    if st.button("Start test session"):
        show(call_api("POST", "/api/test-automation"), "Started")

# ==================== DATABASE ====================
st.header("🗄️ Database probes")
col3, col4 = st.columns(2)
with col3:
    if st.button("Connectivity"):
        show(call_api("GET", "/api/db-test"), "Database connection successful")
with col4:
    if st.button("Direct query"):
        envelope = call_api("GET", "/api/jobs/debug-query")
        if envelope is not None and envelope.success:
            st.success(f"✅ {envelope.message}")
            st.dataframe((envelope.data or {}).get("jobs", []))
        else:
            show(envelope, "Direct query successful")
