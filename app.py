# app.py: Streamlit entrypoint for the sound services intake
from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

import config as app_config  # noqa: E402
from utils.logging_context import configure_logging  # noqa: E402
from utils.telemetry import setup_tracing  # noqa: E402
from state import ensure_state  # noqa: E402
from wizard import run_wizard  # noqa: E402

configure_logging(level=app_config.LOG_LEVEL)
setup_tracing()

st.set_page_config(
    page_title=app_config.PAGE_TITLE,
    page_icon="🎚️",
    layout="centered",
)

ensure_state()
run_wizard()
