from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import config

APP_FILE = Path(__file__).resolve().parents[2] / "app.py"


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state() -> None:
    """AppTest drives the real session state; leave ``st.session_state`` alone here."""

    yield


@pytest.fixture
def intake_app(monkeypatch: pytest.MonkeyPatch) -> AppTest:
    """The intake app after its first run, with the transition pause switched off."""

    monkeypatch.setattr(config, "TRANSITION_DELAY_MS", 0)
    monkeypatch.setattr(config, "DEBUG_FLOW_DIAGRAM", False)
    app = AppTest.from_file(str(APP_FILE))
    app.run(timeout=30)
    return app
