from __future__ import annotations

import logging
from typing import Any

from constants.keys import AnswerKeys
from utils.logging_context import (
    configure_logging,
    current_context,
    log_context,
    set_session_id,
    set_wizard_step,
)
from wizard.navigation import NavigationController


def test_navigation_logging_includes_context(caplog: Any) -> None:
    configure_logging()
    set_session_id("session-123")
    caplog.set_level(logging.INFO, logger="wizard.navigation.router")
    controller = NavigationController()
    controller.set_answer(AnswerKeys.MAIN_SERVICE, "studio")

    controller.advance()

    records = [record for record in caplog.records if "Advanced from" in record.message]
    assert records, "Expected a transition log entry"
    record = records[0]
    assert record.session_id == "session-123"
    assert record.wizard_step == "studio-type"


def test_log_context_restores_previous_values() -> None:
    configure_logging()
    set_session_id("outer")
    set_wizard_step("main")

    with log_context(session_id="inner", wizard_step="contact"):
        assert current_context() == {"session_id": "inner", "wizard_step": "contact"}

    assert current_context() == {"session_id": "outer", "wizard_step": "main"}


def test_blank_values_are_rendered_as_dash() -> None:
    set_session_id("  ")
    set_wizard_step(None)

    assert current_context() == {"session_id": "-", "wizard_step": "-"}
