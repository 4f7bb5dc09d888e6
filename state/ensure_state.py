"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable

import streamlit as st

from constants.keys import StateKeys
from utils.logging_context import set_session_id, set_wizard_step
from wizard.navigation import NavigationController, WizardSessionKeys
from wizard.submission import IntakeRequest, SubmissionHandler, chain_handlers, log_submission

logger = logging.getLogger(__name__)

SESSION_KEYS = WizardSessionKeys()

_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.SUBMISSIONS: list,
        StateKeys.SCROLL_TO_TOP: lambda: False,
    }
)

# Survive "Nieuwe aanvraag"; everything else is widget or UI state.
_PRESERVED_KEYS: frozenset[str] = frozenset({StateKeys.SUBMISSIONS, SESSION_KEYS.controller})


def _record_submission(request: IntakeRequest) -> None:
    submissions = st.session_state.setdefault(StateKeys.SUBMISSIONS, [])
    submissions.append(request.model_dump())


def build_submission_handler() -> SubmissionHandler:
    """Return the handler used for completed intakes: log, then keep in the session."""

    return chain_handlers([log_submission, _record_submission])


def ensure_state() -> None:
    """Initialize ``st.session_state`` with required keys.

    Existing keys are preserved; the navigation controller is created once per
    browser session.
    """

    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory()

    controller = st.session_state.get(SESSION_KEYS.controller)
    if not isinstance(controller, NavigationController):
        controller = NavigationController(submit=build_submission_handler())
        st.session_state[SESSION_KEYS.controller] = controller
        set_session_id(controller.session_id)
        logger.info("Started intake session")
    else:
        set_session_id(controller.session_id)
    # Each Streamlit run is a fresh thread; rebind the step for render-time logs.
    set_wizard_step(controller.get_current_step())
    st.session_state[StateKeys.WIZARD_SESSION_READY] = True


def get_controller() -> NavigationController:
    ensure_state()
    return st.session_state[SESSION_KEYS.controller]


def reset_state() -> None:
    """Start a new intake while keeping the controller and past submissions.

    Widget values are dropped so every question renders empty again.
    """

    controller = st.session_state.get(SESSION_KEYS.controller)
    if isinstance(controller, NavigationController):
        controller.reset()
    for key in list(st.session_state.keys()):
        if key not in _PRESERVED_KEYS:
            del st.session_state[key]
    ensure_state()
