"""Streamlit rendering for the intake wizard."""

from __future__ import annotations

import html
import logging
import time

import streamlit as st
from streamlit.runtime.scriptrunner import RerunException, StopException

import config as app_config
from components.form_fields import (
    checkbox_group,
    date_input_with_state,
    option_radio,
    text_input_with_state,
)
from components.stepper import render_phase_indicator
from constants.keys import AnswerKeys, StateKeys, UIKeys
from core.errors import WizardError
from state import get_controller, reset_state
from wizard.debug.flow_diagram import build_mermaid_flowchart, validate_transition_graph
from wizard.navigation.router import NavigationController
from wizard.navigation.ui import (
    inject_navigation_style,
    maybe_scroll_to_top,
    render_navigation,
    render_progress,
    render_validation_warnings,
)
from wizard.step_registry import FieldKind, StepDefinition, get_step
from wizard.types import StepId

logger = logging.getLogger(__name__)

SUBMIT_FAILED_MESSAGE = "Je aanvraag kon niet worden verstuurd. Probeer het nog een keer."
STEP_FAILED_MESSAGE = "Deze stap kon niet worden geladen. Ga terug of begin een nieuwe aanvraag."
SUCCESS_MESSAGE = "Ik kom binnen 24 uur bij je terug met een concreet voorstel."

WIZARD_LAYOUT_STYLE = """
<style>
.wizard-step-title {
    font-size: 1.7rem;
    font-weight: 700;
    margin: 0.4rem 0 1.1rem;
}

.wizard-success {
    text-align: center;
    padding: 2.5rem 1rem 1.5rem;
}
</style>
"""


def _render_field(definition: StepDefinition, controller: NavigationController) -> None:
    kind = definition.kind
    answer_key = definition.answer_key or ""
    if kind is FieldKind.SINGLE_CHOICE:
        option_radio(
            "Kies een optie",
            controller=controller,
            answer_key=answer_key,
            choices=definition.choices,
        )
    elif kind is FieldKind.MULTI_CHOICE:
        checkbox_group(controller=controller, prefix=answer_key, options=definition.option_values)
    elif kind is FieldKind.TEXT:
        text_input_with_state(
            "Antwoord",
            controller=controller,
            answer_key=answer_key,
            placeholder=definition.placeholder,
            label_visibility="collapsed",
        )
    elif kind is FieldKind.TEXTAREA:
        text_input_with_state(
            "Antwoord",
            controller=controller,
            answer_key=answer_key,
            widget_factory=st.text_area,
            placeholder=definition.placeholder,
            label_visibility="collapsed",
        )
    elif kind is FieldKind.PRACTICAL:
        date_input_with_state("Datum", controller=controller, answer_key=AnswerKeys.EVENT_DATE)
        text_input_with_state(
            "Details",
            controller=controller,
            answer_key=AnswerKeys.EVENT_DETAILS,
            widget_factory=st.text_area,
            placeholder=definition.placeholder,
        )
    elif kind is FieldKind.CONTACT:
        _render_contact_form(definition, controller)


def _render_contact_form(definition: StepDefinition, controller: NavigationController) -> None:
    text_input_with_state("Naam", controller=controller, answer_key=AnswerKeys.CONTACT_NAME)
    email_col, phone_col = st.columns(2)
    with email_col:
        text_input_with_state("E-mail", controller=controller, answer_key=AnswerKeys.CONTACT_EMAIL)
    with phone_col:
        text_input_with_state("Telefoon", controller=controller, answer_key=AnswerKeys.CONTACT_PHONE)
    option_radio(
        "Hoe wil je benaderd worden?",
        controller=controller,
        answer_key=AnswerKeys.CONTACT_PREF,
        choices=definition.choices,
        horizontal=True,
    )
    # Only flag fields the client already touched.
    contact_fields = (AnswerKeys.CONTACT_NAME, AnswerKeys.CONTACT_EMAIL, AnswerKeys.CONTACT_PHONE)
    touched = {key for key in contact_fields if controller.get_answer(key)}
    errors = {key: message for key, message in controller.contact_errors().items() if key in touched}
    render_validation_warnings(errors)


def _render_success(definition: StepDefinition | None, controller: NavigationController) -> None:
    request = controller.last_request
    title = definition.title if definition is not None else ""
    name = request.contact.name if request is not None else ""
    thanks = f"Bedankt voor de details, {name}." if name else "Bedankt voor de details."
    st.markdown(
        f"""
        <div class="wizard-success">
            <h2>{html.escape(title)}</h2>
            <p>{html.escape(thanks)} {SUCCESS_MESSAGE}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    if request is not None:
        with st.expander("Samenvatting"):
            st.write(f"**Dienst:** {request.service_label}")
            for key, value in request.answers.items():
                st.write(f"**{key}:** {value}")
            for group, selected in request.selections.items():
                st.write(f"**{group}:** {', '.join(selected)}")
    st.button("Nieuwe aanvraag", key=UIKeys.NEW_REQUEST, on_click=reset_state, type="primary")


def _commit_pending(controller: NavigationController) -> None:
    """Finish a queued move after the transition delay and rerun."""

    delay = app_config.TRANSITION_DELAY_MS
    if delay:
        time.sleep(delay / 1000)
    try:
        controller.commit_transition()
    except WizardError as error:
        logger.warning("Intake could not be completed", exc_info=error)
        st.session_state[StateKeys.TRANSITION_ERROR] = SUBMIT_FAILED_MESSAGE
    except Exception:
        # Failing submission handlers are logged by the controller.
        st.session_state[StateKeys.TRANSITION_ERROR] = SUBMIT_FAILED_MESSAGE
    # The buttons on this run were drawn locked; redraw them from the new state.
    st.rerun()


def _render_debug_panel(controller: NavigationController) -> None:
    if not app_config.DEBUG_FLOW_DIAGRAM:
        return
    with st.expander("Flowdiagram"):
        st.code(build_mermaid_flowchart(current_step_id=controller.get_current_step()), language="mermaid")
        for warning in validate_transition_graph():
            st.warning(warning)
        st.caption(" -> ".join(str(step) for step in controller.history))


def _render_step(controller: NavigationController) -> None:
    step = controller.get_current_step()
    definition = get_step(step)
    render_phase_indicator(controller.current_phase)
    if step is StepId.SUCCESS:
        _render_success(definition, controller)
        return
    render_progress(controller)
    if definition is not None:
        st.markdown(
            f'<div class="wizard-step-title">{html.escape(definition.title)}</div>',
            unsafe_allow_html=True,
        )
        _render_field(definition, controller)
    render_navigation(controller)


def handle_step_exception(step: StepId, error: Exception) -> None:
    logger.warning("Failed to render wizard step '%s'", step, exc_info=error)
    st.error(STEP_FAILED_MESSAGE)
    st.button("Nieuwe aanvraag", key=f"{UIKeys.NEW_REQUEST}.recover", on_click=reset_state)


def run_wizard() -> None:
    """Render the current intake step and finish any queued transition."""

    st.markdown(WIZARD_LAYOUT_STYLE, unsafe_allow_html=True)
    inject_navigation_style()
    maybe_scroll_to_top()
    controller = get_controller()
    failure = st.session_state.pop(StateKeys.TRANSITION_ERROR, None)
    if failure:
        st.error(failure)
    try:
        _render_step(controller)
    except (RerunException, StopException):  # pragma: no cover - Streamlit control flow
        raise
    except Exception as error:
        handle_step_exception(controller.get_current_step(), error)
    _render_debug_panel(controller)
    if controller.transition_in_progress:
        _commit_pending(controller)


__all__ = ["handle_step_exception", "run_wizard"]
