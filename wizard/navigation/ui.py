from __future__ import annotations

import html
from collections.abc import Mapping

import streamlit as st

from constants.keys import StateKeys, UIKeys
from wizard.navigation.router import NavigationController
from wizard.types import StepId

BACK_LABEL = "Terug"
NEXT_LABEL = "Volgende"
SUBMIT_LABEL = "Aanvraag versturen"
INCOMPLETE_HINT = "Maak eerst een keuze of vul het veld in om verder te gaan."

_NAVIGATION_STYLE = """
<style>
.wizard-nav-marker + div[data-testid="stHorizontalBlock"] {
    display: flex;
    justify-content: space-between;
    gap: 0.6rem;
    margin: 1.4rem auto 0.6rem;
    max-width: 560px;
}

.wizard-nav-marker + div[data-testid="stHorizontalBlock"] button {
    width: 100%;
    min-height: 3rem;
    border-radius: 14px;
}

.wizard-nav-marker + div[data-testid="stHorizontalBlock"] button[kind="primary"] {
    font-weight: 650;
    box-shadow: 0 14px 28px rgba(17, 24, 39, 0.22);
}

.wizard-nav-marker + div[data-testid="stHorizontalBlock"] button:disabled {
    box-shadow: none;
    opacity: 0.5;
}

.wizard-progress-label {
    color: rgba(15, 23, 42, 0.6);
    font-size: 0.8rem;
    letter-spacing: 0.08em;
    text-align: right;
}

.wizard-nav-warning {
    margin: 0.45rem auto 0;
    max-width: 560px;
    padding: 0.6rem 0.85rem;
    border-radius: 12px;
    border: 1px solid rgba(245, 158, 11, 0.35);
    background: rgba(251, 191, 36, 0.18);
    font-size: 0.92rem;
}

@media (max-width: 768px) {
    .wizard-nav-marker + div[data-testid="stHorizontalBlock"] {
        flex-direction: column-reverse;
    }
}
</style>
"""


def inject_navigation_style() -> None:
    st.markdown(_NAVIGATION_STYLE, unsafe_allow_html=True)


def render_progress(controller: NavigationController) -> None:
    """Show the completion bar above the current question."""

    percent = controller.get_progress()
    st.progress(percent / 100)
    st.markdown(f'<div class="wizard-progress-label">{percent}%</div>', unsafe_allow_html=True)


def _request_advance(controller: NavigationController) -> None:
    if controller.request_advance():
        st.session_state[StateKeys.SCROLL_TO_TOP] = True


def _request_retreat(controller: NavigationController) -> None:
    if controller.request_retreat():
        st.session_state[StateKeys.SCROLL_TO_TOP] = True


def render_navigation(controller: NavigationController) -> None:
    """Render the back and next buttons for the current step.

    Both buttons are disabled while a transition is pending. Clicks only queue
    the move; the flow commits it on the following run.
    """

    step = controller.get_current_step()
    if step is StepId.SUCCESS:
        return
    locked = controller.transition_in_progress
    next_label = SUBMIT_LABEL if step is StepId.CONTACT else NEXT_LABEL

    st.markdown('<div class="wizard-nav-marker"></div>', unsafe_allow_html=True)
    back_col, next_col = st.columns(2)
    with back_col:
        st.button(
            BACK_LABEL,
            key=UIKeys.NAV_BACK,
            disabled=locked or not controller.can_retreat(),
            on_click=_request_retreat,
            args=(controller,),
            width="stretch",
        )
    with next_col:
        st.button(
            next_label,
            key=UIKeys.NAV_NEXT,
            type="primary",
            disabled=locked or not controller.can_advance(),
            on_click=_request_advance,
            args=(controller,),
            width="stretch",
        )
    if not locked and step is not StepId.CONTACT and not controller.can_advance():
        st.caption(INCOMPLETE_HINT)


def render_validation_warnings(errors: Mapping[str, str]) -> None:
    messages = list(dict.fromkeys(errors.values())) if errors else []
    if not messages:
        return
    sanitized = "<br />".join(html.escape(message) for message in messages)
    st.markdown(f'<div class="wizard-nav-warning">{sanitized}</div>', unsafe_allow_html=True)


def maybe_scroll_to_top() -> None:
    if not st.session_state.pop(StateKeys.SCROLL_TO_TOP, False):
        return
    st.markdown(
        """
        <script>
        (function() {
            const target = window.document.querySelector('section.main');
            if (target) {
                target.scrollIntoView({ behavior: 'smooth', block: 'start' });
            } else {
                window.scrollTo({ top: 0, behavior: 'smooth' });
            }
        })();
        </script>
        """,
        unsafe_allow_html=True,
    )


__all__ = [
    "inject_navigation_style",
    "maybe_scroll_to_top",
    "render_navigation",
    "render_progress",
    "render_validation_warnings",
]
