"""Three-phase indicator shown above the wizard questions."""

from __future__ import annotations

import html
from typing import Final, Sequence

import streamlit as st

from wizard.types import WizardPhase

PHASES: Final[tuple[tuple[WizardPhase, str, str], ...]] = (
    (WizardPhase.SERVICE, "STAP 01", "Dienst Selectie"),
    (WizardPhase.DETAILS, "STAP 02", "Technische Details"),
    (WizardPhase.CONTACT, "STAP 03", "Contact & Planning"),
)


def _inject_workflow_styles() -> None:
    """Inject the indicator styling on every run; reruns drop stale elements."""

    st.markdown(
        """
        <style>
        .workflow-stepper__summary {
            display: flex;
            gap: 1.25rem;
            margin: 0.25rem 0 1rem;
            font-size: 0.8rem;
            letter-spacing: 0.06em;
        }

        .workflow-stepper__summary span {
            color: rgba(15, 23, 42, 0.45);
        }

        .workflow-stepper__summary span b {
            display: block;
            font-weight: 700;
        }

        .workflow-stepper__summary span[data-state="done"] {
            color: rgba(15, 23, 42, 0.75);
        }

        .workflow-stepper__summary span[data-state="current"] {
            color: rgba(15, 23, 42, 0.95);
            border-bottom: 2px solid currentColor;
        }

        @media (max-width: 640px) {
            .workflow-stepper__summary {
                flex-direction: column;
                gap: 0.4rem;
            }
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def _phase_states(active: WizardPhase | None) -> list[str]:
    order = [phase for phase, _number, _label in PHASES]
    if active is None:
        return ["done"] * len(order)
    current = order.index(active)
    return ["done" if idx < current else "current" if idx == current else "upcoming" for idx in range(len(order))]


def _build_summary_segments(active: WizardPhase | None, phases: Sequence[tuple[WizardPhase, str, str]] = PHASES) -> list[str]:
    """Return HTML segments for each phase, tagged done/current/upcoming."""

    segments: list[str] = []
    for state, (_phase, number, label) in zip(_phase_states(active), phases):
        segments.append(f"<span data-state='{state}'><b>{html.escape(number)}</b>{html.escape(label)}</span>")
    return segments


def render_phase_indicator(active: WizardPhase | None) -> None:
    """Render STAP 01-03; ``None`` (the success screen) hides the indicator."""

    if active is None:
        return
    _inject_workflow_styles()
    st.markdown(
        "<div class='workflow-stepper__summary'>" + "".join(_build_summary_segments(active)) + "</div>",
        unsafe_allow_html=True,
    )


__all__ = ["PHASES", "render_phase_indicator"]
