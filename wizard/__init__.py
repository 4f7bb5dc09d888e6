"""Intake wizard: step catalog, router, navigation and Streamlit flow."""

from __future__ import annotations

import importlib
from typing import Any

from .answers import AnswerSet
from .transitions import determine_next_step
from .types import INITIAL_STEP, TERMINAL_STEP, StepId, WizardPhase

__all__ = [
    "AnswerSet",
    "INITIAL_STEP",
    "StepId",
    "TERMINAL_STEP",
    "WizardPhase",
    "determine_next_step",
    "run_wizard",
]

# Provided by ``wizard.flow``, which pulls in Streamlit and the session state.
FLOW_EXPORTS: frozenset[str] = frozenset({"handle_step_exception", "run_wizard"})


def __getattr__(name: str) -> Any:
    """Load ``wizard.flow`` attributes lazily to avoid circular imports."""

    if name not in FLOW_EXPORTS:
        raise AttributeError(f"module {__name__} has no attribute {name}")
    value: Any = getattr(importlib.import_module(f"{__name__}.flow"), name)
    globals()[name] = value
    return value
