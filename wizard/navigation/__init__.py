"""Navigation for the intake wizard: visited-step stack, controller and buttons."""

from __future__ import annotations

from wizard.navigation.keys import WizardSessionKeys
from wizard.navigation.router import NavigationController, ProgressSnapshot
from wizard.navigation.stack import NavigationStack
from wizard.navigation.state import IntakeSession, PendingTransition, TransitionDirection

__all__ = [
    "IntakeSession",
    "NavigationController",
    "NavigationStack",
    "PendingTransition",
    "ProgressSnapshot",
    "TransitionDirection",
    "WizardSessionKeys",
]
