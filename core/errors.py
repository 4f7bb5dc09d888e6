"""Custom exception types for the intake wizard engine."""

from __future__ import annotations

from typing import Mapping


class WizardError(Exception):
    """Base exception for wizard engine issues."""


class UnknownStepError(WizardError):
    """Raised when a value outside the closed step set reaches the engine."""

    def __init__(self, step: object) -> None:
        super().__init__(f"Unknown wizard step: {step!r}")
        self.step = step


INTAKE_INCOMPLETE_MESSAGE = "De contactgegevens zijn nog niet compleet of geldig."


class IntakeIncompleteError(WizardError):
    """Raised when an intake request is built from answers that fail validation."""

    def __init__(self, errors: Mapping[str, str], message: str | None = None) -> None:
        super().__init__(message or INTAKE_INCOMPLETE_MESSAGE)
        self.errors = dict(errors)
