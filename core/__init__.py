"""Core package for the intake engine's shared errors and patterns."""

from .errors import IntakeIncompleteError, UnknownStepError, WizardError

__all__ = ["IntakeIncompleteError", "UnknownStepError", "WizardError"]
