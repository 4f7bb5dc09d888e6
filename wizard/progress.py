"""Coarse completion estimate shown above the wizard."""

from __future__ import annotations

from typing import Final

from wizard.types import StepId

STEP_WEIGHT: Final[int] = 6
BASE_PROGRESS: Final[int] = 10
# Ceiling for every step before contact.
PROGRESS_CAP: Final[int] = 90
CONTACT_PROGRESS: Final[int] = 95
COMPLETE_PROGRESS: Final[int] = 100


def estimate_progress(depth: int, step: StepId) -> int:
    """Return a percentage in ``[0, 100]`` for a stack of ``depth`` ending at ``step``."""

    if step is StepId.SUCCESS:
        return COMPLETE_PROGRESS
    if step is StepId.CONTACT:
        return CONTACT_PROGRESS
    return max(0, min(PROGRESS_CAP, BASE_PROGRESS + STEP_WEIGHT * depth))


__all__ = ["estimate_progress", "PROGRESS_CAP"]
