"""Session object owned by one navigation controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import uuid4

from wizard.answers import AnswerSet
from wizard.navigation.stack import NavigationStack
from wizard.types import StepId


class TransitionDirection(StrEnum):
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True)
class PendingTransition:
    """A requested move waiting for the display transition to finish."""

    direction: TransitionDirection
    source: StepId
    target: StepId | None = None


def _new_session_id() -> str:
    return uuid4().hex[:12]


@dataclass
class IntakeSession:
    """Answer set and navigation stack for a single intake."""

    session_id: str = field(default_factory=_new_session_id)
    answers: AnswerSet = field(default_factory=AnswerSet)
    stack: NavigationStack = field(default_factory=NavigationStack)
    pending: PendingTransition | None = None

    def renew(self) -> None:
        """Start over with defaults under a fresh session id."""

        self.session_id = _new_session_id()
        self.answers.clear()
        self.stack.reset()
        self.pending = None


__all__ = ["IntakeSession", "PendingTransition", "TransitionDirection"]
