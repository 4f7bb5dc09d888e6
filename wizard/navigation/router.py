from __future__ import annotations

import logging
from dataclasses import dataclass

from wizard.answers import AnswerSet
from wizard.navigation.state import IntakeSession, PendingTransition, TransitionDirection
from wizard.progress import estimate_progress
from wizard.step_registry import resolve_phase
from wizard.submission import IntakeRequest, SubmissionHandler, build_intake_request
from wizard.transitions import determine_next_step
from wizard.types import AnswerValue, StepId, WizardPhase
from wizard.validation import contact_errors, is_step_complete, missing_required_answers
from utils.logging_context import log_context, set_wizard_step
from utils.telemetry import get_wizard_tracer

logger = logging.getLogger(__name__)
tracer = get_wizard_tracer()


@dataclass(frozen=True)
class ProgressSnapshot:
    """Where the client currently is, for the header above each step."""

    step: StepId
    phase: WizardPhase | None
    depth: int
    percent: int
    can_advance: bool
    can_retreat: bool


class NavigationController:
    """Own the answers and the visited-step stack of one intake session.

    Moves happen in two phases so the UI can play its transition: a request
    (:meth:`request_advance` / :meth:`request_retreat`) locks navigation and
    :meth:`commit_transition` applies the move and releases the lock. The
    :meth:`advance` and :meth:`retreat` shortcuts do both at once.
    """

    def __init__(
        self,
        session: IntakeSession | None = None,
        *,
        submit: SubmissionHandler | None = None,
    ) -> None:
        self._session = session or IntakeSession()
        self._submit = submit
        self._last_request: IntakeRequest | None = None
        set_wizard_step(self.get_current_step())

    @property
    def session(self) -> IntakeSession:
        return self._session

    @property
    def session_id(self) -> str:
        return self._session.session_id

    @property
    def answers(self) -> AnswerSet:
        return self._session.answers

    @property
    def history(self) -> tuple[StepId, ...]:
        return self._session.stack.history

    @property
    def current_phase(self) -> WizardPhase | None:
        return resolve_phase(self.get_current_step())

    @property
    def transition_in_progress(self) -> bool:
        return self._session.pending is not None

    @property
    def pending_transition(self) -> PendingTransition | None:
        return self._session.pending

    @property
    def last_request(self) -> IntakeRequest | None:
        """Briefing handed to the submission callable on the last completed intake."""

        return self._last_request

    def get_current_step(self) -> StepId:
        return self._session.stack.current

    def get_answer(self, key: str, default: AnswerValue = None) -> AnswerValue:
        return self._session.answers.get(key, default)

    def set_answer(self, key: str, value: AnswerValue) -> None:
        self._session.answers.set(key, value)

    def toggle_option(self, prefix: str, option: str) -> bool:
        return self._session.answers.toggle(prefix, option)

    def next_step(self) -> StepId | None:
        return determine_next_step(self.get_current_step(), self._session.answers)

    def missing_answers(self) -> list[str]:
        return missing_required_answers(self.get_current_step(), self._session.answers)

    def contact_errors(self) -> dict[str, str]:
        return contact_errors(self._session.answers)

    def can_advance(self) -> bool:
        """Return whether the current step has a successor and its fields are complete."""

        step = self.get_current_step()
        if self.next_step() is None:
            return False
        return is_step_complete(step, self._session.answers)

    def can_retreat(self) -> bool:
        return self._session.stack.can_retreat

    def get_progress(self) -> int:
        stack = self._session.stack
        return estimate_progress(stack.depth, stack.current)

    def snapshot(self) -> ProgressSnapshot:
        step = self.get_current_step()
        return ProgressSnapshot(
            step=step,
            phase=resolve_phase(step),
            depth=self._session.stack.depth,
            percent=self.get_progress(),
            can_advance=self.can_advance(),
            can_retreat=self.can_retreat(),
        )

    def request_advance(self) -> bool:
        """Lock navigation for a forward move; return ``False`` when nothing was queued."""

        if self.transition_in_progress:
            logger.debug("Ignoring advance request while a transition is pending")
            return False
        step = self.get_current_step()
        if not self.can_advance():
            logger.debug("Advance from '%s' rejected", step)
            return False
        self._session.pending = PendingTransition(
            direction=TransitionDirection.FORWARD,
            source=step,
            target=self.next_step(),
        )
        return True

    def request_retreat(self) -> bool:
        """Lock navigation for a backward move; return ``False`` when nothing was queued."""

        if self.transition_in_progress:
            logger.debug("Ignoring retreat request while a transition is pending")
            return False
        step = self.get_current_step()
        if not self.can_retreat():
            logger.debug("Retreat from '%s' rejected at the first step", step)
            return False
        self._session.pending = PendingTransition(direction=TransitionDirection.BACKWARD, source=step)
        return True

    def commit_transition(self) -> StepId | None:
        """Apply the pending move and return the new current step.

        Returns ``None`` when no move was pending. When the submission callable
        raises, the stack stays on the contact step, the lock is released and
        the error propagates.
        """

        pending = self._session.pending
        if pending is None:
            return None
        try:
            if pending.direction is TransitionDirection.FORWARD:
                self._apply_forward(pending)
            else:
                self._apply_backward(pending)
        finally:
            self._session.pending = None
        current = self.get_current_step()
        set_wizard_step(current)
        return current

    def advance(self) -> bool:
        if not self.request_advance():
            return False
        self.commit_transition()
        return True

    def retreat(self) -> bool:
        if not self.request_retreat():
            return False
        self.commit_transition()
        return True

    def reset(self) -> None:
        """Clear every answer and return to the first step under a new session id."""

        previous = self._session.session_id
        self._session.renew()
        self._last_request = None
        set_wizard_step(self.get_current_step())
        logger.info("Intake session %s reset; new session %s", previous, self._session.session_id)

    def _apply_forward(self, pending: PendingTransition) -> None:
        target = pending.target
        if target is None:
            return
        with tracer.start_as_current_span("wizard.advance") as span:
            span.set_attribute("wizard.session_id", self.session_id)
            span.set_attribute("wizard.from_step", str(pending.source))
            span.set_attribute("wizard.to_step", str(target))
            if pending.source is StepId.CONTACT and target is StepId.SUCCESS:
                self._deliver()
            self._session.stack.advance(target)
            span.set_attribute("wizard.depth", self._session.stack.depth)
        with log_context(wizard_step=target):
            logger.info("Advanced from '%s' to '%s'", pending.source, target)

    def _apply_backward(self, pending: PendingTransition) -> None:
        with tracer.start_as_current_span("wizard.retreat") as span:
            span.set_attribute("wizard.session_id", self.session_id)
            span.set_attribute("wizard.from_step", str(pending.source))
            self._session.stack.retreat()
            current = self.get_current_step()
            span.set_attribute("wizard.to_step", str(current))
        with log_context(wizard_step=current):
            logger.info("Went back from '%s' to '%s'", pending.source, current)

    def _deliver(self) -> None:
        request = build_intake_request(self._session.answers, path=self.history)
        if self._submit is not None:
            try:
                self._submit(request)
            except Exception:
                logger.exception("Submission of intake session %s failed", self.session_id)
                raise
        self._last_request = request


__all__ = ["NavigationController", "ProgressSnapshot"]
