"""Path of visited steps used for back-navigation."""

from __future__ import annotations

from collections.abc import Iterator

from wizard.types import INITIAL_STEP, StepId


class NavigationStack:
    """Ordered history from the initial step to the current one.

    The first entry is always the initial step and the stack is never empty.
    """

    def __init__(self, initial: StepId = INITIAL_STEP) -> None:
        self._initial = initial
        self._steps: list[StepId] = [initial]

    @property
    def current(self) -> StepId:
        return self._steps[-1]

    @property
    def depth(self) -> int:
        return len(self._steps)

    @property
    def history(self) -> tuple[StepId, ...]:
        return tuple(self._steps)

    @property
    def can_retreat(self) -> bool:
        return len(self._steps) > 1

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[StepId]:
        return iter(tuple(self._steps))

    def __repr__(self) -> str:
        return f"NavigationStack({[str(step) for step in self._steps]!r})"

    def advance(self, next_step: StepId) -> None:
        """Push ``next_step``; callers obtain it from the step router first."""

        self._steps.append(next_step)

    def retreat(self) -> StepId | None:
        """Pop the current step and return it, or ``None`` at the initial step."""

        if not self.can_retreat:
            return None
        return self._steps.pop()

    def reset(self) -> None:
        self._steps = [self._initial]


__all__ = ["NavigationStack"]
