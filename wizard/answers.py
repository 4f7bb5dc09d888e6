"""Answer set accumulated while a client walks through the intake wizard."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Final

from constants.keys import AnswerKeys
from wizard.types import AnswerValue

DEFAULT_CONTACT_PREFERENCE: Final[str] = "email"

DEFAULT_ANSWERS: Final[Mapping[str, AnswerValue]] = {
    AnswerKeys.CONTACT_PREF: DEFAULT_CONTACT_PREFERENCE,
}


def option_key(prefix: str, option: str) -> str:
    """Return the namespaced answer key for a multi-select ``option``."""

    return f"{prefix}{option}"


class AnswerSet(Mapping[str, AnswerValue]):
    """Read-only mapping view with a single mutation entry point.

    Answers are only written through :meth:`set` (and :meth:`toggle`, which is
    built on it) and only removed by :meth:`clear`, which restores the
    defaults.
    """

    def __init__(self, initial: Mapping[str, AnswerValue] | None = None) -> None:
        self._values: dict[str, AnswerValue] = dict(DEFAULT_ANSWERS)
        if initial:
            self._values.update(initial)

    def __getitem__(self, key: str) -> AnswerValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AnswerSet({self._values!r})"

    def set(self, key: str, value: AnswerValue) -> None:
        if not isinstance(key, str) or not key:
            raise ValueError("Answer keys must be non-empty strings")
        self._values[key] = value

    def toggle(self, prefix: str, option: str) -> bool:
        """Flip the checkbox flag for ``option`` and return the new state."""

        key = option_key(prefix, option)
        selected = not bool(self._values.get(key))
        self.set(key, selected)
        return selected

    def is_selected(self, prefix: str, option: str) -> bool:
        return bool(self._values.get(option_key(prefix, option)))

    def selected_options(self, prefix: str, options: Iterable[str] | None = None) -> list[str]:
        """Return checked options for ``prefix``.

        When ``options`` is given the result follows its order, otherwise the
        order in which the flags were first written.
        """

        if options is not None:
            return [option for option in options if self.is_selected(prefix, option)]
        return [key[len(prefix) :] for key, value in self._values.items() if key.startswith(prefix) and value is True]

    def clear(self) -> None:
        self._values = dict(DEFAULT_ANSWERS)

    def snapshot(self) -> dict[str, AnswerValue]:
        return dict(self._values)


__all__ = [
    "AnswerSet",
    "DEFAULT_ANSWERS",
    "DEFAULT_CONTACT_PREFERENCE",
    "option_key",
]
