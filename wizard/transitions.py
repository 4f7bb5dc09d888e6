"""Decision table that routes the intake wizard from one step to the next.

Every :class:`~wizard.types.StepId` maps to exactly one transition variant.
A variant only reads the answer set; it never writes to it. ``None`` means
"no forward transition", which the presentation layer renders as a disabled
next button.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final, Union

from constants import options
from constants.keys import AnswerKeys
from core.errors import UnknownStepError
from wizard.answers import option_key
from wizard.types import Answers, StepId


@dataclass(frozen=True)
class Fixed:
    """Single successor, independent of the answers."""

    target: StepId

    def resolve(self, _answers: Answers) -> StepId | None:
        return self.target

    def targets(self) -> tuple[StepId, ...]:
        return (self.target,)


@dataclass(frozen=True)
class Branch:
    """Pick the successor registered for the value stored under ``answer_key``."""

    answer_key: str
    routes: Mapping[str, StepId] = field(default_factory=dict)

    def resolve(self, answers: Answers) -> StepId | None:
        value = answers.get(self.answer_key)
        if not isinstance(value, str):
            return None
        return self.routes.get(value)

    def targets(self) -> tuple[StepId, ...]:
        return tuple(dict.fromkeys(self.routes.values()))


@dataclass(frozen=True)
class AnyOptionSelected:
    """Route on whether any of a set of checkbox flags is checked."""

    answer_keys: tuple[str, ...]
    when_selected: StepId
    otherwise: StepId

    def resolve(self, answers: Answers) -> StepId | None:
        if any(answers.get(key) for key in self.answer_keys):
            return self.when_selected
        return self.otherwise

    def targets(self) -> tuple[StepId, ...]:
        return (self.when_selected, self.otherwise)


@dataclass(frozen=True)
class Terminal:
    """No forward transition."""

    def resolve(self, _answers: Answers) -> StepId | None:
        return None

    def targets(self) -> tuple[StepId, ...]:
        return ()


Transition = Union[Fixed, Branch, AnyOptionSelected, Terminal]


def _routes(values: tuple[str, ...], target: StepId) -> dict[str, StepId]:
    return {value: target for value in values}


_NON_CONCERT_EVENTS: Final[tuple[str, ...]] = tuple(
    event for event in options.EVENT_TYPE_OPTIONS if event != options.EVENT_CONCERT
)
_SOLO_PERFORMERS: Final[tuple[str, ...]] = tuple(
    performer for performer in options.PERFORMER_OPTIONS if performer not in options.BAND_PERFORMERS
)


TRANSITIONS: Final[Mapping[StepId, Transition]] = {
    StepId.MAIN: Branch(
        AnswerKeys.MAIN_SERVICE,
        {
            "live": StepId.LIVE_TYPE,
            "studio": StepId.STUDIO_TYPE,
            "nabewerking": StepId.NABEWERKING_TYPE,
            "advies": StepId.ADVIES_WHO,
            "anders": StepId.ANDERS_BESCHRIJVING,
        },
    ),
    # Live sound: hire-me-directly versus organizer path.
    StepId.LIVE_TYPE: Branch(
        AnswerKeys.LIVE_TYPE,
        {"hire": StepId.LIVE_HIRE_ROLE, "organize": StepId.LIVE_EVENT_TYPE},
    ),
    StepId.LIVE_HIRE_ROLE: Fixed(StepId.LIVE_HIRE_DETAILS),
    StepId.LIVE_HIRE_DETAILS: Fixed(StepId.CONTACT),
    StepId.LIVE_EVENT_TYPE: Branch(
        AnswerKeys.EVENT_TYPE,
        {
            options.EVENT_CONCERT: StepId.PERFORMERS,
            options.EVENT_CONCERT_SHORT: StepId.PERFORMERS,
            **_routes(_NON_CONCERT_EVENTS, StepId.LIVE_MUSIC_CHECK),
        },
    ),
    StepId.LIVE_MUSIC_CHECK: Branch(
        AnswerKeys.HAS_LIVE_MUSIC,
        {"ja": StepId.PERFORMERS, "nee": StepId.LOCATION_EQUIPMENT},
    ),
    StepId.PERFORMERS: Branch(
        AnswerKeys.PERFORMERS,
        {
            **_routes(tuple(sorted(options.BAND_PERFORMERS)), StepId.INSTRUMENTS),
            **_routes(_SOLO_PERFORMERS, StepId.LOCATION_EQUIPMENT),
        },
    ),
    StepId.INSTRUMENTS: Fixed(StepId.LOCATION_EQUIPMENT),
    StepId.LOCATION_EQUIPMENT: AnyOptionSelected(
        (
            option_key(AnswerKeys.EQUIPMENT_PREFIX, options.EQUIPMENT_UNKNOWN),
            option_key(AnswerKeys.EQUIPMENT_PREFIX, options.EQUIPMENT_NONE),
        ),
        when_selected=StepId.LOCATION_NAME,
        otherwise=StepId.LIVE_PRACTICAL,
    ),
    StepId.LOCATION_NAME: Fixed(StepId.LIVE_PRACTICAL),
    StepId.LIVE_PRACTICAL: Fixed(StepId.CONTACT),
    StepId.STUDIO_TYPE: Fixed(StepId.STUDIO_DETAILS),
    StepId.STUDIO_DETAILS: Fixed(StepId.CONTACT),
    StepId.NABEWERKING_TYPE: Fixed(StepId.NABEWERKING_DETAILS),
    StepId.NABEWERKING_DETAILS: Fixed(StepId.CONTACT),
    StepId.ADVIES_WHO: Fixed(StepId.ADVIES_GOAL),
    StepId.ADVIES_GOAL: Branch(
        AnswerKeys.ADVIES_GOAL,
        {
            "event": StepId.LIVE_EVENT_TYPE,
            "verbeteren": StepId.ADVIES_RUIMTE,
            "aanschaffen": StepId.ADVIES_GEBRUIK,
            "anders": StepId.ANDERS_BESCHRIJVING,
        },
    ),
    StepId.ADVIES_RUIMTE: Fixed(StepId.ADVIES_DOEL),
    StepId.ADVIES_DOEL: Fixed(StepId.ADVIES_METHODE),
    StepId.ADVIES_METHODE: Fixed(StepId.CONTACT),
    StepId.ADVIES_GEBRUIK: Fixed(StepId.ADVIES_KOPEN_DETAILS),
    StepId.ADVIES_KOPEN_DETAILS: Fixed(StepId.ADVIES_KOPEN_TYPE),
    StepId.ADVIES_KOPEN_TYPE: Fixed(StepId.CONTACT),
    StepId.ANDERS_BESCHRIJVING: Fixed(StepId.CONTACT),
    # Leaving the contact step is additionally gated by contact validation.
    StepId.CONTACT: Fixed(StepId.SUCCESS),
    StepId.SUCCESS: Terminal(),
}

_missing = set(StepId) - set(TRANSITIONS)
if _missing:  # pragma: no cover - import-time guard
    raise RuntimeError(f"Transition table is missing steps: {sorted(_missing)}")


def coerce_step(step: object) -> StepId:
    """Return ``step`` as a :class:`StepId` or raise :class:`UnknownStepError`."""

    if isinstance(step, StepId):
        return step
    if isinstance(step, str):
        try:
            return StepId(step)
        except ValueError:
            pass
    raise UnknownStepError(step)


def get_transition(step: StepId | str) -> Transition:
    return TRANSITIONS[coerce_step(step)]


def determine_next_step(step: StepId | str, answers: Answers) -> StepId | None:
    """Return the step that follows ``step`` given ``answers``, or ``None``."""

    return get_transition(step).resolve(answers)


def successors(step: StepId | str) -> tuple[StepId, ...]:
    """Return every step reachable from ``step`` in one transition."""

    return get_transition(step).targets()


__all__ = [
    "AnyOptionSelected",
    "Branch",
    "Fixed",
    "TRANSITIONS",
    "Terminal",
    "Transition",
    "coerce_step",
    "determine_next_step",
    "get_transition",
    "successors",
]
