"""Registry for wizard steps, their fields and gating rules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from constants import options
from constants.keys import AnswerKeys
from wizard.types import StepId, WizardPhase


class FieldKind(StrEnum):
    """How a step collects its answer."""

    SINGLE_CHOICE = "single_choice"
    MULTI_CHOICE = "multi_choice"
    TEXT = "text"
    TEXTAREA = "textarea"
    PRACTICAL = "practical"
    CONTACT = "contact"
    NONE = "none"


@dataclass(frozen=True)
class StepDefinition:
    """Metadata + gating contract for an individual wizard step."""

    key: StepId
    title: str
    kind: FieldKind
    answer_key: str | None = None
    choices: tuple[tuple[str, str], ...] = ()
    placeholder: str | None = None
    required_answers: tuple[str, ...] = ()
    phase: WizardPhase | None = WizardPhase.DETAILS

    @property
    def option_values(self) -> tuple[str, ...]:
        return tuple(value for value, _label in self.choices)

    def label_for(self, value: str) -> str:
        """Return the display label for a choice ``value``."""

        return next((label for candidate, label in self.choices if candidate == value), value)


def _same(values: Sequence[str]) -> tuple[tuple[str, str], ...]:
    return tuple((value, value) for value in values)


def _single(
    key: StepId,
    title: str,
    answer_key: str,
    choices: tuple[tuple[str, str], ...],
    *,
    phase: WizardPhase = WizardPhase.DETAILS,
) -> StepDefinition:
    return StepDefinition(
        key=key,
        title=title,
        kind=FieldKind.SINGLE_CHOICE,
        answer_key=answer_key,
        choices=choices,
        required_answers=(answer_key,),
        phase=phase,
    )


def _multi(key: StepId, title: str, prefix: str, values: Sequence[str]) -> StepDefinition:
    # Multi-select steps may be passed with zero selections.
    return StepDefinition(
        key=key,
        title=title,
        kind=FieldKind.MULTI_CHOICE,
        answer_key=prefix,
        choices=_same(values),
    )


def _text(key: StepId, title: str, answer_key: str, placeholder: str, *, kind: FieldKind = FieldKind.TEXTAREA) -> StepDefinition:
    return StepDefinition(
        key=key,
        title=title,
        kind=kind,
        answer_key=answer_key,
        placeholder=placeholder,
        required_answers=(answer_key,),
    )


WIZARD_STEPS: Final[tuple[StepDefinition, ...]] = (
    _single(
        StepId.MAIN,
        "Wat kan ik voor je betekenen?",
        AnswerKeys.MAIN_SERVICE,
        options.SERVICE_OPTIONS,
        phase=WizardPhase.SERVICE,
    ),
    _single(StepId.LIVE_TYPE, "Hoe kan ik helpen?", AnswerKeys.LIVE_TYPE, options.LIVE_TYPE_OPTIONS),
    _single(StepId.LIVE_HIRE_ROLE, "In welke rol?", AnswerKeys.HIRE_ROLE, _same(options.HIRE_ROLE_OPTIONS)),
    _text(
        StepId.LIVE_HIRE_DETAILS,
        "Opdracht details",
        AnswerKeys.HIRE_DETAILS,
        "Datum, locatie, tijden en specifieke eisen...",
    ),
    _single(StepId.LIVE_EVENT_TYPE, "Type event?", AnswerKeys.EVENT_TYPE, _same(options.EVENT_TYPE_OPTIONS)),
    _single(
        StepId.LIVE_MUSIC_CHECK,
        "Is er live muziek?",
        AnswerKeys.HAS_LIVE_MUSIC,
        options.LIVE_MUSIC_OPTIONS,
    ),
    _single(StepId.PERFORMERS, "Wie treedt er op?", AnswerKeys.PERFORMERS, _same(options.PERFORMER_OPTIONS)),
    _multi(StepId.INSTRUMENTS, "Welke instrumenten?", AnswerKeys.INSTRUMENT_PREFIX, options.INSTRUMENT_OPTIONS),
    _multi(
        StepId.LOCATION_EQUIPMENT,
        "Aanwezig op locatie?",
        AnswerKeys.EQUIPMENT_PREFIX,
        options.EQUIPMENT_OPTIONS,
    ),
    _text(
        StepId.LOCATION_NAME,
        "Welke locatie?",
        AnswerKeys.LOCATION_NAME,
        "Naam van de locatie of evenement",
        kind=FieldKind.TEXT,
    ),
    StepDefinition(
        key=StepId.LIVE_PRACTICAL,
        title="Praktische info",
        kind=FieldKind.PRACTICAL,
        answer_key=AnswerKeys.EVENT_DETAILS,
        placeholder="Wat is verder belangrijk om te weten?",
    ),
    _single(StepId.STUDIO_TYPE, "Wat gaan we opnemen?", AnswerKeys.STUDIO_TYPE, _same(options.STUDIO_TYPE_OPTIONS)),
    _text(
        StepId.STUDIO_DETAILS,
        "Vertel meer over de sessie",
        AnswerKeys.STUDIO_DETAILS,
        "Aantal personen, gewenste datum, doel van de opname...",
    ),
    _single(
        StepId.NABEWERKING_TYPE,
        "Type nabewerking?",
        AnswerKeys.NABEWERKING_TYPE,
        _same(options.NABEWERKING_TYPE_OPTIONS),
    ),
    _text(
        StepId.NABEWERKING_DETAILS,
        "Details nabewerking",
        AnswerKeys.NABEWERKING_DETAILS,
        "Deadline, aantal tracks, specifieke wensen...",
    ),
    _single(StepId.ADVIES_WHO, "Wie ben je?", AnswerKeys.ADVIES_WHO, _same(options.ADVIES_WHO_OPTIONS)),
    _single(
        StepId.ADVIES_GOAL,
        "Waar heb je advies bij nodig?",
        AnswerKeys.ADVIES_GOAL,
        options.ADVIES_GOAL_OPTIONS,
    ),
    _single(StepId.ADVIES_RUIMTE, "Welke ruimte?", AnswerKeys.ADVIES_RUIMTE, _same(options.ADVIES_RUIMTE_OPTIONS)),
    _single(StepId.ADVIES_DOEL, "Wat is het doel?", AnswerKeys.ADVIES_DOEL, _same(options.ADVIES_DOEL_OPTIONS)),
    _single(
        StepId.ADVIES_METHODE,
        "Hoe spreken we elkaar?",
        AnswerKeys.ADVIES_METHODE,
        _same(options.ADVIES_METHODE_OPTIONS),
    ),
    _single(
        StepId.ADVIES_GEBRUIK,
        "Waar ga je het voor gebruiken?",
        AnswerKeys.ADVIES_GEBRUIK,
        _same(options.ADVIES_GEBRUIK_OPTIONS),
    ),
    _text(
        StepId.ADVIES_KOPEN_DETAILS,
        "Details aanschaf",
        AnswerKeys.ADVIES_KOPEN_DETAILS,
        "Budget, reeds aanwezige gear, voorkeur voor merken...",
    ),
    _multi(StepId.ADVIES_KOPEN_TYPE, "Wat wil je kopen?", AnswerKeys.KOPEN_TYPE_PREFIX, options.KOPEN_TYPE_OPTIONS),
    _text(
        StepId.ANDERS_BESCHRIJVING,
        "Beschrijf je vraag",
        AnswerKeys.ANDERS_DETAILS,
        "Waar heb je precies hulp bij nodig?",
    ),
    StepDefinition(
        key=StepId.CONTACT,
        title="Contactgegevens",
        kind=FieldKind.CONTACT,
        answer_key=AnswerKeys.CONTACT_PREF,
        choices=options.CONTACT_PREF_OPTIONS,
        phase=WizardPhase.CONTACT,
    ),
    StepDefinition(
        key=StepId.SUCCESS,
        title="Briefing Ontvangen",
        kind=FieldKind.NONE,
        phase=None,
    ),
)

_STEP_MAP: Final[dict[StepId, StepDefinition]] = {step.key: step for step in WIZARD_STEPS}


def step_keys() -> tuple[StepId, ...]:
    """Return wizard step keys in catalog order."""

    return tuple(step.key for step in WIZARD_STEPS)


def get_step(key: StepId | str) -> StepDefinition | None:
    """Lookup step metadata by key."""

    try:
        return _STEP_MAP.get(StepId(key))
    except ValueError:
        return None


def resolve_phase(key: StepId) -> WizardPhase | None:
    step = _STEP_MAP[key]
    return step.phase


__all__ = [
    "FieldKind",
    "StepDefinition",
    "WIZARD_STEPS",
    "get_step",
    "resolve_phase",
    "step_keys",
]
