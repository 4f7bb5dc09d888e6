"""Shared type aliases for the wizard package."""

from __future__ import annotations

from enum import StrEnum
from typing import Mapping


class StepId(StrEnum):
    """Every screen the intake wizard can show."""

    MAIN = "main"
    LIVE_TYPE = "live-type"
    LIVE_HIRE_ROLE = "live-hire-role"
    LIVE_HIRE_DETAILS = "live-hire-details"
    LIVE_EVENT_TYPE = "live-event-type"
    LIVE_MUSIC_CHECK = "live-music-check"
    PERFORMERS = "performers"
    INSTRUMENTS = "instruments"
    LOCATION_EQUIPMENT = "location-equipment"
    LOCATION_NAME = "location-name"
    LIVE_PRACTICAL = "live-practical"
    STUDIO_TYPE = "studio-type"
    STUDIO_DETAILS = "studio-details"
    NABEWERKING_TYPE = "nabewerking-type"
    NABEWERKING_DETAILS = "nabewerking-details"
    ADVIES_WHO = "advies-who"
    ADVIES_GOAL = "advies-goal"
    ADVIES_RUIMTE = "advies-ruimte"
    ADVIES_DOEL = "advies-doel"
    ADVIES_METHODE = "advies-methode"
    ADVIES_GEBRUIK = "advies-gebruik"
    ADVIES_KOPEN_DETAILS = "advies-kopen-details"
    ADVIES_KOPEN_TYPE = "advies-kopen-type"
    ANDERS_BESCHRIJVING = "anders-beschrijving"
    CONTACT = "contact"
    SUCCESS = "success"


INITIAL_STEP = StepId.MAIN
TERMINAL_STEP = StepId.SUCCESS


class WizardPhase(StrEnum):
    """Coarse grouping of steps shown in the phase indicator."""

    SERVICE = "service"
    DETAILS = "details"
    CONTACT = "contact"


# Answer values written by the presentation layer: option ids, free text,
# ISO dates and per-option checkbox flags.
AnswerValue = str | bool | None
Answers = Mapping[str, AnswerValue]


__all__ = [
    "AnswerValue",
    "Answers",
    "INITIAL_STEP",
    "StepId",
    "TERMINAL_STEP",
    "WizardPhase",
]
