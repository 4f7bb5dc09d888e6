"""Typed briefing handed to whatever delivers an intake request.

The engine does not send anything itself. When the client confirms the
contact step the navigation controller builds an :class:`IntakeRequest` and
passes it to the configured submission callable.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Callable, Final, Literal

from pydantic import BaseModel, Field

import config as app_config
from constants import options
from constants.keys import AnswerKeys
from core.errors import IntakeIncompleteError
from wizard.answers import DEFAULT_CONTACT_PREFERENCE, AnswerSet
from wizard.step_registry import WIZARD_STEPS, FieldKind
from wizard.types import Answers
from wizard.validation import contact_errors, is_value_present

logger = logging.getLogger(__name__)

ContactPreference = Literal["email", "telefoon", "whatsapp"]

SERVICE_REQUIRED_MESSAGE: Final[str] = "Kies eerst een dienst."

# Multi-select groups exported under a readable name.
SELECTION_GROUPS: Final[tuple[tuple[str, str, tuple[str, ...]], ...]] = (
    ("instruments", AnswerKeys.INSTRUMENT_PREFIX, options.INSTRUMENT_OPTIONS),
    ("equipment", AnswerKeys.EQUIPMENT_PREFIX, options.EQUIPMENT_OPTIONS),
    ("purchase_types", AnswerKeys.KOPEN_TYPE_PREFIX, options.KOPEN_TYPE_OPTIONS),
)

_CONTACT_KEYS: Final[frozenset[str]] = frozenset(
    {
        AnswerKeys.CONTACT_NAME,
        AnswerKeys.CONTACT_EMAIL,
        AnswerKeys.CONTACT_PHONE,
        AnswerKeys.CONTACT_PREF,
    }
)


class ContactDetails(BaseModel):
    """Contact block captured on the last question screen."""

    name: str = Field(..., min_length=2)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=7)
    preference: ContactPreference = "email"


class IntakeRequest(BaseModel):
    """Everything the client told the wizard, ready for delivery."""

    service: str = Field(..., min_length=1)
    service_label: str
    contact: ContactDetails
    answers: dict[str, str] = Field(default_factory=dict)
    selections: dict[str, list[str]] = Field(default_factory=dict)
    path: list[str] = Field(default_factory=list)


SubmissionHandler = Callable[[IntakeRequest], None]


def _scalar_answer_keys() -> tuple[str, ...]:
    keys: list[str] = []
    for step in WIZARD_STEPS:
        if step.kind is FieldKind.PRACTICAL:
            keys.extend((AnswerKeys.EVENT_DATE, AnswerKeys.EVENT_DETAILS))
        elif step.kind in {FieldKind.SINGLE_CHOICE, FieldKind.TEXT, FieldKind.TEXTAREA} and step.answer_key:
            keys.append(step.answer_key)
    return tuple(key for key in dict.fromkeys(keys) if key not in _CONTACT_KEYS)


def _collect_selections(answers: Answers) -> dict[str, list[str]]:
    view = answers if isinstance(answers, AnswerSet) else AnswerSet(dict(answers))
    selections: dict[str, list[str]] = {}
    for group, prefix, group_options in SELECTION_GROUPS:
        selected = view.selected_options(prefix, group_options)
        if selected:
            selections[group] = selected
    return selections


def build_intake_request(answers: Answers, *, path: Iterable[str] = ()) -> IntakeRequest:
    """Return the :class:`IntakeRequest` for ``answers``.

    Raises:
        IntakeIncompleteError: when no service is chosen or the contact
            details do not validate.
    """

    errors = contact_errors(answers)
    service = answers.get(AnswerKeys.MAIN_SERVICE)
    if not isinstance(service, str) or not is_value_present(service):
        errors = {AnswerKeys.MAIN_SERVICE: SERVICE_REQUIRED_MESSAGE, **errors}
    if errors:
        raise IntakeIncompleteError(errors)

    preference = answers.get(AnswerKeys.CONTACT_PREF) or DEFAULT_CONTACT_PREFERENCE
    if preference not in dict(options.CONTACT_PREF_OPTIONS):
        logger.warning("Unknown contact preference %r; falling back to email", preference)
        preference = DEFAULT_CONTACT_PREFERENCE
    contact = ContactDetails(
        name=str(answers.get(AnswerKeys.CONTACT_NAME)).strip(),
        email=str(answers.get(AnswerKeys.CONTACT_EMAIL)).strip(),
        phone=str(answers.get(AnswerKeys.CONTACT_PHONE)).strip(),
        preference=preference,  # type: ignore[arg-type]
    )
    scalar_answers = {
        key: value.strip()
        for key in _scalar_answer_keys()
        if isinstance(value := answers.get(key), str) and is_value_present(value)
    }
    service_label = dict(options.SERVICE_OPTIONS).get(str(service), str(service))
    return IntakeRequest(
        service=str(service),
        service_label=service_label,
        contact=contact,
        answers=scalar_answers,
        selections=_collect_selections(answers),
        path=[str(step) for step in path],
    )


def _redact_contact(payload: dict[str, object]) -> dict[str, object]:
    contact = payload.get("contact")
    if isinstance(contact, dict):
        payload["contact"] = {
            key: ("[redacted]" if key in {"name", "email", "phone"} else value) for key, value in contact.items()
        }
    return payload


def log_submission(request: IntakeRequest, *, include_contact: bool | None = None) -> None:
    """Default submission handler: record the briefing in the application log."""

    show_contact = app_config.LOG_CONTACT_DETAILS if include_contact is None else include_contact
    payload = request.model_dump()
    if not show_contact:
        payload = _redact_contact(payload)
    logger.info("Intake request received for service '%s': %s", request.service, payload)


def chain_handlers(handlers: Sequence[SubmissionHandler]) -> SubmissionHandler:
    """Return a handler that calls ``handlers`` in order."""

    def _submit(request: IntakeRequest) -> None:
        for handler in handlers:
            handler(request)

    return _submit


__all__ = [
    "ContactDetails",
    "IntakeRequest",
    "SELECTION_GROUPS",
    "SubmissionHandler",
    "build_intake_request",
    "chain_handlers",
    "log_submission",
]
