from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from constants.keys import AnswerKeys
from core.regexes import EMAIL_PATTERN, PHONE_PATTERN
from wizard.step_registry import get_step
from wizard.types import Answers, StepId

CONTACT_FIELD_MESSAGES: Final[Mapping[str, str]] = {
    AnswerKeys.CONTACT_NAME: "Vul je naam in (minimaal 2 tekens).",
    AnswerKeys.CONTACT_EMAIL: "Vul een geldig e-mailadres in.",
    AnswerKeys.CONTACT_PHONE: "Vul een geldig telefoonnummer in.",
}


@dataclass(frozen=True)
class ContactValidationResult:
    """Outcome of validating the contact step."""

    ok: bool
    errors: dict[str, str]


def is_value_present(value: object | None) -> bool:
    """Return ``True`` when ``value`` should count as populated."""

    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, bool):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        return any(is_value_present(item) for item in value)
    if isinstance(value, Mapping):
        return any(is_value_present(item) for item in value.values())
    return True


def _text(answers: Answers, key: str) -> str:
    value = answers.get(key)
    return value if isinstance(value, str) else ""


def validate_name(name: str | None) -> bool:
    return len((name or "").strip()) > 1


def validate_email(email: str | None) -> bool:
    return bool(email) and EMAIL_PATTERN.fullmatch(email) is not None


def validate_phone(phone: str | None) -> bool:
    return bool(phone) and PHONE_PATTERN.fullmatch(phone) is not None


def validate_contact(answers: Answers) -> ContactValidationResult:
    """Check name, email and phone; all three must hold."""

    checks = (
        (AnswerKeys.CONTACT_NAME, validate_name),
        (AnswerKeys.CONTACT_EMAIL, validate_email),
        (AnswerKeys.CONTACT_PHONE, validate_phone),
    )
    errors = {key: CONTACT_FIELD_MESSAGES[key] for key, check in checks if not check(_text(answers, key))}
    return ContactValidationResult(ok=not errors, errors=errors)


def is_contact_valid(answers: Answers) -> bool:
    return validate_contact(answers).ok


def contact_errors(answers: Answers) -> dict[str, str]:
    return validate_contact(answers).errors


def missing_required_answers(step: StepId, answers: Answers) -> list[str]:
    """Return required answer keys for ``step`` that are still blank."""

    definition = get_step(step)
    if definition is None:
        return []
    return [key for key in definition.required_answers if not is_value_present(answers.get(key))]


def is_step_complete(step: StepId, answers: Answers) -> bool:
    """Return whether the step's own fields allow moving forward."""

    if step == StepId.CONTACT:
        return is_contact_valid(answers)
    return not missing_required_answers(step, answers)


__all__ = [
    "CONTACT_FIELD_MESSAGES",
    "ContactValidationResult",
    "contact_errors",
    "is_contact_valid",
    "is_step_complete",
    "is_value_present",
    "missing_required_answers",
    "validate_contact",
    "validate_email",
    "validate_name",
    "validate_phone",
]
