from __future__ import annotations

import pytest

from constants.keys import AnswerKeys
from wizard.validation import is_step_complete, is_value_present, missing_required_answers
from wizard.types import StepId


@pytest.mark.parametrize(
    ("step", "answer_key"),
    [
        (StepId.MAIN, AnswerKeys.MAIN_SERVICE),
        (StepId.LIVE_TYPE, AnswerKeys.LIVE_TYPE),
        (StepId.LIVE_HIRE_DETAILS, AnswerKeys.HIRE_DETAILS),
        (StepId.LOCATION_NAME, AnswerKeys.LOCATION_NAME),
        (StepId.STUDIO_DETAILS, AnswerKeys.STUDIO_DETAILS),
        (StepId.ANDERS_BESCHRIJVING, AnswerKeys.ANDERS_DETAILS),
    ],
)
def test_required_answer_gates_the_step(step: StepId, answer_key: str) -> None:
    assert missing_required_answers(step, {}) == [answer_key]
    assert not is_step_complete(step, {answer_key: "   "})
    assert is_step_complete(step, {answer_key: "iets"})


@pytest.mark.parametrize(
    "step",
    [StepId.INSTRUMENTS, StepId.LOCATION_EQUIPMENT, StepId.ADVIES_KOPEN_TYPE, StepId.LIVE_PRACTICAL],
)
def test_optional_steps_are_always_complete(step: StepId) -> None:
    assert is_step_complete(step, {})


def test_contact_step_uses_contact_validation(valid_contact: dict[str, str]) -> None:
    assert not is_step_complete(StepId.CONTACT, {})
    assert is_step_complete(StepId.CONTACT, valid_contact)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, False), ("", False), (" \n", False), ("x", True), (False, False), (True, True), ([], False), (["", "a"], True)],
)
def test_is_value_present(value: object, expected: bool) -> None:
    assert is_value_present(value) is expected
