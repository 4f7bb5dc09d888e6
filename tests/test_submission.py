from __future__ import annotations

import logging

import pytest

import config
from constants.keys import AnswerKeys
from core.errors import IntakeIncompleteError
from wizard.answers import AnswerSet
from wizard.submission import build_intake_request, chain_handlers, log_submission


@pytest.fixture
def live_answers(valid_contact: dict[str, str]) -> AnswerSet:
    answers = AnswerSet(valid_contact)
    answers.set(AnswerKeys.MAIN_SERVICE, "live")
    answers.set(AnswerKeys.LIVE_TYPE, "organize")
    answers.set(AnswerKeys.EVENT_TYPE, "Concert / Festival")
    answers.set(AnswerKeys.PERFORMERS, "Band (6+ personen)")
    answers.toggle(AnswerKeys.INSTRUMENT_PREFIX, "Zang")
    answers.toggle(AnswerKeys.INSTRUMENT_PREFIX, "Drums")
    answers.toggle(AnswerKeys.EQUIPMENT_PREFIX, "Niks aanwezig")
    answers.set(AnswerKeys.LOCATION_NAME, "  Effenaar  ")
    answers.set(AnswerKeys.EVENT_DATE, "2026-06-13")
    answers.set(AnswerKeys.EVENT_DETAILS, "")
    answers.set(AnswerKeys.CONTACT_PREF, "whatsapp")
    return answers


def test_build_intake_request_collects_answers(live_answers: AnswerSet) -> None:
    request = build_intake_request(live_answers, path=["main", "live-type"])

    assert request.service == "live"
    assert request.service_label == "Live geluid voor een evenement"
    assert request.contact.preference == "whatsapp"
    assert request.answers[AnswerKeys.LOCATION_NAME] == "Effenaar"
    assert request.answers[AnswerKeys.EVENT_DATE] == "2026-06-13"
    assert AnswerKeys.EVENT_DETAILS not in request.answers
    assert AnswerKeys.CONTACT_NAME not in request.answers
    assert request.selections == {
        "instruments": ["Drums", "Zang"],
        "equipment": ["Niks aanwezig"],
    }
    assert request.path == ["main", "live-type"]


def test_build_intake_request_accepts_plain_mappings(valid_contact: dict[str, str]) -> None:
    answers = {**valid_contact, AnswerKeys.MAIN_SERVICE: "studio", "kopen-type-Speakers": True}

    request = build_intake_request(answers)

    assert request.contact.preference == "email"
    assert request.selections == {"purchase_types": ["Speakers"]}


def test_incomplete_contact_raises() -> None:
    with pytest.raises(IntakeIncompleteError) as excinfo:
        build_intake_request({AnswerKeys.MAIN_SERVICE: "studio", AnswerKeys.CONTACT_NAME: "J"})

    assert AnswerKeys.CONTACT_NAME in excinfo.value.errors
    assert AnswerKeys.MAIN_SERVICE not in excinfo.value.errors


def test_missing_service_raises(valid_contact: dict[str, str]) -> None:
    with pytest.raises(IntakeIncompleteError) as excinfo:
        build_intake_request(valid_contact)

    assert list(excinfo.value.errors) == [AnswerKeys.MAIN_SERVICE]


def test_unknown_preference_falls_back_to_email(
    valid_contact: dict[str, str], caplog: pytest.LogCaptureFixture
) -> None:
    answers = {**valid_contact, AnswerKeys.MAIN_SERVICE: "advies", AnswerKeys.CONTACT_PREF: "postduif"}

    with caplog.at_level(logging.WARNING, logger="wizard.submission"):
        request = build_intake_request(answers)

    assert request.contact.preference == "email"
    assert "Unknown contact preference" in caplog.text


def test_log_submission_redacts_contact_by_default(
    live_answers: AnswerSet, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(config, "LOG_CONTACT_DETAILS", False)
    request = build_intake_request(live_answers)

    with caplog.at_level(logging.INFO, logger="wizard.submission"):
        log_submission(request)

    assert "[redacted]" in caplog.text
    assert "jo@x.nl" not in caplog.text
    assert "whatsapp" in caplog.text


def test_log_submission_can_include_contact(live_answers: AnswerSet, caplog: pytest.LogCaptureFixture) -> None:
    request = build_intake_request(live_answers)

    with caplog.at_level(logging.INFO, logger="wizard.submission"):
        log_submission(request, include_contact=True)

    assert "jo@x.nl" in caplog.text


def test_chain_handlers_calls_in_order(live_answers: AnswerSet) -> None:
    calls: list[str] = []
    handler = chain_handlers([lambda _r: calls.append("first"), lambda _r: calls.append("second")])

    handler(build_intake_request(live_answers))

    assert calls == ["first", "second"]
