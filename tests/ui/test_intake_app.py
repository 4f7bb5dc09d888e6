"""End-to-end runs of ``app.py`` through Streamlit's AppTest harness."""

from __future__ import annotations

import pytest
from streamlit.testing.v1 import AppTest

from constants.keys import AnswerKeys, StateKeys, UIKeys
from components.form_fields import widget_key
from state.ensure_state import SESSION_KEYS
from wizard.flow import SUBMIT_FAILED_MESSAGE
from wizard.navigation.router import NavigationController
from wizard.submission import IntakeRequest
from wizard.types import StepId


def _controller(app: AppTest) -> NavigationController:
    return app.session_state[SESSION_KEYS.controller]


def _choose_service(app: AppTest, service: str) -> None:
    app.radio(key=widget_key(AnswerKeys.MAIN_SERVICE)).set_value(service).run(timeout=30)


def _click_next(app: AppTest) -> None:
    app.button(key=UIKeys.NAV_NEXT).click().run(timeout=30)


def _fill_contact(app: AppTest, contact: dict[str, str]) -> None:
    for answer_key, value in contact.items():
        app.text_input(key=widget_key(answer_key)).input(value)
    app.run(timeout=30)


def _reach_contact(app: AppTest) -> None:
    _choose_service(app, "anders")
    _click_next(app)
    app.text_area(key=widget_key(AnswerKeys.ANDERS_DETAILS)).input("Geluid voor een lezing").run(timeout=30)
    _click_next(app)


def test_first_run_shows_main_question(intake_app: AppTest) -> None:
    assert not intake_app.exception
    assert _controller(intake_app).get_current_step() is StepId.MAIN
    assert any("Wat kan ik voor je betekenen?" in md.value for md in intake_app.markdown)
    assert intake_app.button(key=UIKeys.NAV_NEXT).disabled
    assert intake_app.button(key=UIKeys.NAV_BACK).disabled


def test_click_through_from_main_to_success(intake_app: AppTest, valid_contact: dict[str, str]) -> None:
    _reach_contact(intake_app)
    assert _controller(intake_app).get_current_step() is StepId.CONTACT
    assert intake_app.button(key=UIKeys.NAV_NEXT).label == "Aanvraag versturen"

    _fill_contact(intake_app, valid_contact)
    _click_next(intake_app)

    controller = _controller(intake_app)
    assert not intake_app.exception
    assert controller.get_current_step() is StepId.SUCCESS
    assert controller.history == (StepId.MAIN, StepId.ANDERS_BESCHRIJVING, StepId.CONTACT, StepId.SUCCESS)
    success_markdown = " ".join(md.value for md in intake_app.markdown)
    assert "Briefing Ontvangen" in success_markdown
    assert "binnen 24 uur" in success_markdown
    submissions = intake_app.session_state[StateKeys.SUBMISSIONS]
    assert len(submissions) == 1
    assert submissions[0]["answers"][AnswerKeys.ANDERS_DETAILS] == "Geluid voor een lezing"


def test_back_button_returns_to_previous_step(intake_app: AppTest) -> None:
    _choose_service(intake_app, "anders")
    _click_next(intake_app)
    assert _controller(intake_app).get_current_step() is StepId.ANDERS_BESCHRIJVING

    intake_app.button(key=UIKeys.NAV_BACK).click().run(timeout=30)

    controller = _controller(intake_app)
    assert controller.get_current_step() is StepId.MAIN
    assert controller.get_answer(AnswerKeys.MAIN_SERVICE) == "anders"


def test_click_during_pending_transition_moves_once(intake_app: AppTest) -> None:
    _choose_service(intake_app, "anders")
    controller = _controller(intake_app)
    assert controller.request_advance() is True

    _click_next(intake_app)

    assert controller.history == (StepId.MAIN, StepId.ANDERS_BESCHRIJVING)
    assert controller.transition_in_progress is False


def test_new_request_resets_the_wizard(intake_app: AppTest, valid_contact: dict[str, str]) -> None:
    _reach_contact(intake_app)
    _fill_contact(intake_app, valid_contact)
    _click_next(intake_app)
    controller = _controller(intake_app)
    finished_session = controller.session_id

    intake_app.button(key=UIKeys.NEW_REQUEST).click().run(timeout=30)

    assert _controller(intake_app) is controller
    assert controller.get_current_step() is StepId.MAIN
    assert controller.history == (StepId.MAIN,)
    assert controller.get_answer(AnswerKeys.ANDERS_DETAILS) is None
    assert controller.session_id != finished_session
    assert intake_app.radio(key=widget_key(AnswerKeys.MAIN_SERVICE)).value is None
    assert len(intake_app.session_state[StateKeys.SUBMISSIONS]) == 1


def test_failed_submission_unlocks_buttons_for_retry(
    intake_app: AppTest,
    valid_contact: dict[str, str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    attempts: list[IntakeRequest] = []

    def flaky_handler(request: IntakeRequest) -> None:
        attempts.append(request)
        if len(attempts) == 1:
            raise RuntimeError("mail relay unavailable")

    # The controller was created on the first run; swap its handler in place.
    monkeypatch.setattr(_controller(intake_app), "_submit", flaky_handler)
    _reach_contact(intake_app)
    _fill_contact(intake_app, valid_contact)

    _click_next(intake_app)

    controller = _controller(intake_app)
    assert not intake_app.exception
    assert [error.value for error in intake_app.error] == [SUBMIT_FAILED_MESSAGE]
    assert controller.get_current_step() is StepId.CONTACT
    assert controller.transition_in_progress is False
    assert intake_app.button(key=UIKeys.NAV_NEXT).disabled is False
    assert intake_app.button(key=UIKeys.NAV_BACK).disabled is False

    _click_next(intake_app)

    assert len(attempts) == 2
    assert controller.get_current_step() is StepId.SUCCESS
    assert list(intake_app.error) == []

