from __future__ import annotations

import pytest

from constants.keys import AnswerKeys
from wizard.answers import DEFAULT_CONTACT_PREFERENCE, AnswerSet, option_key


def test_defaults_include_contact_preference() -> None:
    answers = AnswerSet()

    assert answers[AnswerKeys.CONTACT_PREF] == DEFAULT_CONTACT_PREFERENCE
    assert len(answers) == 1


def test_toggle_flips_the_option_flag() -> None:
    answers = AnswerSet()

    assert answers.toggle(AnswerKeys.INSTRUMENT_PREFIX, "Drums") is True
    assert answers[option_key(AnswerKeys.INSTRUMENT_PREFIX, "Drums")] is True
    assert answers.toggle(AnswerKeys.INSTRUMENT_PREFIX, "Drums") is False
    assert not answers.is_selected(AnswerKeys.INSTRUMENT_PREFIX, "Drums")


def test_selected_options_follow_catalog_order() -> None:
    answers = AnswerSet()
    answers.toggle(AnswerKeys.INSTRUMENT_PREFIX, "Zang")
    answers.toggle(AnswerKeys.INSTRUMENT_PREFIX, "Drums")

    assert answers.selected_options(AnswerKeys.INSTRUMENT_PREFIX) == ["Zang", "Drums"]
    assert answers.selected_options(AnswerKeys.INSTRUMENT_PREFIX, ("Drums", "Gitaar", "Zang")) == ["Drums", "Zang"]


def test_clear_restores_defaults() -> None:
    answers = AnswerSet({AnswerKeys.MAIN_SERVICE: "studio"})
    answers.set(AnswerKeys.CONTACT_PREF, "whatsapp")
    answers.clear()

    assert answers.snapshot() == {AnswerKeys.CONTACT_PREF: DEFAULT_CONTACT_PREFERENCE}


@pytest.mark.parametrize("key", ["", None, 3])
def test_set_rejects_invalid_keys(key: object) -> None:
    with pytest.raises(ValueError):
        AnswerSet().set(key, "x")  # type: ignore[arg-type]


def test_snapshot_is_detached() -> None:
    answers = AnswerSet()
    snapshot = answers.snapshot()
    snapshot[AnswerKeys.MAIN_SERVICE] = "live"

    assert AnswerKeys.MAIN_SERVICE not in answers
