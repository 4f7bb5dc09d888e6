import importlib
import logging

import pytest

import config


def test_transition_delay_parsing() -> None:
    parse = config._parse_non_negative_int_env

    assert parse(None, env_var="X", default=300) == 300
    assert parse(" ", env_var="X", default=300) == 300
    assert parse("0", env_var="X", default=300) == 0
    assert parse("150.7", env_var="X", default=300) == 150
    assert parse(42, env_var="X", default=300) == 42


@pytest.mark.parametrize("raw", ["soon", "-5"])
def test_invalid_transition_delay_warns(raw: str) -> None:
    with pytest.warns(RuntimeWarning):
        assert config._parse_non_negative_int_env(raw, env_var="INTAKE_TRANSITION_DELAY_MS", default=300) == 300


def test_log_level_parsing() -> None:
    assert config._parse_log_level(None) == logging.INFO
    assert config._parse_log_level("debug") == logging.DEBUG
    with pytest.warns(RuntimeWarning):
        assert config._parse_log_level("chatty") == logging.INFO


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("Yes", True), (" on ", True), ("0", False), (None, False)])
def test_truthy_flags(raw, expected) -> None:
    assert config._is_truthy_flag(raw) is expected


def test_environment_is_read_on_import(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INTAKE_TRANSITION_DELAY_MS", "0")
    monkeypatch.setenv("INTAKE_LOG_CONTACT_DETAILS", "true")
    monkeypatch.setenv("INTAKE_LOG_LEVEL", "WARNING")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.TRANSITION_DELAY_MS == 0
        assert reloaded.LOG_CONTACT_DETAILS is True
        assert reloaded.LOG_LEVEL == logging.WARNING
    finally:
        for name in ("INTAKE_TRANSITION_DELAY_MS", "INTAKE_LOG_CONTACT_DETAILS", "INTAKE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        importlib.reload(config)
