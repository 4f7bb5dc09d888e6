"""Attach the intake session and wizard step to every log record."""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Final, Iterator, Mapping

_DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [session=%(session_id)s step=%(wizard_step)s] %(name)s: %(message)s"
_UNSET: Final[str] = "-"

_CONTEXT_VARS: Final[Mapping[str, contextvars.ContextVar[str]]] = {
    "session_id": contextvars.ContextVar("session_id", default=_UNSET),
    "wizard_step": contextvars.ContextVar("wizard_step", default=_UNSET),
}
_DEFAULT_RECORD_FACTORY = logging.getLogRecordFactory()
_RECORD_FACTORY_INSTALLED = False


def _apply_context(record: logging.LogRecord) -> None:
    for attribute, var in _CONTEXT_VARS.items():
        setattr(record, attribute, var.get(_UNSET))


class _ContextFilter(logging.Filter):
    """Inject contextual fields into log records for consistent formatting."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - logging protocol
        _apply_context(record)
        return True


def _coerce(value: object | None) -> str:
    if value is None:
        return _UNSET
    stripped = str(value).strip()
    return stripped or _UNSET


def configure_logging(*, level: int | None = None) -> None:
    """Ensure the root logger formats records with session and step metadata."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level or logging.INFO, format=_DEFAULT_LOG_FORMAT)
    elif level is not None:
        root.setLevel(level)
    for handler in root.handlers:
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(_DEFAULT_LOG_FORMAT))
    if not any(isinstance(flt, _ContextFilter) for flt in root.filters):
        root.addFilter(_ContextFilter())
    global _RECORD_FACTORY_INSTALLED
    if not _RECORD_FACTORY_INSTALLED:
        default_factory = _DEFAULT_RECORD_FACTORY

        def _record_factory(*args: object, **kwargs: object) -> logging.LogRecord:
            record = default_factory(*args, **kwargs)
            _apply_context(record)
            return record

        logging.setLogRecordFactory(_record_factory)
        _RECORD_FACTORY_INSTALLED = True


def set_session_id(session_id: str | None) -> None:
    """Bind an intake session identifier for subsequent log records."""

    configure_logging()
    _CONTEXT_VARS["session_id"].set(_coerce(session_id))


def set_wizard_step(step: object | None) -> None:
    """Bind the current wizard step to the logging context."""

    _CONTEXT_VARS["wizard_step"].set(_coerce(step))


def current_context() -> dict[str, str]:
    return {attribute: var.get(_UNSET) for attribute, var in _CONTEXT_VARS.items()}


@contextmanager
def log_context(*, session_id: str | None = None, wizard_step: object | None = None) -> Iterator[None]:
    """Temporarily override the session and step bound to log records."""

    overrides = {"session_id": session_id, "wizard_step": wizard_step}
    tokens = [
        (_CONTEXT_VARS[attribute], _CONTEXT_VARS[attribute].set(_coerce(value)))
        for attribute, value in overrides.items()
        if value is not None
    ]
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


__all__ = [
    "configure_logging",
    "current_context",
    "log_context",
    "set_session_id",
    "set_wizard_step",
]
