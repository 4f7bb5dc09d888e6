"""Central configuration for the intake wizard.

Values are resolved from the environment once at import time. A local
``.env`` file is honoured through ``python-dotenv``.

``INTAKE_TRANSITION_DELAY_MS`` controls the cosmetic pause between a click on
"Volgende"/"Terug" and the next screen; ``0`` switches it off.
"""

import logging
import os
import warnings

from dotenv import load_dotenv

load_dotenv()


logger = logging.getLogger(__name__)


_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "on")
_DEFAULT_TRANSITION_DELAY_MS = 300
_DEFAULT_LOG_LEVEL = "INFO"


def _is_truthy_flag(value: str | None) -> bool:
    """Return ``True`` when ``value`` matches a truthy environment token."""

    if value is None:
        return False
    return value.strip().lower() in _TRUTHY_ENV_VALUES


def _parse_non_negative_int_env(value: object | None, *, env_var: str, default: int) -> int:
    """Return a non-negative integer parsed from ``value`` or ``default``."""

    if value is None:
        return default
    if isinstance(value, str):
        candidate = value.strip()
        if not candidate:
            return default
        try:
            parsed = int(float(candidate))
        except ValueError:
            warnings.warn(
                "%s is not a number; ignoring %s" % (candidate, env_var),
                RuntimeWarning,
            )
            return default
    elif isinstance(value, (int, float)):
        parsed = int(value)
    else:
        warnings.warn(
            "Unsupported %s value '%s'; using %s." % (env_var, value, default),
            RuntimeWarning,
        )
        return default
    if parsed < 0:
        warnings.warn(
            "%s must not be negative; using %s." % (env_var, default),
            RuntimeWarning,
        )
        return default
    return parsed


def _parse_log_level(value: str | None) -> int:
    """Return a :mod:`logging` level for ``value`` with an INFO fallback."""

    name = (value or _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    warnings.warn(
        "Unknown INTAKE_LOG_LEVEL '%s'; falling back to %s." % (value, _DEFAULT_LOG_LEVEL),
        RuntimeWarning,
    )
    return logging.INFO


TRANSITION_DELAY_MS = _parse_non_negative_int_env(
    os.getenv("INTAKE_TRANSITION_DELAY_MS"),
    env_var="INTAKE_TRANSITION_DELAY_MS",
    default=_DEFAULT_TRANSITION_DELAY_MS,
)
LOG_LEVEL = _parse_log_level(os.getenv("INTAKE_LOG_LEVEL"))
LOG_CONTACT_DETAILS = _is_truthy_flag(os.getenv("INTAKE_LOG_CONTACT_DETAILS"))
PAGE_TITLE = os.getenv("INTAKE_PAGE_TITLE", "Diensten - Geluidsintake")
DEBUG_FLOW_DIAGRAM = _is_truthy_flag(os.getenv("INTAKE_DEBUG_FLOW"))


__all__ = [
    "DEBUG_FLOW_DIAGRAM",
    "LOG_CONTACT_DETAILS",
    "LOG_LEVEL",
    "PAGE_TITLE",
    "TRANSITION_DELAY_MS",
]
