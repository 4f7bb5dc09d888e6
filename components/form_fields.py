"""Streamlit widgets that read from and write to the intake answer set."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date
from typing import Any

import streamlit as st

from constants.keys import UIKeys
from wizard.navigation.router import NavigationController
from wizard.types import AnswerValue

WidgetFactory = Callable[..., Any]

__all__ = [
    "checkbox_group",
    "date_input_with_state",
    "option_radio",
    "text_input_with_state",
    "widget_key",
]


def widget_key(answer_key: str) -> str:
    return f"{UIKeys.ANSWER_PREFIX}{answer_key}"


def _as_text(value: AnswerValue) -> str:
    if value is None or isinstance(value, bool):
        return ""
    return value


def text_input_with_state(
    label: str,
    *,
    controller: NavigationController,
    answer_key: str,
    widget_factory: WidgetFactory | None = None,
    **text_input_kwargs: Any,
) -> str:
    """Render a text input and write its value back to ``answer_key``.

    ``widget_factory`` defaults to :func:`streamlit.text_input`; pass
    ``st.text_area`` for multi-line answers.
    """

    stored = _as_text(controller.get_answer(answer_key))
    widget_kwargs = {k: v for k, v in text_input_kwargs.items() if v is not None}
    widget_kwargs.setdefault("key", widget_key(answer_key))
    widget_kwargs["value"] = stored

    factory = widget_factory or st.text_input
    value = factory(label, **widget_kwargs)
    value = value if isinstance(value, str) else ""
    if value != stored:
        controller.set_answer(answer_key, value)
    return value


def date_input_with_state(label: str, *, controller: NavigationController, answer_key: str) -> str:
    """Render a date picker storing the ISO date string under ``answer_key``."""

    stored = _as_text(controller.get_answer(answer_key))
    try:
        current = date.fromisoformat(stored) if stored else None
    except ValueError:
        current = None
    picked = st.date_input(label, value=current, key=widget_key(answer_key), format="DD-MM-YYYY")
    value = picked.isoformat() if isinstance(picked, date) else ""
    if value != stored:
        controller.set_answer(answer_key, value)
    return value


def option_radio(
    label: str,
    *,
    controller: NavigationController,
    answer_key: str,
    choices: Sequence[tuple[str, str]],
    horizontal: bool = False,
) -> str | None:
    """Render a single-choice question; the answer holds the option id."""

    values = [value for value, _label in choices]
    labels = dict(choices)
    stored = controller.get_answer(answer_key)
    index = values.index(stored) if isinstance(stored, str) and stored in values else None
    picked = st.radio(
        label,
        values,
        index=index,
        format_func=lambda value: labels.get(value, value),
        key=widget_key(answer_key),
        horizontal=horizontal,
    )
    if picked is not None and picked != stored:
        controller.set_answer(answer_key, picked)
    return picked


def checkbox_group(
    *,
    controller: NavigationController,
    prefix: str,
    options: Sequence[str],
    columns: int = 2,
) -> list[str]:
    """Render one checkbox per option and return the checked options."""

    selected: list[str] = []
    cols = st.columns(columns)
    for index, option in enumerate(options):
        checked = controller.answers.is_selected(prefix, option)
        with cols[index % columns]:
            ticked = st.checkbox(option, value=checked, key=widget_key(f"{prefix}{option}"))
        if ticked != checked:
            controller.toggle_option(prefix, option)
        if ticked:
            selected.append(option)
    return selected
