"""Mermaid flowchart and sanity checks for the intake transition table."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Final

from wizard.step_registry import get_step
from wizard.transitions import TRANSITIONS, AnyOptionSelected, Branch, Transition
from wizard.types import INITIAL_STEP, TERMINAL_STEP, StepId

# Longest route: main, advies-who, advies-goal, live-event-type, live-music-check,
# performers, instruments, location-equipment, location-name, live-practical,
# contact, success.
MAX_PATH_TRANSITIONS: Final[int] = 11


@dataclass(frozen=True)
class MermaidEdge:
    source: str
    target: str
    label: str | None
    style: str


def _branch_labels(transition: Branch, target: StepId) -> str:
    values = [value for value, routed in transition.routes.items() if routed is target]
    return " / ".join(values)


def _forward_edges(step: StepId, transition: Transition) -> list[tuple[StepId, str | None]]:
    if isinstance(transition, Branch):
        return [(target, _branch_labels(transition, target)) for target in transition.targets()]
    if isinstance(transition, AnyOptionSelected):
        return [
            (transition.when_selected, "weet niet / niks aanwezig"),
            (transition.otherwise, "else"),
        ]
    return [(target, None) for target in transition.targets()]


def build_mermaid_flowchart(
    transitions: Mapping[StepId, Transition] = TRANSITIONS,
    *,
    current_step_id: StepId | str | None = None,
) -> str:
    """Return a Mermaid flowchart for ``transitions``.

    Steps with required answers get a dotted self-loop so the gate is visible
    in the diagram.
    """

    lines = ["flowchart TD"]
    edges: list[MermaidEdge] = []
    for step, transition in transitions.items():
        definition = get_step(step)
        label = definition.title if definition else str(step)
        if current_step_id is not None and str(step) == str(current_step_id):
            label = f"{label} (current)"
        lines.append(f'    {_node_id(step)}["{_sanitize_label(label)}"]')

        for target, edge_label in _forward_edges(step, transition):
            edges.append(MermaidEdge(_node_id(step), _node_id(target), edge_label, "-->"))
        if (definition and definition.required_answers) or step is StepId.CONTACT:
            edges.append(MermaidEdge(_node_id(step), _node_id(step), "onvolledig", "-.->"))

    for edge in edges:
        edge_label = _sanitize_label(edge.label)
        if edge_label:
            lines.append(f"    {edge.source} {edge.style}|{edge_label}| {edge.target}")
        else:
            lines.append(f"    {edge.source} {edge.style} {edge.target}")
    return "\n".join(lines)


def reachable_steps(
    transitions: Mapping[StepId, Transition] = TRANSITIONS,
    *,
    start: StepId = INITIAL_STEP,
) -> set[StepId]:
    seen: set[StepId] = set()
    frontier = [start]
    while frontier:
        step = frontier.pop()
        if step in seen:
            continue
        seen.add(step)
        transition = transitions.get(step)
        if transition is not None:
            frontier.extend(transition.targets())
    return seen


def iter_paths(
    transitions: Mapping[StepId, Transition] = TRANSITIONS,
    *,
    start: StepId = INITIAL_STEP,
) -> Iterator[tuple[StepId, ...]]:
    """Yield every maximal path from ``start``; a path stops at a dead end or a repeat."""

    def _walk(path: tuple[StepId, ...]) -> Iterator[tuple[StepId, ...]]:
        transition = transitions.get(path[-1])
        targets = transition.targets() if transition is not None else ()
        if not targets:
            yield path
            return
        for target in targets:
            if target in path:
                yield path + (target,)
                continue
            yield from _walk(path + (target,))

    yield from _walk((start,))


def longest_path_length(transitions: Mapping[StepId, Transition] = TRANSITIONS) -> int:
    """Return the number of transitions on the longest route from the first step."""

    return max(len(path) - 1 for path in iter_paths(transitions))


def validate_transition_graph(
    transitions: Mapping[StepId, Transition] = TRANSITIONS,
    *,
    max_transitions: int = MAX_PATH_TRANSITIONS,
) -> list[str]:
    """Validate the step graph and return human-readable warnings."""

    warnings: list[str] = []
    for step in StepId:
        if step not in transitions:
            warnings.append(f"Step '{step}' has no transition.")

    reachable = reachable_steps(transitions)
    for step in transitions:
        if step not in reachable:
            warnings.append(f"Step '{step}' is unreachable from '{INITIAL_STEP}'.")

    for path in iter_paths(transitions):
        route = " -> ".join(str(step) for step in path)
        if len(set(path)) != len(path):
            warnings.append(f"Cycle detected: {route}.")
        elif path[-1] is not TERMINAL_STEP:
            warnings.append(f"Step '{path[-1]}' has no forward path.")
        elif len(path) - 1 > max_transitions:
            warnings.append(f"Route exceeds {max_transitions} transitions: {route}.")
    return list(dict.fromkeys(warnings))


def _sanitize_label(label: str | None) -> str | None:
    if not label:
        return None
    return label.replace("|", "/").replace('"', "'").replace("\n", " ")


def _node_id(key: str) -> str:
    safe = "".join(ch if ch.isalnum() else "_" for ch in key)
    return f"step_{safe}"


__all__ = [
    "MAX_PATH_TRANSITIONS",
    "build_mermaid_flowchart",
    "iter_paths",
    "longest_path_length",
    "reachable_steps",
    "validate_transition_graph",
]
