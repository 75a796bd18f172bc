"""Execution context view: watched variables, call stack and code lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from . import constants
from .line_mapping import lookup
from .step_types import StepRecord, StepType

_WATCH_ORDER: tuple[str, ...] = (
    "num_set",
    "longestStreak",
    "currentNum",
    "currentStreak",
    "num",
)

_LOOP_BASE_IDS = frozenset(
    {
        constants.STEP_WHILE_LOOP_CHECK,
        constants.STEP_INCREMENT_CURRENT,
        constants.STEP_WHILE_LOOP_EXIT,
    }
)


@dataclass(frozen=True)
class WatchedVariable:
    name: str
    value: Any
    previous_value: Any = None
    has_changed: bool = False
    kind: str = "primitive"


@dataclass(frozen=True)
class ContextFrame:
    name: str
    detail: str


@dataclass(frozen=True)
class ExecutionContext:
    step_type: StepType
    variables: tuple[WatchedVariable, ...] = field(default_factory=tuple)
    call_stack: tuple[ContextFrame, ...] = field(default_factory=tuple)
    lines: tuple[int, ...] = field(default_factory=tuple)


def watched_variables(
    step: StepRecord, previous: StepRecord | None = None
) -> tuple[WatchedVariable, ...]:
    """Initialized variables of *step*, flagged when they differ from *previous*."""
    current = step.variables.populated()
    before = previous.variables.populated() if previous is not None else {}
    watched = []
    for name in _WATCH_ORDER:
        if name not in current:
            continue
        value = current[name]
        old = before.get(name)
        watched.append(
            WatchedVariable(
                name=name,
                value=value,
                previous_value=old,
                has_changed=previous is not None and old != value,
                kind="set" if name == "num_set" else "primitive",
            )
        )
    return tuple(watched)


def call_stack(step: StepRecord) -> tuple[ContextFrame, ...]:
    """Innermost frame last: the solution call, then the streak loop if active."""
    size = len(step.visualization.original_array)
    frames = [ContextFrame(name="longestConsecutive", detail=f"nums[{size}]")]
    if step.base_id in _LOOP_BASE_IDS:
        frames.append(
            ContextFrame(
                name="while",
                detail=f"currentNum={step.variables.current_num}",
            )
        )
    return tuple(frames)


def execution_context(
    step: StepRecord,
    previous: StepRecord | None = None,
    language: str = constants.DEFAULT_LANGUAGE,
) -> ExecutionContext:
    return ExecutionContext(
        step_type=step.step_type,
        variables=watched_variables(step, previous),
        call_stack=call_stack(step),
        lines=lookup(step.step_id, language),
    )
