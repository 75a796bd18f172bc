"""Composable API functions for building, exporting and rendering traces.

Each function corresponds to a CLI workflow but is callable programmatically
without argparse.
"""

from __future__ import annotations

import json
import logging

from . import constants
from .context import execution_context
from .generator import generate_trace
from .line_mapping import lookup
from .sources import source_lines
from .step_types import StepRecord
from .trace_types import AlgorithmTrace
from .validation import parse_input

logger = logging.getLogger(__name__)


def build_trace(raw_input: str) -> AlgorithmTrace:
    """Validate user text and generate the trace for it.

    Raises:
        InvalidInputError: If *raw_input* is not a valid integer array.
    """
    nums = parse_input(raw_input)
    logger.info("Building trace for %d values", len(nums))
    return generate_trace(nums)


def trace_to_json(trace: AlgorithmTrace, indent: int | None = 2) -> str:
    """Serialize *trace* with the camelCase keys renderers expect."""
    return json.dumps(trace.to_dict(), indent=indent, ensure_ascii=False)


def render_code(step: StepRecord, language: str = constants.DEFAULT_LANGUAGE) -> str:
    """Source listing for *language* with the step's lines marked ``>``."""
    active = set(lookup(step.step_id, language))
    return "\n".join(
        f"{'>' if number in active else ' '} {number:3d} | {line}"
        for number, line in enumerate(source_lines(language), 1)
    )


def _format_values(values: tuple[int, ...]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def render_step_text(
    step: StepRecord,
    language: str = constants.DEFAULT_LANGUAGE,
    previous: StepRecord | None = None,
    show_code: bool = True,
) -> str:
    """Plain-text frame for one step: description, state and code."""
    view = step.visualization
    context = execution_context(step, previous, language)
    lines = [
        f"[{step.step_id}] ({step.step_type.value}) {step.description}",
        f"  array    : {_format_values(view.original_array)}",
        f"  hash set : {_format_values(view.hash_set_numbers)}",
    ]
    if view.highlighted_numbers:
        lines.append(f"  focus    : {_format_values(view.highlighted_numbers)}")
    if view.current_sequence:
        lines.append(f"  current  : {_format_values(view.current_sequence)}")
    lines.append(f"  longest  : {_format_values(view.longest_sequence)}")

    for var in context.variables:
        if var.name == "num_set":
            continue
        marker = " *" if var.has_changed else ""
        lines.append(f"  {var.name} = {var.value}{marker}")

    for annotation in step.annotations:
        lines.append(f"  note @{annotation.target_id}: {annotation.text}")
    for flow in step.data_flows:
        lines.append(f"  flow {flow.source_id} -> {flow.target_id} ({flow.label})")

    if show_code:
        lines.append("")
        lines.append(render_code(step, language))
    return "\n".join(lines)
