"""Longest consecutive sequence step-trace visualizer."""

from .generator import generate_steps, generate_trace  # noqa: F401
from .line_mapping import (  # noqa: F401
    all_lines,
    lookup,
    validate_line_mapping,
)
from .player import Player, PlayerConfig, PlayState  # noqa: F401
from .validation import (  # noqa: F401
    InvalidInputError,
    ValidationResult,
    parse_input,
    validate_input,
)
from .api import build_trace, trace_to_json, render_step_text  # noqa: F401
