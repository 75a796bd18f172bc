"""Multi-language code line mapping.

Every semantic step (its base id) maps to the lines it executes in each
supported language. Records carry an explicit ``StepId``; plain strings of the
form ``<base_id>_<ordinal>`` are still accepted for legacy consumers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Union

from . import constants
from .sources import language_line_count, source_lines
from .step_types import StepId

logger = logging.getLogger(__name__)

J, P, G, JS = (
    constants.LANG_JAVA,
    constants.LANG_PYTHON,
    constants.LANG_GOLANG,
    constants.LANG_JAVASCRIPT,
)

LINE_MAPPING: dict[str, dict[str, tuple[int, ...]]] = {
    # Set construction
    constants.STEP_CREATE_HASHSET: {J: (3,), P: (3,), G: (2,), JS: (2,)},
    constants.STEP_ADD_TO_HASHSET: {J: (4, 5), P: (3,), G: (3, 4), JS: (2,)},
    constants.STEP_SKIP_DUPLICATE: {J: (4, 5), P: (3,), G: (3, 4), JS: (2,)},
    # Main loop
    constants.STEP_INIT_LONGEST_STREAK: {J: (8,), P: (5,), G: (7,), JS: (3,)},
    constants.STEP_FOR_EACH_NUM: {J: (10,), P: (7,), G: (9,), JS: (5,)},
    constants.STEP_CHECK_SEQUENCE_START: {J: (11,), P: (8,), G: (10,), JS: (6,)},
    # Streak extension
    constants.STEP_INIT_CURRENT_NUM: {
        J: (12, 13),
        P: (9, 10),
        G: (11, 12),
        JS: (7, 8),
    },
    constants.STEP_WHILE_LOOP_CHECK: {J: (15,), P: (12,), G: (14,), JS: (10,)},
    constants.STEP_INCREMENT_CURRENT: {
        J: (16, 17),
        P: (13, 14),
        G: (15, 16),
        JS: (11, 12),
    },
    constants.STEP_WHILE_LOOP_EXIT: {J: (15,), P: (12,), G: (14,), JS: (10,)},
    # Best streak
    constants.STEP_UPDATE_LONGEST_STREAK: {
        J: (20,),
        P: (16,),
        G: (19, 20),
        JS: (15,),
    },
    constants.STEP_NO_UPDATE_LONGEST_STREAK: {J: (20,), P: (16,), G: (19,), JS: (15,)},
    constants.STEP_RETURN_RESULT: {J: (24,), P: (18,), G: (25,), JS: (19,)},
}

StepRef = Union[StepId, str]


def resolve_base_id(step_id: StepRef) -> str:
    """Base id of *step_id*; strings lose a trailing ``_<digits>`` suffix."""
    if isinstance(step_id, StepId):
        return step_id.base_id
    if step_id in LINE_MAPPING:
        return step_id
    parsed = StepId.parse(step_id)
    return parsed.base_id if parsed is not None else step_id


def all_lines(step_id: StepRef) -> Mapping[str, tuple[int, ...]] | None:
    """All languages' line numbers for *step_id*, or None when unmapped."""
    base_id = resolve_base_id(step_id)
    mapping = LINE_MAPPING.get(base_id)
    if mapping is None:
        logger.debug("No line mapping for step %s", step_id)
    return mapping


def lookup(step_id: StepRef, language: str) -> tuple[int, ...]:
    """Line numbers for *step_id* in *language*; empty when unmapped."""
    mapping = all_lines(step_id)
    if mapping is None:
        return ()
    return mapping.get(language, ())


def baseline_line(base_id: str) -> int:
    """First mapped line in the baseline language (0 when unmapped)."""
    lines = lookup(base_id, constants.BASELINE_LANGUAGE)
    return lines[0] if lines else 0


def all_base_ids() -> list[str]:
    return list(LINE_MAPPING)


def is_valid_line_number(line_number: int, language: str) -> bool:
    return 1 <= line_number <= language_line_count(language)


@dataclass(frozen=True)
class MappingValidation:
    valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)


def validate_line_mapping(
    table: Mapping[str, Mapping[str, tuple[int, ...]]] = LINE_MAPPING,
) -> MappingValidation:
    """Static self-check of the mapping table against the reference sources.

    Every entry must cover all supported languages with a non-empty line list,
    each line must exist and be non-blank in that language's source, and every
    base id the generator emits must be present.
    """
    errors: list[str] = []

    for base_id, mapping in table.items():
        for language in constants.SUPPORTED_LANGUAGES:
            lines = mapping.get(language)
            if not lines:
                errors.append(f"step '{base_id}' has no {language} lines")
                continue
            text = source_lines(language)
            for line_number in lines:
                if not is_valid_line_number(line_number, language):
                    errors.append(
                        f"step '{base_id}' {language} line {line_number} is out of"
                        f" range 1..{len(text)}"
                    )
                elif not text[line_number - 1].strip():
                    errors.append(
                        f"step '{base_id}' {language} line {line_number} is blank"
                    )

    for base_id in constants.EMITTED_BASE_IDS:
        if base_id not in table:
            errors.append(f"step '{base_id}' is emitted but has no mapping")

    return MappingValidation(valid=not errors, errors=tuple(errors))
