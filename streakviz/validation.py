"""Input validation: parses user text into a bounded integer array."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from . import constants

logger = logging.getLogger(__name__)

_INTEGER_TOKEN = re.compile(r"-?[0-9]+")
_MAX_DIGITS = len(str(max(-constants.MIN_INPUT_VALUE, constants.MAX_INPUT_VALUE)))
_SEPARATOR = re.compile(r"\s*,\s*|\s+")

EMPTY_INPUT_ERROR = "Input must not be empty"
FORMAT_ERROR = "Invalid input, enter an integer array such as [1,2,3] or 1,2,3"
RANGE_ERROR = (
    f"Numbers must be between {constants.MIN_INPUT_VALUE}"
    f" and {constants.MAX_INPUT_VALUE}"
)
LENGTH_ERROR = f"Array length must not exceed {constants.MAX_INPUT_LENGTH}"


class InvalidInputError(ValueError):
    """Raised when user input cannot be turned into a valid array."""


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    data: list[int] = field(default_factory=list)
    error: str = ""

    @classmethod
    def ok(cls, data: list[int]) -> ValidationResult:
        return cls(valid=True, data=data)

    @classmethod
    def failure(cls, error: str) -> ValidationResult:
        return cls(valid=False, error=error)


def _tokens(raw: str) -> list[str] | None:
    """Split *raw* into tokens; None when there is nothing to parse."""
    body = raw.strip()
    if body.startswith("[") and body.endswith("]"):
        body = body[1:-1].strip()
    if not body:
        return None
    return _SEPARATOR.split(body)


def validate_input(raw: str) -> ValidationResult:
    """Validate user text as an integer array.

    Accepts ``[a,b,c]``, ``a,b,c`` or whitespace-separated tokens. Every token
    must match ``-?[0-9]+`` exactly (ASCII digits only), the array may hold at
    most 100 values and each value must lie in [-1e9, 1e9]. Over-long digit
    strings are rejected as out of range before conversion.
    """
    tokens = _tokens(raw)
    if tokens is None:
        return ValidationResult.failure(EMPTY_INPUT_ERROR)

    numbers: list[int] = []
    for token in tokens:
        if not _INTEGER_TOKEN.fullmatch(token):
            logger.debug("Rejected token %r", token)
            return ValidationResult.failure(FORMAT_ERROR)
        digits = token.lstrip("-").lstrip("0") or "0"
        if len(digits) > _MAX_DIGITS:
            return ValidationResult.failure(RANGE_ERROR)
        value = -int(digits) if token.startswith("-") else int(digits)
        if not constants.MIN_INPUT_VALUE <= value <= constants.MAX_INPUT_VALUE:
            return ValidationResult.failure(RANGE_ERROR)
        numbers.append(value)

    if len(numbers) > constants.MAX_INPUT_LENGTH:
        return ValidationResult.failure(LENGTH_ERROR)

    return ValidationResult.ok(numbers)


def parse_input(raw: str) -> list[int]:
    """Like validate_input() but raises ``InvalidInputError`` on bad input."""
    result = validate_input(raw)
    if not result.valid:
        raise InvalidInputError(result.error)
    return result.data
