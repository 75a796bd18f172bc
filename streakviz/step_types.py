"""Step record data types (pure data, no business logic)."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from . import constants


class StepType(str, Enum):
    VARIABLE_INIT = "variable_init"
    LOOP_ITERATION = "loop_iteration"
    CONDITION_CHECK = "condition_check"
    DATA_OPERATION = "data_operation"
    VARIABLE_UPDATE = "variable_update"
    ALGORITHM_END = "algorithm_end"


class AnnotationType(str, Enum):
    COMPARISON = "comparison"
    ASSIGNMENT = "assignment"
    VALUE_CHANGE = "value_change"
    ITERATION = "iteration"
    CONDITION = "condition"


class AnnotationPosition(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class _Frozen(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class StepId(_Frozen):
    """Semantic operation name plus its position in the trace."""

    base_id: str
    ordinal: int

    def __str__(self) -> str:
        return f"{self.base_id}_{self.ordinal}"

    @classmethod
    def parse(cls, raw: str) -> StepId | None:
        """Split a rendered ``<base_id>_<ordinal>`` string; None if unsuffixed."""
        match = re.search(constants.STEP_ID_SUFFIX_PATTERN, raw)
        if match is None:
            return None
        return cls(base_id=raw[: match.start()], ordinal=int(match.group(1)))


class Annotation(_Frozen):
    """Text callout anchored to a visual element."""

    id: str
    type: AnnotationType
    target_id: str
    position: AnnotationPosition
    text: str
    highlight: bool = False


class DataFlow(_Frozen):
    """Directed value movement between two visual elements."""

    id: str
    source_id: str
    target_id: str
    label: str
    animated: bool = False


class VariableState(_Frozen):
    """Algorithm variables at one instant; None means not yet initialized."""

    num_set: tuple[int, ...] | None = Field(default=None, alias="num_set")
    longest_streak: int | None = None
    num: int | None = None
    current_num: int | None = None
    current_streak: int | None = None

    def populated(self) -> dict[str, Any]:
        """Source-level variable names mapped to their values, unset ones omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class VisualizationState(_Frozen):
    original_array: tuple[int, ...] = ()
    hash_set_numbers: tuple[int, ...] = ()
    highlighted_numbers: tuple[int, ...] = ()
    current_sequence: tuple[int, ...] = ()
    longest_sequence: tuple[int, ...] = ()
    is_sequence_start: bool = False


class StepRecord(_Frozen):
    """One immutable snapshot of algorithm and visualization state."""

    step_id: StepId
    step_type: StepType
    line_number: int
    variables: VariableState
    visualization: VisualizationState
    annotations: tuple[Annotation, ...] = ()
    data_flows: tuple[DataFlow, ...] = ()
    description: str = ""

    @field_serializer("step_id")
    def _render_step_id(self, step_id: StepId) -> str:
        return str(step_id)

    @property
    def base_id(self) -> str:
        return self.step_id.base_id

    @property
    def ordinal(self) -> int:
        return self.step_id.ordinal

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys for renderers."""
        data = self.model_dump(mode="json", by_alias=True)
        data["variables"] = self.variables.model_dump(
            mode="json", by_alias=True, exclude_none=True
        )
        return data
