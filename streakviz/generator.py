"""Step-trace generator: replays the longest-consecutive-sequence algorithm.

The algorithm is executed once, in two phases, and every observable operation
is recorded as an immutable StepRecord:

  1. Set construction: walk the input, inserting unseen values into a working
     set that keeps first-insertion order, skipping duplicates.
  2. Streak scan: walk the working set in insertion order; from every sequence
     start (``v - 1`` absent) extend the streak while ``cursor + 1`` is present
     and keep the first strictly-longest run found.

Each record's ordinal is its index in the trace; the list being built is the
only counter.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from . import constants
from .line_mapping import baseline_line
from .step_types import (
    Annotation,
    AnnotationPosition,
    AnnotationType,
    DataFlow,
    StepId,
    StepRecord,
    StepType,
    VariableState,
    VisualizationState,
)
from .trace_types import AlgorithmTrace, TraceStats

logger = logging.getLogger(__name__)


def _array_cell(index: int) -> str:
    return constants.ARRAY_CELL_TEMPLATE.format(index=index)


def _set_cell(value: int) -> str:
    return constants.HASHSET_CELL_TEMPLATE.format(value=value)


def _emit(
    steps: list[StepRecord],
    base_id: str,
    step_type: StepType,
    variables: VariableState,
    visualization: VisualizationState,
    description: str,
    annotations: Iterable[Annotation] = (),
    data_flows: Iterable[DataFlow] = (),
) -> None:
    """Append a record whose ordinal is its position in *steps*."""
    steps.append(
        StepRecord(
            step_id=StepId(base_id=base_id, ordinal=len(steps)),
            step_type=step_type,
            line_number=baseline_line(base_id),
            variables=variables,
            visualization=visualization,
            annotations=tuple(annotations),
            data_flows=tuple(data_flows),
            description=description,
        )
    )


def _build_set(
    steps: list[StepRecord], original: tuple[int, ...]
) -> tuple[dict[int, None], int]:
    """Phase 1. Returns the insertion-ordered working set and the skip count."""
    working: dict[int, None] = {}
    skipped = 0

    _emit(
        steps,
        constants.STEP_CREATE_HASHSET,
        StepType.VARIABLE_INIT,
        VariableState(num_set=()),
        VisualizationState(original_array=original),
        "Create an empty hash set to hold the array's numbers",
        [
            Annotation(
                id="create-hs",
                type=AnnotationType.ASSIGNMENT,
                target_id=constants.ARRAY_TITLE_ID,
                position=AnnotationPosition.BOTTOM,
                text="create hash set",
                highlight=True,
            )
        ],
        [
            DataFlow(
                id="flow-create-hs",
                source_id=constants.ARRAY_TITLE_ID,
                target_id=constants.HASHSET_TITLE_ID,
                label="init",
                animated=True,
            )
        ],
    )

    for index, num in enumerate(original):
        if num not in working:
            working[num] = None
            snapshot = tuple(working)
            _emit(
                steps,
                constants.STEP_ADD_TO_HASHSET,
                StepType.DATA_OPERATION,
                VariableState(num_set=snapshot, num=num),
                VisualizationState(
                    original_array=original,
                    hash_set_numbers=snapshot,
                    highlighted_numbers=(num,),
                ),
                f"Add {num} to the hash set",
                [
                    Annotation(
                        id=f"add-{num}",
                        type=AnnotationType.ASSIGNMENT,
                        target_id=_set_cell(num),
                        position=AnnotationPosition.RIGHT,
                        text=f"add({num})",
                        highlight=True,
                    )
                ],
                [
                    DataFlow(
                        id=f"flow-add-{num}",
                        source_id=_array_cell(index),
                        target_id=_set_cell(num),
                        label="add",
                        animated=True,
                    )
                ],
            )
        else:
            skipped += 1
            snapshot = tuple(working)
            _emit(
                steps,
                constants.STEP_SKIP_DUPLICATE,
                StepType.DATA_OPERATION,
                VariableState(num_set=snapshot, num=num),
                VisualizationState(
                    original_array=original,
                    hash_set_numbers=snapshot,
                    highlighted_numbers=(num,),
                ),
                f"{num} is already in the hash set, skip the duplicate",
                [
                    Annotation(
                        id=f"skip-{num}",
                        type=AnnotationType.ASSIGNMENT,
                        target_id=_array_cell(index),
                        position=AnnotationPosition.RIGHT,
                        text="duplicate, skip",
                    )
                ],
            )

    return working, skipped


def _extend_streak(
    steps: list[StepRecord],
    original: tuple[int, ...],
    working: dict[int, None],
    num: int,
    longest_streak: int,
    longest_sequence: tuple[int, ...],
) -> tuple[int, tuple[int, ...]]:
    """Phase 2 body for a sequence start. Returns the (possibly new) best."""
    members = tuple(working)
    current_num = num
    current_streak = 1
    current_sequence: tuple[int, ...] = (num,)

    def variables() -> VariableState:
        return VariableState(
            num_set=members,
            longest_streak=longest_streak,
            num=num,
            current_num=current_num,
            current_streak=current_streak,
        )

    def view(
        highlighted: tuple[int, ...], best: tuple[int, ...]
    ) -> VisualizationState:
        return VisualizationState(
            original_array=original,
            hash_set_numbers=members,
            highlighted_numbers=highlighted,
            current_sequence=current_sequence,
            longest_sequence=best,
        )

    _emit(
        steps,
        constants.STEP_INIT_CURRENT_NUM,
        StepType.VARIABLE_INIT,
        variables(),
        view((num,), longest_sequence),
        f"Initialize currentNum = {num}, currentStreak = 1",
        [
            Annotation(
                id=f"init-{num}",
                type=AnnotationType.ASSIGNMENT,
                target_id=_set_cell(num),
                position=AnnotationPosition.RIGHT,
                text=f"currentNum={num}, currentStreak=1",
                highlight=True,
            )
        ],
        [
            DataFlow(
                id=f"flow-start-{num}",
                source_id=_set_cell(num),
                target_id=constants.SEQUENCE_START_ID,
                label="start sequence",
                animated=True,
            )
        ],
    )

    while current_num + 1 in working:
        previous = current_num
        _emit(
            steps,
            constants.STEP_WHILE_LOOP_CHECK,
            StepType.CONDITION_CHECK,
            variables(),
            view((current_num, current_num + 1), longest_sequence),
            f"Is {current_num + 1} in the hash set? Yes",
            [
                Annotation(
                    id=f"check-{current_num}",
                    type=AnnotationType.COMPARISON,
                    target_id=_set_cell(current_num),
                    position=AnnotationPosition.TOP,
                    text=f"contains({current_num + 1})? true",
                    highlight=True,
                )
            ],
            [
                DataFlow(
                    id=f"flow-check-{current_num}",
                    source_id=_set_cell(current_num),
                    target_id=_set_cell(current_num + 1),
                    label="+1",
                    animated=True,
                )
            ],
        )

        current_num += 1
        current_streak += 1
        current_sequence = current_sequence + (current_num,)

        _emit(
            steps,
            constants.STEP_INCREMENT_CURRENT,
            StepType.VARIABLE_UPDATE,
            variables(),
            view((current_num,), longest_sequence),
            f"currentNum = {current_num}, currentStreak = {current_streak}",
            [
                Annotation(
                    id=f"update-{current_num}",
                    type=AnnotationType.VALUE_CHANGE,
                    target_id=_set_cell(current_num),
                    position=AnnotationPosition.RIGHT,
                    text="++currentNum, ++currentStreak",
                    highlight=True,
                )
            ],
            [
                DataFlow(
                    id=f"flow-update-{current_num}",
                    source_id=_set_cell(previous),
                    target_id=_set_cell(current_num),
                    label="advance",
                    animated=True,
                )
            ],
        )

    _emit(
        steps,
        constants.STEP_WHILE_LOOP_EXIT,
        StepType.CONDITION_CHECK,
        variables(),
        view((current_num,), longest_sequence),
        f"Is {current_num + 1} in the hash set? No, leave the loop",
        [
            Annotation(
                id=f"exit-{current_num}",
                type=AnnotationType.CONDITION,
                target_id=_set_cell(current_num),
                position=AnnotationPosition.TOP,
                text=f"contains({current_num + 1})? false",
                highlight=True,
            )
        ],
    )

    if current_streak > longest_streak:
        previous_best = longest_streak
        longest_streak = current_streak
        longest_sequence = current_sequence
        _emit(
            steps,
            constants.STEP_UPDATE_LONGEST_STREAK,
            StepType.VARIABLE_UPDATE,
            variables(),
            view((), longest_sequence),
            f"Update the longest streak: {current_streak} > {previous_best}",
            [
                Annotation(
                    id=f"update-longest-{num}",
                    type=AnnotationType.COMPARISON,
                    target_id=constants.LONGEST_SEQ_LABEL_ID,
                    position=AnnotationPosition.TOP,
                    text=f"{current_streak} > {previous_best}, update!",
                    highlight=True,
                )
            ],
            [
                DataFlow(
                    id=f"flow-longest-{num}",
                    source_id=constants.CURRENT_SEQ_ID,
                    target_id=constants.LONGEST_SEQ_ID,
                    label=f"length: {current_streak}",
                    animated=True,
                )
            ],
        )
    else:
        _emit(
            steps,
            constants.STEP_NO_UPDATE_LONGEST_STREAK,
            StepType.VARIABLE_UPDATE,
            variables(),
            view((), longest_sequence),
            f"Keep the longest streak: {current_streak} <= {longest_streak}",
            [
                Annotation(
                    id=f"no-update-{num}",
                    type=AnnotationType.COMPARISON,
                    target_id=constants.LONGEST_SEQ_LABEL_ID,
                    position=AnnotationPosition.TOP,
                    text=f"{current_streak} <= {longest_streak}, no update",
                )
            ],
        )

    return longest_streak, longest_sequence


def _scan_streaks(
    steps: list[StepRecord],
    original: tuple[int, ...],
    working: dict[int, None],
) -> tuple[int, tuple[int, ...], int]:
    """Phase 2. Returns (longest streak, longest sequence, sequence starts)."""
    members = tuple(working)
    longest_streak = 0
    longest_sequence: tuple[int, ...] = ()
    starts = 0

    _emit(
        steps,
        constants.STEP_INIT_LONGEST_STREAK,
        StepType.VARIABLE_INIT,
        VariableState(num_set=members, longest_streak=0),
        VisualizationState(original_array=original, hash_set_numbers=members),
        "Initialize the longest streak to 0",
        [
            Annotation(
                id="init-longest",
                type=AnnotationType.ASSIGNMENT,
                target_id=constants.LONGEST_VAR_ID,
                position=AnnotationPosition.TOP,
                text="longestStreak = 0",
                highlight=True,
            )
        ],
        [
            DataFlow(
                id="flow-init-longest",
                source_id=constants.HASHSET_TITLE_ID,
                target_id=constants.LONGEST_VAR_ID,
                label="start scan",
                animated=True,
            )
        ],
    )

    for num in members:
        _emit(
            steps,
            constants.STEP_FOR_EACH_NUM,
            StepType.LOOP_ITERATION,
            VariableState(num_set=members, longest_streak=longest_streak, num=num),
            VisualizationState(
                original_array=original,
                hash_set_numbers=members,
                highlighted_numbers=(num,),
                longest_sequence=longest_sequence,
            ),
            f"Visit {num} from the hash set",
            [
                Annotation(
                    id=f"loop-{num}",
                    type=AnnotationType.ITERATION,
                    target_id=_set_cell(num),
                    position=AnnotationPosition.TOP,
                    text=f"for num={num}",
                    highlight=True,
                )
            ],
            [
                DataFlow(
                    id=f"flow-loop-{num}",
                    source_id=constants.HASHSET_TITLE_ID,
                    target_id=_set_cell(num),
                    label="iterate",
                    animated=True,
                )
            ],
        )

        is_start = num - 1 not in working
        if is_start:
            description = f"{num - 1} is not in the hash set, so {num} starts a sequence"
            annotation_text = f"!contains({num - 1})? true"
            flow = DataFlow(
                id=f"flow-check-start-{num}",
                source_id=constants.HASHSET_TITLE_ID,
                target_id=_set_cell(num),
                label="sequence start",
                animated=True,
            )
        else:
            description = f"{num - 1} is in the hash set, so {num} is not a sequence start"
            annotation_text = f"!contains({num - 1})? false"
            flow = DataFlow(
                id=f"flow-check-skip-{num}",
                source_id=_set_cell(num - 1),
                target_id=_set_cell(num),
                label="skip",
                animated=True,
            )

        _emit(
            steps,
            constants.STEP_CHECK_SEQUENCE_START,
            StepType.CONDITION_CHECK,
            VariableState(num_set=members, longest_streak=longest_streak, num=num),
            VisualizationState(
                original_array=original,
                hash_set_numbers=members,
                highlighted_numbers=(num,),
                longest_sequence=longest_sequence,
                is_sequence_start=is_start,
            ),
            description,
            [
                Annotation(
                    id=f"check-{num}",
                    type=AnnotationType.COMPARISON,
                    target_id=_set_cell(num),
                    position=(
                        AnnotationPosition.RIGHT if is_start else AnnotationPosition.TOP
                    ),
                    text=annotation_text,
                    highlight=is_start,
                )
            ],
            [flow],
        )

        if is_start:
            starts += 1
            longest_streak, longest_sequence = _extend_streak(
                steps, original, working, num, longest_streak, longest_sequence
            )

    return longest_streak, longest_sequence, starts


def generate_steps(nums: Sequence[int]) -> tuple[StepRecord, ...]:
    """Replay the algorithm on *nums* and return every step record in order."""
    return generate_trace(nums).steps


def generate_trace(nums: Sequence[int]) -> AlgorithmTrace:
    """Replay the algorithm on *nums* and return the complete trace.

    Deterministic: equal inputs give equal traces. Total over validated input
    (at most 100 integers in [-1e9, 1e9]).

    Args:
        nums: The input array, duplicates allowed.

    Returns:
        An AlgorithmTrace with the step records, final result and stats.
    """
    original = tuple(nums)
    steps: list[StepRecord] = []

    working, skipped = _build_set(steps, original)
    longest_streak, longest_sequence, starts = _scan_streaks(
        steps, original, working
    )

    members = tuple(working)
    _emit(
        steps,
        constants.STEP_RETURN_RESULT,
        StepType.ALGORITHM_END,
        VariableState(num_set=members, longest_streak=longest_streak),
        VisualizationState(
            original_array=original,
            hash_set_numbers=members,
            longest_sequence=longest_sequence,
        ),
        f"Done, the longest consecutive sequence has length {longest_streak}",
    )

    stats = TraceStats(
        steps=len(steps),
        input_length=len(original),
        distinct_values=len(working),
        duplicates_skipped=skipped,
        sequence_starts=starts,
        longest_streak=longest_streak,
    )
    logger.info(
        "Generated %d steps for %d values (longest streak %d)",
        stats.steps,
        stats.input_length,
        longest_streak,
    )

    return AlgorithmTrace(
        nums=original,
        steps=tuple(steps),
        longest_streak=longest_streak,
        longest_sequence=longest_sequence,
        stats=stats,
    )
