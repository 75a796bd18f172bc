"""Trace data types for step-by-step algorithm replay."""

from __future__ import annotations

from dataclasses import dataclass, field

from .step_types import StepRecord


@dataclass(frozen=True)
class TraceStats:
    """Summary counts gathered while generating a trace."""

    steps: int = 0
    input_length: int = 0
    distinct_values: int = 0
    duplicates_skipped: int = 0
    sequence_starts: int = 0
    longest_streak: int = 0

    def report(self) -> str:
        lines = [
            "═══ Trace Statistics ═══",
            f"  Input: {self.input_length} values, {self.distinct_values} distinct"
            f" ({self.duplicates_skipped} duplicates skipped)",
            f"  Sequence starts : {self.sequence_starts}",
            f"  Longest streak  : {self.longest_streak}",
            f"  Steps           : {self.steps}",
        ]
        return "\n".join(lines)


@dataclass(frozen=True)
class AlgorithmTrace:
    """Complete, immutable trace of one algorithm run.

    Holds the input the trace was generated from, every emitted StepRecord
    in order, and the final result (length and best sequence).
    """

    nums: tuple[int, ...] = ()
    steps: tuple[StepRecord, ...] = ()
    longest_streak: int = 0
    longest_sequence: tuple[int, ...] = ()
    stats: TraceStats = field(default_factory=TraceStats)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> StepRecord:
        return self.steps[index]

    def to_dict(self) -> dict:
        return {
            "nums": list(self.nums),
            "longestStreak": self.longest_streak,
            "longestSequence": list(self.longest_sequence),
            "steps": [step.to_dict() for step in self.steps],
        }
