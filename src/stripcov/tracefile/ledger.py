"""Running adjustments for a record's summary counters."""

from dataclasses import dataclass, fields

from .fields import BRF, BRH, FNF, FNH, LF, LH

SUMMARY_COUNTERS = {
    FNF: "functions_found",
    FNH: "functions_hit",
    BRF: "branches_found",
    BRH: "branches_hit",
    LF: "lines_found",
    LH: "lines_hit",
}


@dataclass
class CounterLedger:
    """Deltas to apply to the summary lines of the current record.

    Every delta starts at zero and only ever decreases, once per stripped
    datum. The "hit" deltas decrease only for data with a run count above
    zero.
    """

    functions_found: int = 0
    functions_hit: int = 0
    branches_found: int = 0
    branches_hit: int = 0
    lines_found: int = 0
    lines_hit: int = 0

    def strip_function(self, run_count: int) -> None:
        self.functions_found -= 1
        if run_count > 0:
            self.functions_hit -= 1

    def strip_branch(self, taken: int) -> None:
        self.branches_found -= 1
        if taken > 0:
            self.branches_hit -= 1

    def strip_line(self, run_count: int) -> None:
        self.lines_found -= 1
        if run_count > 0:
            self.lines_hit -= 1

    def adjust(self, tag: str, value: int) -> int:
        """Apply the delta for summary ``tag`` (e.g. "LF") to ``value``."""
        return value + getattr(self, SUMMARY_COUNTERS[tag])

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, 0)
