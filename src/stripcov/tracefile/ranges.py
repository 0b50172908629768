"""Function line ranges reconstructed from FN: declaration order.

The tracefile gives each function's start line but no end line, so a
function is taken to run until the start of the next declared function.
The last declared function stays open-ended and absorbs every later line
of the record, including trailing code outside any function.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass
class FunctionEntry:
    """One FN: declaration and the line range attributed to it."""

    name: str
    start_line: int
    end_line: Optional[int] = None  # Exclusive; None while open-ended
    shielded: bool = False

    def covers(self, line_number: int) -> bool:
        """Check if ``line_number`` falls in [start_line, end_line)."""
        if line_number < self.start_line:
            return False
        return self.end_line is None or line_number < self.end_line


@dataclass
class FunctionRangeTable:
    """Functions declared so far in the current record, in declaration order.

    Ranges follow declaration order, not source order: if a declaration
    starts before its predecessor, the predecessor's range is empty.
    """

    entries: List[FunctionEntry] = field(default_factory=list)

    def declare(
        self, name: str, start_line: int, shielded: bool = False
    ) -> FunctionEntry:
        """Append a function, closing the previous entry's range."""
        if self.entries:
            self.entries[-1].end_line = start_line
        entry = FunctionEntry(name=name, start_line=start_line, shielded=shielded)
        self.entries.append(entry)
        return entry

    def is_shielded(self, line_number: int) -> bool:
        """Check if a line belongs to any shielded function's range."""
        return any(
            entry.shielded and entry.covers(line_number)
            for entry in self.entries
        )

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FunctionEntry]:
        return iter(self.entries)
