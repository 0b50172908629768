"""Record transformer: strip shielded functions from an LCOV tracefile.

Lines are processed one at a time. Records whose SF: path is not in the
configuration are copied through byte for byte. Inside a configured
record every datum is either copied, dropped, or (for summary lines)
rewritten with the counts of everything dropped earlier in the record.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, Optional, TextIO

from ..errors import TracefileFormatError
from ..models import ShieldConfig
from .fields import (
    BRDA,
    DA,
    END_OF_RECORD,
    FN,
    FNDA,
    SF,
    SUMMARY_TAGS,
    parse_branch,
    parse_count,
    parse_function,
    parse_function_hits,
    parse_line,
    split_tag,
)
from .ledger import CounterLedger
from .paths import PathResolver
from .ranges import FunctionRangeTable


class State(Enum):
    """Whether the transformer is inside a configured record."""

    OUTSIDE = "outside"
    IN_TARGET = "in_target"


@dataclass
class TransformStats:
    """Counts collected over one transform run."""

    records: int = 0
    records_stripped: int = 0
    functions_stripped: int = 0
    branches_stripped: int = 0
    lines_stripped: int = 0
    unknown_lines: int = 0


class RecordTransformer:
    """Line-driven state machine over a tracefile.

    Args:
        config: Shield-list configuration
        output: Stream receiving the transformed tracefile
        diagnostics: Stream for warnings about dropped unknown lines
        progress: Stream for progress messages and uncovered function
            names (defaults to ``diagnostics``)
        print_uncovered: Report kept functions that never ran
        quiet: Suppress progress messages
    """

    def __init__(
        self,
        config: ShieldConfig,
        output: TextIO,
        diagnostics: Optional[TextIO] = None,
        progress: Optional[TextIO] = None,
        print_uncovered: bool = False,
        quiet: bool = False,
    ):
        self.config = config
        self.resolver = PathResolver(config.topdir)
        self.output = output
        self.diagnostics = diagnostics
        self.progress = progress if progress is not None else diagnostics
        self.print_uncovered = print_uncovered
        self.quiet = quiet

        self.state = State.OUTSIDE
        self.current_file: Optional[str] = None
        self.functions: FrozenSet[str] = frozenset()
        self.table = FunctionRangeTable()
        self.ledger = CounterLedger()
        self.stats = TransformStats()
        self.lineno = 0

        self._handlers: Dict[str, Callable[[str, str, str, str], None]] = {
            FN: self._on_function,
            FNDA: self._on_function_hits,
            BRDA: self._on_branch,
            DA: self._on_line,
            END_OF_RECORD: self._on_end_of_record,
        }
        for tag in SUMMARY_TAGS:
            self._handlers[tag] = self._on_summary

    def transform(self, lines: Iterable[str]) -> TransformStats:
        """Feed every line of a tracefile through the transformer."""
        for raw in lines:
            self.feed(raw)
        return self.stats

    def feed(self, raw: str) -> None:
        """Process one raw input line, line break included.

        Raises:
            TracefileFormatError: If a datum in a configured record is
                malformed
        """
        self.lineno += 1
        text = raw.rstrip("\r\n")

        if self.state is State.OUTSIDE:
            self.output.write(raw)
            self._enter_if_configured(text)
            return

        tag, payload = split_tag(text)
        handler = self._handlers.get(tag)
        if handler is None:
            # Dropped, unlike unknown lines outside a configured record
            self.stats.unknown_lines += 1
            self._write(self.diagnostics, f"Unknown line: {text}")
            return

        try:
            handler(tag, payload, raw, text)
        except TracefileFormatError as e:
            e.lineno = self.lineno
            raise

    def _enter_if_configured(self, text: str) -> None:
        tag, payload = split_tag(text)
        if tag != SF:
            return
        self.stats.records += 1

        path = self.resolver.resolve(payload)
        functions = self.config.functions_for(path)
        if functions is None:
            return

        self.state = State.IN_TARGET
        self.current_file = path
        self.functions = functions
        self.table.clear()
        self.ledger.reset()
        self.stats.records_stripped += 1
        if not self.quiet:
            self._write(self.progress, f"start to processing {path}")

    def _is_shielded(self, name: str) -> bool:
        return self.config.is_shielded(self.functions, name)

    def _on_function(self, tag: str, payload: str, raw: str, text: str) -> None:
        start_line, name = parse_function(payload, text)
        shielded = self._is_shielded(name)
        self.table.declare(name, start_line, shielded=shielded)
        if shielded:
            self.stats.functions_stripped += 1
        else:
            self.output.write(raw)

    def _on_function_hits(
        self, tag: str, payload: str, raw: str, text: str
    ) -> None:
        run_count, name = parse_function_hits(payload, text)
        if self._is_shielded(name):
            self.ledger.strip_function(run_count)
            return
        self.output.write(raw)
        if run_count == 0 and self.print_uncovered:
            self._write(self.progress, f"\t{name}")

    def _on_branch(self, tag: str, payload: str, raw: str, text: str) -> None:
        line_number, taken = parse_branch(payload, text)
        if self.table.is_shielded(line_number):
            self.ledger.strip_branch(taken)
            self.stats.branches_stripped += 1
        else:
            self.output.write(raw)

    def _on_line(self, tag: str, payload: str, raw: str, text: str) -> None:
        line_number, run_count = parse_line(payload, text)
        if self.table.is_shielded(line_number):
            self.ledger.strip_line(run_count)
            self.stats.lines_stripped += 1
        else:
            self.output.write(raw)

    def _on_summary(self, tag: str, payload: str, raw: str, text: str) -> None:
        value = self.ledger.adjust(tag, parse_count(payload, text))
        self.output.write(f"{tag}:{value}{raw[len(text):]}")

    def _on_end_of_record(
        self, tag: str, payload: str, raw: str, text: str
    ) -> None:
        self.output.write(raw)
        self.state = State.OUTSIDE
        self.current_file = None
        self.functions = frozenset()
        self.table.clear()
        self.ledger.reset()

    @staticmethod
    def _write(stream: Optional[TextIO], message: str) -> None:
        if stream is not None:
            stream.write(message + "\n")


def strip_tracefile(
    lines: Iterable[str],
    config: ShieldConfig,
    output: TextIO,
    diagnostics: Optional[TextIO] = None,
    progress: Optional[TextIO] = None,
    print_uncovered: bool = False,
    quiet: bool = False,
) -> TransformStats:
    """Strip shielded functions from tracefile ``lines`` into ``output``.

    Args:
        lines: Tracefile lines, line breaks included
        config: Shield-list configuration
        output: Stream receiving the transformed tracefile
        diagnostics: Stream for warnings
        progress: Stream for progress messages (defaults to diagnostics)
        print_uncovered: Report kept functions that never ran
        quiet: Suppress progress messages

    Returns:
        Statistics for the run
    """
    transformer = RecordTransformer(
        config,
        output,
        diagnostics=diagnostics,
        progress=progress,
        print_uncovered=print_uncovered,
        quiet=quiet,
    )
    return transformer.transform(lines)
