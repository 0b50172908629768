"""Tracefile line tags and field parsers.

Each parser takes the payload after ``TAG:`` and returns the fields the
transformer needs. A payload that lacks a required separator or numeric
field raises TracefileFormatError.
"""

from typing import Tuple

from ..errors import TracefileFormatError

SF = "SF"
FN = "FN"
FNDA = "FNDA"
FNF = "FNF"
FNH = "FNH"
BRDA = "BRDA"
BRF = "BRF"
BRH = "BRH"
DA = "DA"
LF = "LF"
LH = "LH"
END_OF_RECORD = "end_of_record"

SUMMARY_TAGS = (FNF, FNH, BRF, BRH, LF, LH)

# BRDA uses "-" when the branch's block was never executed
NOT_TAKEN = "-"


def split_tag(line: str) -> Tuple[str, str]:
    """Split a line into its tag and payload.

    Examples:
        >>> split_tag("DA:10,3")
        ('DA', '10,3')
        >>> split_tag("end_of_record")
        ('end_of_record', '')
    """
    tag, _, payload = line.partition(":")
    return tag, payload


def _int_field(value: str, line: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise TracefileFormatError(line) from None


def _number_and_rest(payload: str, line: str) -> Tuple[int, str]:
    number, sep, rest = payload.partition(",")
    if not sep or not number:
        raise TracefileFormatError(line)
    return _int_field(number, line), rest


def parse_function(payload: str, line: str) -> Tuple[int, str]:
    """Parse ``FN:<start line>,<name>`` into (start line, name).

    The name is everything after the first comma; demangled C++ names may
    contain commas of their own.
    """
    return _number_and_rest(payload, line)


def parse_function_hits(payload: str, line: str) -> Tuple[int, str]:
    """Parse ``FNDA:<run count>,<name>`` into (run count, name)."""
    return _number_and_rest(payload, line)


def parse_branch(payload: str, line: str) -> Tuple[int, int]:
    """Parse ``BRDA:<line>,<block>,<branch>,<taken>`` into (line, taken).

    A taken value of ``-`` counts as zero.
    """
    parts = payload.split(",", 3)
    if len(parts) != 4 or not parts[0]:
        raise TracefileFormatError(line)
    line_number = _int_field(parts[0], line)
    taken = parts[3].strip()
    if taken == NOT_TAKEN:
        return line_number, 0
    return line_number, _int_field(taken, line)


def parse_line(payload: str, line: str) -> Tuple[int, int]:
    """Parse ``DA:<line>,<run count>[,<checksum>]`` into (line, run count)."""
    parts = payload.split(",", 2)
    if len(parts) < 2 or not parts[0]:
        raise TracefileFormatError(line)
    return _int_field(parts[0], line), _int_field(parts[1], line)


def parse_count(payload: str, line: str) -> int:
    """Parse a summary payload such as ``LF:<count>``."""
    return _int_field(payload, line)
