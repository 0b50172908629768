"""LCOV tracefile transformation."""

from .ledger import CounterLedger
from .paths import PathResolver
from .ranges import FunctionEntry, FunctionRangeTable
from .transformer import RecordTransformer, State, TransformStats, strip_tracefile

__all__ = [
    "CounterLedger",
    "FunctionEntry",
    "FunctionRangeTable",
    "PathResolver",
    "RecordTransformer",
    "State",
    "TransformStats",
    "strip_tracefile",
]
