"""Exceptions raised by the config loader and the tracefile transformer."""

from typing import Optional


class StripcovError(Exception):
    """Base class for stripcov errors."""

    pass


class ConfigError(StripcovError):
    """Shield-list configuration is empty or incomplete."""

    pass


class TracefileFormatError(StripcovError):
    """A tracefile datum is missing a required field or separator.

    Unrecoverable: the transformer stops at the offending line and anything
    already written to the output stays as-is.
    """

    def __init__(self, line: str, lineno: Optional[int] = None):
        self.line = line
        self.lineno = lineno
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.lineno is not None:
            return (
                f"Lcov info file format error, aborted "
                f"(line {self.lineno}: {self.line})"
            )
        return f"Lcov info file format error, aborted (line: {self.line})"


__all__ = ["ConfigError", "StripcovError", "TracefileFormatError"]
