"""Parse the shield-list configuration file.

The file format is::

    TOPDIR=/home/builder/src/
    lib/foo.c:
        generated_table     # comments run to end of line
        test_helper
    lib/bar.c:
        ...

TOPDIR is the directory prefix shared by every SF: path in the tracefile.
Each ``<path>:`` line opens a section, and the lines below it name the
functions to strip from that file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Set, TextIO

from ..errors import ConfigError
from ..models import ShieldConfig

TOPDIR_PREFIX = "TOPDIR="
COMMENT_START = "#"
SECTION_END = ":"


def _significant_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines with comments and surrounding whitespace removed."""
    for line in lines:
        text = line.split(COMMENT_START, 1)[0].strip()
        if text:
            yield text


def _warn(diagnostics: Optional[TextIO], message: str) -> None:
    if diagnostics is not None:
        diagnostics.write(message + "\n")


def parse_config(
    lines: Iterable[str],
    topdir: Optional[str] = None,
    reversed: bool = False,
    diagnostics: Optional[TextIO] = None,
) -> ShieldConfig:
    """Build a ShieldConfig from configuration file lines.

    Args:
        lines: Raw configuration lines (with or without line breaks)
        topdir: Top directory override; wins over the file's TOPDIR=
        reversed: Reverse the meaning of the function lists
        diagnostics: Stream for warnings about ignored lines

    Returns:
        The loaded configuration

    Raises:
        ConfigError: If the file is empty, or has no TOPDIR= line and no
            override was given
    """
    significant = _significant_lines(lines)
    first = next(significant, None)
    if first is None:
        raise ConfigError("Config file is empty")

    pending = []
    if first.startswith(TOPDIR_PREFIX):
        file_topdir = first[len(TOPDIR_PREFIX):].strip()
    elif topdir is not None:
        file_topdir = None
        pending.append(first)
    else:
        raise ConfigError(
            f"Config file must start with {TOPDIR_PREFIX}\n"
            f"   e.g. {TOPDIR_PREFIX}/home/builder/src/\n"
            f"OR specify the top directory with the -t option"
        )

    files: Dict[str, Set[str]] = {}
    section: Optional[str] = None
    for text in [*pending, *significant]:
        if text.endswith(SECTION_END):
            path = text[: -len(SECTION_END)].strip()
            if not path:
                _warn(diagnostics, f"ignore config line: {text}")
                continue
            section = path
            files.setdefault(section, set())
        elif section is None:
            _warn(diagnostics, f"ignore config line: {text}")
        else:
            files[section].add(text)

    return ShieldConfig(
        topdir=topdir if topdir is not None else file_topdir,
        reversed=reversed,
        files={path: frozenset(funcs) for path, funcs in files.items()},
    )


def load_config(
    path: str | Path,
    topdir: Optional[str] = None,
    reversed: bool = False,
    diagnostics: Optional[TextIO] = None,
) -> ShieldConfig:
    """Load a ShieldConfig from a configuration file.

    Raises:
        OSError: If the file cannot be opened
        ConfigError: If the file content is invalid
    """
    with open(path, encoding="utf-8", errors="surrogateescape") as f:
        return parse_config(
            f, topdir=topdir, reversed=reversed, diagnostics=diagnostics
        )
