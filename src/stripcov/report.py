"""Printers for dumping a loaded configuration (--dumpconf)."""

import json

from .models import ShieldConfig


def format_text(config: ShieldConfig) -> str:
    """Format a configuration as human-readable text.

    Args:
        config: Loaded configuration

    Returns:
        Text listing the top directory, each file and its functions
    """
    lines = ["=====CONFIG DUMP====="]
    lines.append(f"TOPDIR: ({config.topdir})")
    if config.reversed:
        lines.append("REVERSED: listed functions are kept")
    for path in config.source_files:
        lines.append(f"CFILE: ({path})")
        for func in sorted(config.files[path]):
            lines.append(f" FUNC: ({func})")
    lines.append("=====CFILE SET DUMP=====")
    for path in config.source_files:
        lines.append(f"CFILE: ({path})")
    return "\n".join(lines)


def format_json(config: ShieldConfig) -> str:
    """Format a configuration as JSON with sorted function lists."""
    data = {
        "topdir": config.topdir,
        "reversed": config.reversed,
        "files": {
            path: sorted(config.files[path]) for path in config.source_files
        },
    }
    return json.dumps(data, indent=2)
