"""Map SF: paths onto the keys used in the shield-list configuration."""

from dataclasses import dataclass

SEPARATOR = "/"


@dataclass(frozen=True)
class PathResolver:
    """Strip the configured top directory from record header paths.

    Stripping is purely by length: the first ``len(topdir)`` characters are
    dropped, plus one path separator when the top directory was written
    without a trailing one. A path outside ``topdir`` is not rejected, it
    just resolves to something no configuration key matches.
    """

    topdir: str

    def resolve(self, source_path: str) -> str:
        normalized = source_path[len(self.topdir):]
        if (
            self.topdir
            and not self.topdir.endswith(SEPARATOR)
            and normalized.startswith(SEPARATOR)
        ):
            normalized = normalized[len(SEPARATOR):]
        return normalized
