"""Shield-list configuration model."""

from __future__ import annotations

from typing import Dict, FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ShieldConfig(BaseModel):
    """Functions to strip, keyed by source path relative to ``topdir``.

    With ``reversed`` set, the listed functions are the ones kept and every
    other function of a listed file is stripped.
    """

    model_config = ConfigDict(frozen=True)

    topdir: str
    reversed: bool = False
    files: Dict[str, FrozenSet[str]] = Field(default_factory=dict)

    @field_validator("files")
    @classmethod
    def paths_not_empty(
        cls, v: Dict[str, FrozenSet[str]]
    ) -> Dict[str, FrozenSet[str]]:
        """Reject empty source file keys."""

        if any(not path for path in v):
            raise ValueError("Source file path cannot be empty")
        return v

    @property
    def source_files(self) -> List[str]:
        """Configured source paths, sorted."""

        return sorted(self.files)

    def functions_for(self, path: str) -> FrozenSet[str] | None:
        """Get the function set for a normalized path, or None if unlisted."""

        return self.files.get(path)

    def is_shielded(self, functions: FrozenSet[str], name: str) -> bool:
        """Check whether ``name`` is stripped given a file's function set."""

        return (name in functions) != self.reversed


__all__ = ["ShieldConfig"]
