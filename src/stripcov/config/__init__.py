"""Shield-list configuration loading."""

from .core import TOPDIR_PREFIX, load_config, parse_config

__all__ = ["TOPDIR_PREFIX", "load_config", "parse_config"]
