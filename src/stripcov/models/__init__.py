"""Pydantic models for stripcov configuration."""

from .config import ShieldConfig

__all__ = ["ShieldConfig"]
