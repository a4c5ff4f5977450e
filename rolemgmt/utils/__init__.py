"""Utility helpers for reusable functionality."""

from .datetime import format_timestamp

__all__ = ["format_timestamp"]
