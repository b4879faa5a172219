"""Utilities for assembling page snapshots into HTML documents."""

from .document import DocumentBuilder, compose_title, format_created, guard_comment

__all__ = [
    "DocumentBuilder",
    "compose_title",
    "format_created",
    "guard_comment",
]
