"""Normalization helpers shared by the page model mutators."""

from __future__ import annotations

import re

from .models import ValidationError

_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def _protocol_relative(url: str) -> str:
    """Rewrite a leading ``http://`` or ``https://`` to ``//``.

    Examples
    --------
    >>> _protocol_relative("https://a.com/s.css")
    '//a.com/s.css'
    >>> _protocol_relative("/static/s.css")
    '/static/s.css'
    """
    return _SCHEME_PATTERN.sub("//", url, count=1)


def _strip_prefix(prop: str, prefix: str) -> str:
    """Drop ``prefix`` from a social-card property name when present."""
    name = prop.strip()
    if name.lower().startswith(prefix):
        return name[len(prefix) :]
    return name


def _require_url(url: str, kind: str) -> str:
    """Return ``url`` stripped and protocol-relative, rejecting blanks."""
    text = url.strip()
    if not text:
        msg = f"Cannot add a {kind} with an empty URL."
        raise ValidationError(msg)
    return _protocol_relative(text)


__all__ = ["_protocol_relative", "_require_url", "_strip_prefix"]
