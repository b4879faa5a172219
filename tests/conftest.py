"""Shared fixtures that pin the clock used by page rendering."""

from __future__ import annotations

import datetime as dt

import pytest

from html_page import RequestContext

FIXED_MOMENT = dt.datetime(2026, 10, 17, 16, 6, 0, tzinfo=dt.UTC)


@pytest.fixture
def fixed_moment() -> dt.datetime:
    """Return the moment every deterministic render is stamped with."""
    return FIXED_MOMENT


@pytest.fixture
def created_line() -> str:
    """Return the ``Created`` comment rendered for :data:`FIXED_MOMENT`."""
    return "<!-- Created: Saturday 17th of October 2026 04:06:00 PM -->"


@pytest.fixture
def fixed_context() -> RequestContext:
    """Return a request context with a frozen clock and a script name."""
    return RequestContext(script_name="/index.py", clock=lambda: FIXED_MOMENT)
