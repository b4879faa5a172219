"""Request-scoped collaborators injected into page rendering."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import os
import typing as typ


def utc_now() -> dt.datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return dt.datetime.now(dt.UTC)


@dc.dataclass(slots=True, frozen=True)
class RequestContext:
    """Fallback title source and clock for a single request.

    Attributes
    ----------
    script_name : str
        Path of the running script; used as the title when none is set.
    clock : Callable[[], datetime]
        Time source for the ``Created`` comment and the ``Expires`` header.
        Tests pass a fixed clock to make output deterministic.
    """

    script_name: str = ""
    clock: typ.Callable[[], dt.datetime] = utc_now

    @classmethod
    def from_environ(
        cls, environ: typ.Mapping[str, str] | None = None
    ) -> RequestContext:
        """Build a context from CGI-style variables (``SCRIPT_NAME``)."""
        env = os.environ if environ is None else environ
        return cls(script_name=env.get("SCRIPT_NAME", ""))

    def now(self) -> dt.datetime:
        """Return the clock value coerced to an aware UTC datetime."""
        moment = self.clock()
        if moment.tzinfo is None:
            return moment.replace(tzinfo=dt.UTC)
        return moment.astimezone(dt.UTC)


__all__ = ["RequestContext", "utc_now"]
