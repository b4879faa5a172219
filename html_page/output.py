"""Response sinks that receive rendered pages and transport headers.

Pages are written through two small protocols: :class:`OutputSink` for the
document body and :class:`HeaderSink` for transport headers. The concrete
:class:`ResponseStream` satisfies both by wrapping a text stream; in CGI mode
it writes the collected headers as a block before the first body write.

Example
-------
>>> import io
>>> stream = io.StringIO()
>>> response = ResponseStream(stream, cgi=True)
>>> response.send_header("Cache-Control", "no-cache")
>>> response.write("<p>hi</p>")
>>> stream.getvalue().splitlines()[1]
'Cache-Control: no-cache'
"""

from __future__ import annotations

import datetime as dt
import sys
import typing as typ
from email.utils import format_datetime

CONTENT_TYPE = "text/html; charset=UTF-8"


class SinkUnavailableError(RuntimeError):
    """Raised when a rendered page cannot be written to its sink."""


class HeaderAlreadySentWarning(UserWarning):
    """Signals that headers were set after the response started flushing."""


class OutputSink(typ.Protocol):
    """Anything that accepts rendered markup."""

    def write(self, text: str) -> object: ...


class HeaderSink(typ.Protocol):
    """Anything that accepts transport headers until it starts flushing."""

    @property
    def headers_sent(self) -> bool: ...

    def send_header(self, name: str, value: str) -> None: ...


class ResponseStream:
    """Write a response to a text stream, optionally with CGI headers."""

    def __init__(self, stream: typ.TextIO | None = None, *, cgi: bool = False) -> None:
        """Wrap ``stream`` (defaults to ``sys.stdout``).

        Parameters
        ----------
        stream : TextIO, optional
            Destination for the header block and the body.
        cgi : bool, optional
            Emit a ``Content-Type`` header plus any sent headers, followed by
            a blank line, before the first body write. Defaults to ``False``.
        """
        self._stream = stream
        self.cgi = cgi
        self.headers: dict[str, str] = {}
        self._headers_sent = False

    @property
    def stream(self) -> typ.TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def headers_sent(self) -> bool:
        return self._headers_sent

    def send_header(self, name: str, value: str) -> None:
        """Record a header for the pending header block.

        Raises
        ------
        HeaderAlreadySentWarning
            If the body has already started flushing.
        """
        if self._headers_sent:
            msg = f"Cannot set header '{name}': headers already sent"
            raise HeaderAlreadySentWarning(msg)
        self.headers[name] = value

    def write(self, text: str) -> None:
        """Write ``text``, flushing the header block first in CGI mode.

        Raises
        ------
        SinkUnavailableError
            If the stream is closed or refuses the write.
        """
        stream = self.stream
        if getattr(stream, "closed", False):
            msg = "Cannot write page: output stream is closed"
            raise SinkUnavailableError(msg)
        try:
            if not self._headers_sent and self.cgi:
                stream.write(self._header_block())
            self._headers_sent = True
            stream.write(text)
        except (OSError, ValueError) as exc:
            msg = f"Cannot write page: {exc}"
            raise SinkUnavailableError(msg) from exc

    def _header_block(self) -> str:
        headers = {"Content-Type": CONTENT_TYPE, **self.headers}
        lines = [f"{name}: {value}" for name, value in headers.items()]
        return "\r\n".join(lines) + "\r\n\r\n"


def http_date(moment: dt.datetime) -> str:
    """Format ``moment`` as an RFC 1123 date such as ``Sat, 17 Oct 2026 ... GMT``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=dt.UTC)
    return format_datetime(moment.astimezone(dt.UTC), usegmt=True)


__all__ = [
    "CONTENT_TYPE",
    "HeaderAlreadySentWarning",
    "HeaderSink",
    "OutputSink",
    "ResponseStream",
    "SinkUnavailableError",
    "http_date",
]
