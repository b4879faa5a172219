"""Page model with output dispatch and the cache-header side channel.

:class:`HtmlPage` extends :class:`~html_page.model.PageModel` with the
operations callers finish a chain with: ``fetch``/``to_string`` return the
document, ``display`` writes it to the response sink, and
``set_cache_headers`` sends ``Cache-Control``/``Expires`` before the body
goes out. Each output call renders once through
:class:`~html_page.builder.DocumentBuilder`.

Example
-------
>>> import io
>>> from html_page.output import ResponseStream
>>> response = ResponseStream(io.StringIO(), cgi=True)
>>> page = HtmlPage(sink=response)
>>> page = (
...     page.set_title("My Sample Page")
...     .set_title_suffix("My Website")
...     .set_meta_data("description", "A sample page.")
...     .add_stylesheet("https://www.example.com/css/styles.css", "all", True)
...     .add_javascript("https://www.example.com/js/script.js", "footer", True)
...     .set_cache_headers("public, max-age=86400", 86400)
...     .display()
... )  # doctest: +SKIP
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ

from .builder import DocumentBuilder
from .context import RequestContext
from .model import PageModel
from .output import (
    HeaderAlreadySentWarning,
    HeaderSink,
    OutputSink,
    ResponseStream,
    SinkUnavailableError,
    http_date,
)

logger = logging.getLogger(__name__)


class HtmlPage(PageModel):
    """A page model that can render itself and emit the result."""

    def __init__(
        self,
        *,
        context: RequestContext | None = None,
        sink: ResponseStream | None = None,
        builder: DocumentBuilder | None = None,
    ) -> None:
        """Initialize an empty page.

        Parameters
        ----------
        context : RequestContext, optional
            Fallback title and clock. Defaults to
            :meth:`RequestContext.from_environ`.
        sink : ResponseStream, optional
            Destination for ``display`` and ``set_cache_headers``. Defaults to
            a plain stream over ``sys.stdout``.
        builder : DocumentBuilder, optional
            Shared builder; pass one in to reuse its loaded template.
        """
        super().__init__()
        self.context = context or RequestContext.from_environ()
        self.sink = sink or ResponseStream()
        self.builder = builder or DocumentBuilder()
        self.header_warnings: list[HeaderAlreadySentWarning] = []

    def fetch(self) -> str:
        """Render the page and return the document markup."""
        return self.builder.build(
            self.snapshot(),
            fallback_title=self.context.script_name,
            now=self.context.now(),
        )

    def to_string(self) -> str:
        return self.fetch()

    def __str__(self) -> str:
        return self.fetch()

    def display(self, sink: OutputSink | None = None) -> typ.Self:
        """Render the page and write it to ``sink`` (default: ``self.sink``).

        Raises
        ------
        SinkUnavailableError
            If the sink is closed or rejects the write. The write is not
            retried.
        """
        target = sink if sink is not None else self.sink
        html = self.fetch()
        try:
            target.write(html)
        except SinkUnavailableError:
            raise
        except (OSError, ValueError) as exc:
            msg = f"Cannot write page: {exc}"
            raise SinkUnavailableError(msg) from exc
        return self

    def set_cache_headers(
        self,
        cache_control: str = "no-cache",
        expires: int = 0,
        *,
        sink: HeaderSink | None = None,
    ) -> typ.Self:
        """Send ``Cache-Control`` and, when ``expires > 0``, ``Expires``.

        Once the sink has started flushing, the call only logs a warning and
        records it in :attr:`header_warnings`; it never raises.
        """
        target = sink if sink is not None else self.sink
        try:
            if target.headers_sent:
                msg = "Cannot set headers, headers already sent"
                raise HeaderAlreadySentWarning(msg)
            target.send_header("Cache-Control", cache_control)
            if expires > 0:
                expiry = self.context.now() + dt.timedelta(seconds=expires)
                target.send_header("Expires", http_date(expiry))
        except HeaderAlreadySentWarning as warning:
            logger.warning("%s", warning)
            self.header_warnings.append(warning)
        return self


__all__ = ["HtmlPage"]
