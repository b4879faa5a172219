"""Assemble complete HTML documents from fluently configured page state.

Callers configure a page step by step (title, body attributes, meta and
social-card tags, stylesheets, scripts, body markup) and then render it once
through a fixed document skeleton.

Exports
-------
- ``HtmlPage``: page model with ``fetch``/``display`` and cache headers.
- ``PageModel``: the bare fluent state model.
- ``DocumentBuilder``: renders a ``PageSnapshot`` into markup.
- ``RequestContext``: injected fallback title and clock.
- ``ResponseStream``: stream sink, optionally writing CGI headers.

Examples
--------
>>> from html_page import HtmlPage, RequestContext
>>> page = HtmlPage(context=RequestContext(script_name="/index.py"))
>>> "<title>/index.py</title>" in page.set_meta_data("robots", "none").fetch()
True
"""

from __future__ import annotations

from .builder import DocumentBuilder
from .context import RequestContext
from .model import (
    Doctype,
    PageModel,
    PageSnapshot,
    Script,
    StyleSheet,
    ValidationError,
)
from .output import (
    HeaderAlreadySentWarning,
    ResponseStream,
    SinkUnavailableError,
)
from .page import HtmlPage

__all__ = [
    "Doctype",
    "DocumentBuilder",
    "HeaderAlreadySentWarning",
    "HtmlPage",
    "PageModel",
    "PageSnapshot",
    "RequestContext",
    "ResponseStream",
    "Script",
    "SinkUnavailableError",
    "StyleSheet",
    "ValidationError",
]
