"""Assemble a complete HTML document from a page snapshot.

:class:`DocumentBuilder` walks one fixed skeleton
(``html_page/templates/document.jinja``) so the placement of every head and
body element stays stable between releases: doctype, charset and viewport
metas, author, head scripts, title, meta tags, stylesheets and link
relations, Open Graph and Twitter Card metas, the meta comment, the body
with its trusted markup, footer scripts, and a creation timestamp comment.

The builder is a pure function of the snapshot, the fallback title, and the
moment passed in; calling it twice with the same inputs yields identical
strings.

Example
-------
>>> import datetime as dt
>>> from html_page.model import PageModel
>>> snapshot = PageModel().set_title("Home").snapshot()
>>> moment = dt.datetime(2026, 10, 17, 16, 6, tzinfo=dt.UTC)
>>> html = DocumentBuilder().build(snapshot, now=moment)
>>> "<title>Home</title>" in html
True
"""

from __future__ import annotations

import datetime as dt
import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from html_page._constants import DOCUMENT_TEMPLATE, VIEWPORT, XHTML_NAMESPACE

if typ.TYPE_CHECKING:
    from html_page.model import PageSnapshot

_COMMENT_DASHES = re.compile(r"-(?=-)")


class DocumentBuilder:
    """Render page snapshots through the package's document skeleton."""

    def __init__(self) -> None:
        """Load the Jinja environment and the document template.

        Attribute values and the title are escaped by Jinja's autoescape;
        body markup and the guarded meta comment are passed through as-is.
        """
        self.templates_dir = Path(__file__).resolve().parents[1] / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(DOCUMENT_TEMPLATE)

    def build(
        self,
        snapshot: PageSnapshot,
        *,
        fallback_title: str = "",
        now: dt.datetime,
    ) -> str:
        """Return the full document markup for ``snapshot``.

        Parameters
        ----------
        snapshot : PageSnapshot
            Read-only page state produced by :meth:`PageModel.snapshot`.
        fallback_title : str, optional
            Title base used when the snapshot has no title, typically the
            current script name.
        now : datetime
            Moment written into the trailing ``Created`` comment.

        Returns
        -------
        str
            UTF-8 ready HTML, one element per line, ending with a newline.

        Notes
        -----
        XHTML doctypes close ``meta``/``link`` elements with `` />`` and write
        boolean attributes in full (``async="async"``) so the document is
        well-formed XML. Body markup is emitted as given and followed by a
        newline, so content that already ends in a newline leaves a blank line.
        """
        xhtml = snapshot.doctype.is_xhtml
        context = {
            "doctype": snapshot.doctype.value,
            "xhtml": xhtml,
            "xhtml_namespace": XHTML_NAMESPACE,
            "void_close": Markup(" />") if xhtml else Markup(">"),
            "language": snapshot.language,
            "charset": snapshot.charset,
            "viewport": VIEWPORT,
            "author": snapshot.author,
            "head_scripts": snapshot.head_scripts,
            "title": compose_title(snapshot, fallback_title),
            "meta_tags": snapshot.meta_tags,
            "stylesheets": snapshot.stylesheets,
            "canonical_url": snapshot.canonical_url,
            "favicon_url": snapshot.favicon_url,
            "open_graph": snapshot.open_graph,
            "twitter_card": snapshot.twitter_card,
            "meta_comment": guard_comment(snapshot.meta_comment),
            "body_id": snapshot.body_id,
            "body_class": snapshot.body_class,
            "body": snapshot.body,
            "footer_scripts": snapshot.footer_scripts,
            "created": format_created(now),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html


def compose_title(snapshot: PageSnapshot, fallback_title: str = "") -> str:
    """Join title and suffix with the separator current at render time.

    Examples
    --------
    >>> from html_page.model import PageSnapshot
    >>> compose_title(PageSnapshot(title="Home", title_suffix="Site"))
    'Home :: Site'
    >>> compose_title(PageSnapshot(), "/index.py")
    '/index.py'
    """
    base = snapshot.title or fallback_title
    if snapshot.title_suffix:
        return f"{base}{snapshot.title_separator}{snapshot.title_suffix}"
    return base


def guard_comment(text: str) -> str:
    """Break up ``--`` runs so ``text`` cannot terminate an HTML comment.

    >>> guard_comment("a --> b")
    'a - -> b'
    """
    return _COMMENT_DASHES.sub("- ", text)


def format_created(moment: dt.datetime) -> str:
    """Format ``moment`` like ``Saturday 17th of October 2026 04:06:00 PM``."""
    day = moment.day
    if 11 <= day % 100 <= 13:
        ordinal = "th"
    else:
        ordinal = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{moment:%A} {day}{ordinal} of {moment:%B %Y %I:%M:%S %p}"


__all__ = ["DocumentBuilder", "compose_title", "format_created", "guard_comment"]
