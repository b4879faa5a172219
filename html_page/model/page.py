"""Mutable page state configured through chained setter calls.

:class:`PageModel` collects everything the document builder needs: title
parts, body attributes, meta and social-card data, stylesheets, scripts, and
body markup. Every mutator returns the same instance so calls can be chained,
and URL normalization happens when a value is stored, never at render time.

Example
-------
>>> page = (
...     PageModel()
...     .set_title("Home")
...     .set_meta_data("description", "x")
...     .add_stylesheet("https://a.com/s.css")
... )
>>> page.stylesheets[0].url
'//a.com/s.css'

Body content and the meta comment are caller-trusted: body markup is emitted
verbatim, so never pass unsanitized user input to :meth:`add_body_content`.
"""

from __future__ import annotations

import typing as typ

from html_page._constants import (
    DEFAULT_CHARSET,
    DEFAULT_LANGUAGE,
    DEFAULT_MEDIA,
    DEFAULT_TITLE_SEPARATOR,
    FOOTER_POSITION,
    HEADER_POSITION,
    IMAGE_PROPERTY,
    OPEN_GRAPH_PREFIX,
    TWITTER_PREFIX,
)

from .helpers import _protocol_relative, _require_url, _strip_prefix
from .models import Doctype, PageSnapshot, Script, StyleSheet


class PageModel:
    """Accumulate page attributes ahead of a single render pass."""

    def __init__(self) -> None:
        self.title = ""
        self.title_suffix = ""
        self.title_separator = DEFAULT_TITLE_SEPARATOR
        self.body_id = ""
        self.body_class = ""
        self.author = ""
        self.meta_comment = ""
        self.body = ""
        self.meta_tags: dict[str, str] = {}
        self.open_graph: dict[str, str] = {}
        self.twitter_card: dict[str, str] = {}
        self.canonical_url = ""
        self.favicon_url = ""
        self.stylesheets: list[StyleSheet] = []
        self.head_scripts: list[Script] = []
        self.footer_scripts: list[Script] = []
        self.doctype = Doctype.HTML5
        self.language = DEFAULT_LANGUAGE
        self.charset = DEFAULT_CHARSET

    # Title -----------------------------------------------------------------

    def set_title(self, title: str) -> typ.Self:
        """Set the primary page title."""
        self.title = title
        return self

    def set_title_suffix(self, suffix: str) -> typ.Self:
        """Set the suffix joined to the title with the current separator."""
        self.title_suffix = suffix
        return self

    def set_title_separator(self, separator: str) -> typ.Self:
        """Set the separator placed between title and suffix at render time."""
        self.title_separator = separator
        return self

    # Document --------------------------------------------------------------

    def set_doctype(self, doctype: Doctype | str) -> typ.Self:
        """Select the doctype by member or name (``"xhtml_1_0_strict"``).

        Raises
        ------
        ValidationError
            If ``doctype`` names no known declaration.
        """
        self.doctype = Doctype.parse(doctype)
        return self

    def set_language(self, language: str) -> typ.Self:
        self.language = language
        return self

    def set_charset(self, charset: str) -> typ.Self:
        self.charset = charset
        return self

    # Body ------------------------------------------------------------------

    def set_body_id(self, body_id: str) -> typ.Self:
        self.body_id = body_id
        return self

    def set_body_class(self, body_class: str) -> typ.Self:
        self.body_class = body_class
        return self

    def add_body_content(self, markup: str) -> typ.Self:
        """Append trusted markup to the body; earlier content is kept.

        The markup is not trimmed, so a trailing newline shows up as a blank
        line before the footer scripts.
        """
        self.body += markup
        return self

    # Head metadata ---------------------------------------------------------

    def set_author(self, author: str) -> typ.Self:
        self.author = author
        return self

    def set_meta_data(self, key: str, value: str) -> typ.Self:
        """Add or overwrite a ``<meta name=...>`` tag.

        Surrounding whitespace is stripped from ``key``, as it is for social
        property names.
        """
        self.meta_tags[key.strip()] = value
        return self

    def set_meta_comment(self, comment: str) -> typ.Self:
        """Set the HTML comment emitted at the end of the head section."""
        self.meta_comment = comment
        return self

    def set_open_graph_data(self, prop: str, content: str) -> typ.Self:
        """Store an Open Graph property, with or without the ``og:`` prefix.

        The ``image`` property is made protocol-relative before it is stored.
        """
        key = _strip_prefix(prop, OPEN_GRAPH_PREFIX)
        if key == IMAGE_PROPERTY:
            content = _protocol_relative(content)
        self.open_graph[key] = content
        return self

    def set_twitter_card_data(self, prop: str, content: str) -> typ.Self:
        """Store a Twitter Card property, with or without ``twitter:``."""
        key = _strip_prefix(prop, TWITTER_PREFIX)
        if key == IMAGE_PROPERTY:
            content = _protocol_relative(content)
        self.twitter_card[key] = content
        return self

    def set_canonical_url(self, url: str) -> typ.Self:
        self.canonical_url = _protocol_relative(url)
        return self

    def set_favicon(self, url: str) -> typ.Self:
        self.favicon_url = _protocol_relative(url)
        return self

    # Assets ----------------------------------------------------------------

    def add_stylesheet(
        self, url: str, media: str = DEFAULT_MEDIA, preload: bool = False
    ) -> typ.Self:
        """Append a stylesheet link.

        Raises
        ------
        ValidationError
            If ``url`` is empty or whitespace.
        """
        stylesheet = StyleSheet(
            url=_require_url(url, "stylesheet"), media=media, preload=preload
        )
        self.stylesheets.append(stylesheet)
        return self

    def add_javascript(
        self, url: str, position: str = FOOTER_POSITION, is_async: bool = False
    ) -> typ.Self:
        """Append a script to the head (``"header"``) or the end of the body.

        Any position other than ``"header"`` routes the script to the footer.

        Raises
        ------
        ValidationError
            If ``url`` is empty or whitespace.
        """
        script = Script(url=_require_url(url, "script"), is_async=is_async)
        if position == HEADER_POSITION:
            self.head_scripts.append(script)
        else:
            self.footer_scripts.append(script)
        return self

    # Clearing --------------------------------------------------------------

    def clear_stylesheets(self) -> typ.Self:
        self.stylesheets.clear()
        return self

    def clear_javascripts(self) -> typ.Self:
        """Remove scripts from both the head and the footer."""
        self.head_scripts.clear()
        self.footer_scripts.clear()
        return self

    def clear_meta_tags(self) -> typ.Self:
        self.meta_tags.clear()
        return self

    def clear_meta_data(self, key: str) -> typ.Self:
        """Remove one meta tag; unknown keys are ignored."""
        self.meta_tags.pop(key.strip(), None)
        return self

    def snapshot(self) -> PageSnapshot:
        """Return an immutable copy of the current state for rendering."""
        return PageSnapshot(
            title=self.title,
            title_suffix=self.title_suffix,
            title_separator=self.title_separator,
            body_id=self.body_id,
            body_class=self.body_class,
            author=self.author,
            meta_comment=self.meta_comment,
            body=self.body,
            meta_tags=dict(self.meta_tags),
            open_graph=dict(self.open_graph),
            twitter_card=dict(self.twitter_card),
            canonical_url=self.canonical_url,
            favicon_url=self.favicon_url,
            stylesheets=tuple(self.stylesheets),
            head_scripts=tuple(self.head_scripts),
            footer_scripts=tuple(self.footer_scripts),
            doctype=self.doctype,
            language=self.language,
            charset=self.charset,
        )


__all__ = ["PageModel"]
