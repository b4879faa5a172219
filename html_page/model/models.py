"""Typed dataclasses describing configured page state."""

from __future__ import annotations

import dataclasses as dc
import enum

from html_page._constants import (
    DEFAULT_CHARSET,
    DEFAULT_LANGUAGE,
    DEFAULT_MEDIA,
    DEFAULT_TITLE_SEPARATOR,
)


class ValidationError(ValueError):
    """Raised when a mutator receives an unusable value."""


class Doctype(enum.Enum):
    """Document type declarations the builder can emit.

    ``HTML5`` is the default. The HTML 4.01 and XHTML members exist for pages
    that still have to validate against a legacy DTD.
    """

    HTML5 = "<!doctype html>"
    HTML_4_01_STRICT = (
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01//EN" '
        '"http://www.w3.org/TR/html4/strict.dtd">'
    )
    HTML_4_01_TRANSITIONAL = (
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" '
        '"http://www.w3.org/TR/html4/loose.dtd">'
    )
    HTML_4_01_FRAMESET = (
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Frameset//EN" '
        '"http://www.w3.org/TR/html4/frameset.dtd">'
    )
    XHTML_1_0_STRICT = (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" '
        '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">'
    )
    XHTML_1_0_TRANSITIONAL = (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
        '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">'
    )
    XHTML_1_0_FRAMESET = (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Frameset//EN" '
        '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-frameset.dtd">'
    )
    XHTML_1_1 = (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" '
        '"http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">'
    )

    @property
    def is_xhtml(self) -> bool:
        """Return True when the root element needs the XHTML namespace."""
        return self.name.startswith("XHTML")

    @classmethod
    def parse(cls, value: Doctype | str) -> Doctype:
        """Resolve ``value`` by member or case-insensitive member name.

        Raises
        ------
        ValidationError
            If ``value`` does not name a known doctype.
        """
        if isinstance(value, Doctype):
            return value
        key = str(value).strip().upper().replace(".", "_").replace("-", "_")
        try:
            return cls[key]
        except KeyError as exc:
            known = ", ".join(member.name for member in cls)
            msg = f"Unknown doctype '{value}'. Known doctypes: {known}"
            raise ValidationError(msg) from exc


@dc.dataclass(slots=True, frozen=True)
class StyleSheet:
    """External stylesheet link emitted in the document head."""

    url: str
    media: str = DEFAULT_MEDIA
    preload: bool = False


@dc.dataclass(slots=True, frozen=True)
class Script:
    """External script reference; ``is_async`` adds the ``async`` attribute."""

    url: str
    is_async: bool = False


@dc.dataclass(slots=True, frozen=True)
class PageSnapshot:
    """Read-only copy of a page model handed to the document builder.

    Attributes
    ----------
    title : str
        Primary title; empty when the caller never set one.
    title_suffix : str
        Optional suffix joined with ``title_separator`` at render time.
    title_separator : str
        Separator placed between title and suffix.
    body_id, body_class : str
        Optional ``<body>`` attributes; empty strings are omitted.
    author : str
        Value for the author meta tag; omitted when empty.
    meta_comment : str
        Free text emitted as an HTML comment at the end of the head.
    body : str
        Accumulated, trusted body markup.
    meta_tags, open_graph, twitter_card : dict[str, str]
        Insertion-ordered mappings. Social-card keys carry no prefix.
    canonical_url, favicon_url : str
        Protocol-relative URLs, empty when unset.
    stylesheets : tuple[StyleSheet, ...]
        Stylesheets in insertion order.
    head_scripts, footer_scripts : tuple[Script, ...]
        Scripts grouped by the position chosen when they were added.
    doctype : Doctype
        Declaration emitted on the first line.
    language, charset : str
        Root ``lang`` attribute and charset meta value.
    """

    title: str = ""
    title_suffix: str = ""
    title_separator: str = DEFAULT_TITLE_SEPARATOR
    body_id: str = ""
    body_class: str = ""
    author: str = ""
    meta_comment: str = ""
    body: str = ""
    meta_tags: dict[str, str] = dc.field(default_factory=dict)
    open_graph: dict[str, str] = dc.field(default_factory=dict)
    twitter_card: dict[str, str] = dc.field(default_factory=dict)
    canonical_url: str = ""
    favicon_url: str = ""
    stylesheets: tuple[StyleSheet, ...] = ()
    head_scripts: tuple[Script, ...] = ()
    footer_scripts: tuple[Script, ...] = ()
    doctype: Doctype = Doctype.HTML5
    language: str = DEFAULT_LANGUAGE
    charset: str = DEFAULT_CHARSET


__all__ = [
    "Doctype",
    "PageSnapshot",
    "Script",
    "StyleSheet",
    "ValidationError",
]
