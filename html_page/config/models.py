"""Typed dataclasses describing a page configuration file."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from html_page._constants import DEFAULT_MEDIA, FOOTER_POSITION

if typ.TYPE_CHECKING:
    from html_page.model import PageModel
    from html_page.page import HtmlPage


class PageConfigError(ValueError):
    """Raised when the page configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class StyleSheetConfig:
    """Stylesheet entry from the ``stylesheets`` list."""

    url: str
    media: str = DEFAULT_MEDIA
    preload: bool = False


@dc.dataclass(slots=True)
class ScriptConfig:
    """Script entry from the ``scripts`` list."""

    url: str
    position: str = FOOTER_POSITION
    is_async: bool = False


@dc.dataclass(slots=True)
class CacheConfig:
    """Cache headers sent before the page body."""

    control: str = "no-cache"
    expires: int = 0


@dc.dataclass(slots=True)
class PageConfig:
    """A fully resolved page definition sourced from YAML config."""

    title: str | None = None
    title_suffix: str | None = None
    title_separator: str | None = None
    doctype: str | None = None
    language: str | None = None
    charset: str | None = None
    author: str | None = None
    body_id: str | None = None
    body_class: str | None = None
    meta: dict[str, str] = dc.field(default_factory=dict)
    open_graph: dict[str, str] = dc.field(default_factory=dict)
    twitter: dict[str, str] = dc.field(default_factory=dict)
    canonical_url: str | None = None
    favicon: str | None = None
    stylesheets: list[StyleSheetConfig] = dc.field(default_factory=list)
    scripts: list[ScriptConfig] = dc.field(default_factory=list)
    meta_comment: str | None = None
    content: str = ""
    cache: CacheConfig | None = None

    def apply(self, page: PageModel) -> PageModel:
        """Replay this configuration onto ``page`` through its mutators."""
        setters: list[tuple[str | None, typ.Callable[[str], object]]] = [
            (self.title, page.set_title),
            (self.title_suffix, page.set_title_suffix),
            (self.title_separator, page.set_title_separator),
            (self.doctype, page.set_doctype),
            (self.language, page.set_language),
            (self.charset, page.set_charset),
            (self.author, page.set_author),
            (self.body_id, page.set_body_id),
            (self.body_class, page.set_body_class),
            (self.canonical_url, page.set_canonical_url),
            (self.favicon, page.set_favicon),
            (self.meta_comment, page.set_meta_comment),
        ]
        for value, setter in setters:
            if value is not None:
                setter(value)
        for key, value in self.meta.items():
            page.set_meta_data(key, value)
        for prop, value in self.open_graph.items():
            page.set_open_graph_data(prop, value)
        for prop, value in self.twitter.items():
            page.set_twitter_card_data(prop, value)
        for sheet in self.stylesheets:
            page.add_stylesheet(sheet.url, sheet.media, sheet.preload)
        for script in self.scripts:
            page.add_javascript(script.url, script.position, script.is_async)
        if self.content:
            page.add_body_content(self.content)
        return page

    def apply_cache_headers(self, page: HtmlPage) -> HtmlPage:
        """Send the configured cache headers, if any, through ``page``."""
        if self.cache is not None:
            page.set_cache_headers(self.cache.control, self.cache.expires)
        return page


__all__ = [
    "CacheConfig",
    "PageConfig",
    "PageConfigError",
    "ScriptConfig",
    "StyleSheetConfig",
]
