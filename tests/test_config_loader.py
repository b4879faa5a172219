"""Unit tests for loading page configuration YAML.

These tests write small ``page.yaml`` files into ``tmp_path``, load them with
:func:`html_page.config.load_page_config`, and check both the parsed
dataclasses and the page model they produce when applied.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from html_page.config import (
    CacheConfig,
    PageConfigError,
    ScriptConfig,
    StyleSheetConfig,
    load_page_config,
)
from html_page.model import Doctype, PageModel, Script, StyleSheet

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "page.yaml"
    path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
    return path


def test_full_config_is_parsed(tmp_path: Path) -> None:
    (tmp_path / "body.html").write_text("<main>from file</main>", encoding="utf-8")
    path = _write(
        tmp_path,
        """
        title: Home
        title_suffix: Example
        title_separator: " | "
        doctype: xhtml_1_0_strict
        author: Jane Doe
        body_id: home
        body_class: landing wide
        meta:
          description: x
          keywords: a, b
        open_graph:
          og:image: https://example.com/i.jpg
        twitter:
          card: summary
        canonical_url: https://example.com/
        stylesheets:
          - https://a.com/s.css
          - url: /print.css
            media: print
            preload: true
        scripts:
          - /foot.js
          - url: https://a.com/head.js
            position: header
            async: true
        meta_comment: generated
        content: "<h1>Hi</h1>"
        content_file: body.html
        cache:
          control: public, max-age=60
          expires: 60
        """,
    )
    config = load_page_config(path)

    assert config.title == "Home"
    assert config.title_separator == " | "
    assert config.meta == {"description": "x", "keywords": "a, b"}
    assert config.stylesheets == [
        StyleSheetConfig(url="https://a.com/s.css"),
        StyleSheetConfig(url="/print.css", media="print", preload=True),
    ]
    assert config.scripts == [
        ScriptConfig(url="/foot.js"),
        ScriptConfig(url="https://a.com/head.js", position="header", is_async=True),
    ]
    assert config.content == "<h1>Hi</h1><main>from file</main>"
    assert config.cache == CacheConfig(control="public, max-age=60", expires=60)


def test_apply_replays_config_through_mutators(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        title: Home
        doctype: xhtml_1_1
        open_graph:
          og:image: https://example.com/i.jpg
        stylesheets:
          - https://a.com/s.css
        scripts:
          - url: https://a.com/head.js
            position: header
        content: "<p>x</p>"
        """,
    )
    page = load_page_config(path).apply(PageModel())

    assert isinstance(page, PageModel)
    assert page.title == "Home"
    assert page.doctype is Doctype.XHTML_1_1
    assert page.open_graph == {"image": "//example.com/i.jpg"}
    assert page.stylesheets == [StyleSheet(url="//a.com/s.css")]
    assert page.head_scripts == [Script(url="//a.com/head.js")]
    assert page.body == "<p>x</p>"


def test_empty_config_leaves_defaults(tmp_path: Path) -> None:
    config = load_page_config(_write(tmp_path, "{}"))
    page = config.apply(PageModel())
    assert page.snapshot() == PageModel().snapshot()
    assert config.cache is None


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_page_config(tmp_path / "missing.yaml")


def test_missing_content_file_raises(tmp_path: Path) -> None:
    path = _write(tmp_path, "content_file: nowhere.html")
    with pytest.raises(FileNotFoundError, match="nowhere.html"):
        load_page_config(path)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("- just\n- a list", "Top-level"),
        ("meta: [a, b]", "'meta' must be a mapping"),
        ("meta:\n  robots:", "'meta.robots' needs a value"),
        ("open_graph:\n  image: ~", "'open_graph.image' needs a value"),
        ("stylesheets: /s.css", "'stylesheets' must be a list"),
        ("stylesheets:\n  - media: print", "needs a 'url'"),
        ("scripts:\n  - 42", "Script entries"),
        ("cache:\n  expires: soon", "cache.expires"),
    ],
)
def test_invalid_shapes_raise_config_error(
    tmp_path: Path, text: str, message: str
) -> None:
    with pytest.raises(PageConfigError, match=message):
        load_page_config(_write(tmp_path, text))
