"""Load page configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _optional_str,
    _parse_cache,
    _parse_scripts,
    _parse_stylesheets,
    _string_mapping,
)
from .models import PageConfig, PageConfigError


def load_page_config(path: Path) -> PageConfig:
    """Load the YAML file describing a single page.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML page configuration (for example,
        ``page.yaml``).

    Returns
    -------
    PageConfig
        Parsed configuration ready to be applied to a page model.

    Raises
    ------
    FileNotFoundError
        If the configuration file, or the ``content_file`` it names, does not
        exist.
    PageConfigError
        If the top-level YAML structure is not a mapping or a section has the
        wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from html_page.config import load_page_config
    >>> config = load_page_config(Path("page.yaml"))  # doctest: +SKIP
    >>> config.title  # doctest: +SKIP
    'Home'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise PageConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    return PageConfig(
        title=_optional_str(raw.get("title")),
        title_suffix=_optional_str(raw.get("title_suffix")),
        title_separator=_optional_str(raw.get("title_separator")),
        doctype=_optional_str(raw.get("doctype")),
        language=_optional_str(raw.get("language")),
        charset=_optional_str(raw.get("charset")),
        author=_optional_str(raw.get("author")),
        body_id=_optional_str(raw.get("body_id")),
        body_class=_optional_str(raw.get("body_class")),
        meta=_string_mapping(raw.get("meta"), "meta"),
        open_graph=_string_mapping(raw.get("open_graph"), "open_graph"),
        twitter=_string_mapping(raw.get("twitter"), "twitter"),
        canonical_url=_optional_str(raw.get("canonical_url")),
        favicon=_optional_str(raw.get("favicon")),
        stylesheets=_parse_stylesheets(raw.get("stylesheets")),
        scripts=_parse_scripts(raw.get("scripts")),
        meta_comment=_optional_str(raw.get("meta_comment")),
        content=_load_content(raw, base_dir=path.parent),
        cache=_parse_cache(raw.get("cache")),
    )


def _load_content(raw: typ.Mapping[str, typ.Any], *, base_dir: Path) -> str:
    """Return inline ``content`` followed by the ``content_file`` text."""
    content = str(raw.get("content") or "")
    content_file = raw.get("content_file")
    if content_file:
        content_path = Path(str(content_file))
        if not content_path.is_absolute():
            content_path = base_dir / content_path
        if not content_path.exists():
            msg = f"Content file '{content_path}' not found."
            raise FileNotFoundError(msg)
        content += content_path.read_text(encoding="utf-8")
    return content


__all__ = ["load_page_config"]
