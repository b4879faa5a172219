"""Load and validate page configuration YAML for html_page renders.

This subpackage parses a ``page.yaml`` file into a :class:`PageConfig`
dataclass and replays it onto a page model through the fluent mutators. The
primary entry point is :func:`load_page_config`.

Examples
--------
>>> from pathlib import Path
>>> from html_page import HtmlPage
>>> from html_page.config import load_page_config
>>> config = load_page_config(Path("page.yaml"))  # doctest: +SKIP
>>> page = config.apply(HtmlPage())  # doctest: +SKIP
"""

from .loader import load_page_config
from .models import (
    CacheConfig,
    PageConfig,
    PageConfigError,
    ScriptConfig,
    StyleSheetConfig,
)

__all__ = [
    "CacheConfig",
    "PageConfig",
    "PageConfigError",
    "ScriptConfig",
    "StyleSheetConfig",
    "load_page_config",
]
