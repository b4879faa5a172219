"""Utility helpers shared by the page configuration loader."""

from __future__ import annotations

import typing as typ

from html_page._constants import DEFAULT_MEDIA, FOOTER_POSITION

from .models import CacheConfig, PageConfigError, ScriptConfig, StyleSheetConfig


def _optional_str(value: object | None) -> str | None:
    """Return a string value or None when the key is absent."""
    if value is None:
        return None
    return str(value)


def _string_mapping(value: object | None, field: str) -> dict[str, str]:
    """Coerce a YAML mapping into an ordered ``dict[str, str]``."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{field}' must be a mapping of names to strings."
        raise PageConfigError(msg)
    result: dict[str, str] = {}
    for key, content in value.items():
        if content is None:
            msg = f"'{field}.{key}' needs a value."
            raise PageConfigError(msg)
        result[str(key)] = str(content)
    return result


def _sequence(value: object | None, field: str) -> list[typ.Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"'{field}' must be a list."
        raise PageConfigError(msg)
    return value


def _require_entry_url(entry: typ.Mapping[str, typ.Any], field: str) -> str:
    url = entry.get("url")
    if not url:
        msg = f"Every '{field}' entry needs a 'url'."
        raise PageConfigError(msg)
    return str(url)


def _parse_stylesheets(value: object | None) -> list[StyleSheetConfig]:
    """Build stylesheet entries from plain URLs or ``url``/``media`` mappings."""
    result: list[StyleSheetConfig] = []
    for entry in _sequence(value, "stylesheets"):
        match entry:
            case str():
                result.append(StyleSheetConfig(url=entry))
            case dict():
                result.append(
                    StyleSheetConfig(
                        url=_require_entry_url(entry, "stylesheets"),
                        media=str(entry.get("media", DEFAULT_MEDIA)),
                        preload=bool(entry.get("preload", False)),
                    )
                )
            case _:
                msg = "Stylesheet entries must be strings or mappings."
                raise PageConfigError(msg)
    return result


def _parse_scripts(value: object | None) -> list[ScriptConfig]:
    """Build script entries from plain URLs or ``url``/``position`` mappings."""
    result: list[ScriptConfig] = []
    for entry in _sequence(value, "scripts"):
        match entry:
            case str():
                result.append(ScriptConfig(url=entry))
            case dict():
                result.append(
                    ScriptConfig(
                        url=_require_entry_url(entry, "scripts"),
                        position=str(entry.get("position", FOOTER_POSITION)),
                        is_async=bool(entry.get("async", False)),
                    )
                )
            case _:
                msg = "Script entries must be strings or mappings."
                raise PageConfigError(msg)
    return result


def _parse_cache(value: object | None) -> CacheConfig | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        msg = "'cache' must be a mapping with 'control' and 'expires'."
        raise PageConfigError(msg)
    base = CacheConfig()
    try:
        expires = int(value.get("expires", base.expires))
    except (TypeError, ValueError) as exc:
        msg = "'cache.expires' must be a number of seconds."
        raise PageConfigError(msg) from exc
    return CacheConfig(control=str(value.get("control", base.control)), expires=expires)


__all__ = [
    "_optional_str",
    "_parse_cache",
    "_parse_scripts",
    "_parse_stylesheets",
    "_string_mapping",
]
