"""Cyclopts CLI entrypoint for rendering configured HTML pages.

The ``html-page`` console script defined here renders a page described by a
YAML file, either into a file, to stdout, or as a CGI response with cache
headers. ``html-page inspect`` prints the configured page state as JSON so a
configuration can be checked without rendering it.

Examples
--------
Render a page into a file:

>>> from html_page.cli import app
>>> app.run(["render", "--config", "page.yaml", "--output", "index.html"])  # doctest: +SKIP

Dump the configured model:

>>> app.run(["inspect", "--config", "page.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from .config import load_page_config
from .context import RequestContext
from .output import ResponseStream
from .page import HtmlPage

DEFAULT_CONFIG = Path("page.yaml")

app = App(name="html-page", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _build_page(
    config_path: Path, *, script_name: str | None, sink: ResponseStream | None = None
) -> HtmlPage:
    context = RequestContext.from_environ()
    if script_name is not None:
        context = RequestContext(script_name=script_name, clock=context.clock)
    page_config = load_page_config(config_path)
    page = HtmlPage(context=context, sink=sink)
    page_config.apply(page)
    if sink is not None and sink.cgi:
        page_config.apply_cache_headers(page)
    return page


@app.command(help="Render a configured page to a file or stdout.")
def render(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to page config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write the page here instead of stdout", env_var="INPUT_OUTPUT"),
    ] = None,
    script_name: typ.Annotated[
        str | None,
        Parameter(help="Fallback title when the config sets none"),
    ] = None,
    cgi: typ.Annotated[
        bool, Parameter(help="Prefix stdout output with CGI headers")
    ] = False,
) -> None:
    """Render the page described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the YAML page configuration (overridable via
        ``INPUT_CONFIG``).
    output : Path or None, optional
        File to write; when ``None`` the page goes to stdout.
    script_name : str or None, optional
        Title fallback; defaults to the ``SCRIPT_NAME`` environment variable.
    cgi : bool, optional
        Emit ``Content-Type`` and the configured cache headers before the
        body. Only valid when writing to stdout.

    Raises
    ------
    ValueError
        If ``cgi`` is combined with ``output``.
    """
    if cgi and output is not None:
        msg = "Cannot combine --cgi with --output."
        raise ValueError(msg)

    if output is None:
        sink = ResponseStream(sys.stdout, cgi=cgi)
        _build_page(config, script_name=script_name, sink=sink).display()
        return

    page = _build_page(config, script_name=script_name)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(page.fetch(), encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Print the configured page state as JSON.")
def inspect(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to page config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print the snapshot of the configured page model as JSON."""
    page = _build_page(config, script_name=None)
    print(msgspec_json.encode(page.snapshot()).decode("utf-8"))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``html-page`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
