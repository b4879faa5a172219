"""Behaviour tests for rendering configured pages.

These pytest-bdd scenarios drive ``HtmlPage`` through the fluent mutators
and check the rendered document: social image URLs are stored in
protocol-relative form, and repeated renders of an unchanged page are
identical. The feature file ``render_page.feature`` holds the scenarios.

Usage
-----
Run ``pytest tests/bdd/test_render_page.py -v``. The clock is frozen through
``RequestContext`` so no scenario depends on wall-clock time.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from html_page import HtmlPage, RequestContext

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "render_page.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]
_FROZEN = dt.datetime(2026, 10, 17, 16, 6, tzinfo=dt.UTC)


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse('a page titled "{title}"'))
def given_page(scenario_state: ScenarioState, title: str) -> None:
    context = RequestContext(script_name="/bdd.py", clock=lambda: _FROZEN)
    scenario_state["page"] = HtmlPage(context=context).set_title(title)


@given(parsers.parse('the Open Graph image "{url}"'))
def given_og_image(scenario_state: ScenarioState, url: str) -> None:
    page = typ.cast("HtmlPage", scenario_state["page"])
    page.set_open_graph_data("og:image", url)


@given(parsers.parse('body content "{first}" followed by "{second}"'))
def given_body(scenario_state: ScenarioState, first: str, second: str) -> None:
    page = typ.cast("HtmlPage", scenario_state["page"])
    page.add_body_content(first).add_body_content(second)


@when("I render the page")
def when_render(scenario_state: ScenarioState) -> None:
    page = typ.cast("HtmlPage", scenario_state["page"])
    scenario_state["html"] = page.fetch()


@when("I render the page twice")
def when_render_twice(scenario_state: ScenarioState) -> None:
    page = typ.cast("HtmlPage", scenario_state["page"])
    scenario_state["renders"] = [page.fetch(), page.to_string()]


@then(parsers.parse("the head contains the line '{line}'"))
def then_head_line(scenario_state: ScenarioState, line: str) -> None:
    head = typ.cast("str", scenario_state["html"]).split("</head>")[0]
    assert line in head.splitlines(), f"expected {line!r} inside <head>"


@then(parsers.parse('the head never mentions "{text}"'))
def then_head_omits(scenario_state: ScenarioState, text: str) -> None:
    head = typ.cast("str", scenario_state["html"]).split("</head>")[0]
    assert text not in head, f"expected {text!r} to be normalized away"


@then("both renders are identical")
def then_identical(scenario_state: ScenarioState) -> None:
    first, second = typ.cast("list[str]", scenario_state["renders"])
    assert first == second, "expected byte-identical renders of an unchanged page"


@then(parsers.parse('the body contains "{markup}" exactly once'))
def then_body_once(scenario_state: ScenarioState, markup: str) -> None:
    first = typ.cast("list[str]", scenario_state["renders"])[0]
    body = first.split("<body>")[1]
    assert body.count(markup) == 1, f"expected {markup!r} once in the body"
