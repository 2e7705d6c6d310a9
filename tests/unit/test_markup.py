"""Tests for :mod:`tablernav.markup`."""

from __future__ import annotations

from tablernav.markup import merge_options, pop_option, render_tag_attributes, tag


def test_tag_wraps_content_with_attributes() -> None:
    markup = tag("li", "<a>x</a>", {"class": "nav-item", "hidden": True, "title": None, "draggable": False})

    assert markup == '<li class="nav-item" hidden><a>x</a></li>'


def test_tag_without_name_returns_content() -> None:
    assert tag(False, "inner", {"class": "ignored"}) == "inner"
    assert tag(None, "inner") == "inner"


def test_attribute_values_are_escaped() -> None:
    assert render_tag_attributes({"title": 'Say "hi" & <bye>'}) == ' title="Say &quot;hi&quot; &amp; &lt;bye&gt;"'


def test_list_and_data_attributes() -> None:
    rendered = render_tag_attributes(
        {"class": ["nav", "", "nav-pills"], "data": {"bs-toggle": "collapse", "open": True}, "aria": {"expanded": "false"}}
    )

    assert rendered == ' class="nav nav-pills" data-bs-toggle="collapse" data-open aria-expanded="false"'


def test_merge_options_prefers_override() -> None:
    base = {"class": "nav-item", "role": "none"}

    merged = merge_options(base, {"class": "custom", "tag": "div"})

    assert merged == {"class": "custom", "role": "none", "tag": "div"}
    assert base == {"class": "nav-item", "role": "none"}
    assert merge_options(None, None) == {}


def test_pop_option_removes_key() -> None:
    options = {"tag": "div", "class": "x"}

    assert pop_option(options, "tag", "li") == "div"
    assert pop_option(options, "tag", "li") == "li"
    assert options == {"class": "x"}
