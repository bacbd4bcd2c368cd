"""Action dispatch table tests."""

import pytest

from math_helper.actions import DEFAULT_ACTIONS, build_dispatch_table, open_tutorial, resolve


def test_defaults_include_open_tutorial():
    assert build_dispatch_table()["open_tutorial"] is open_tutorial


def test_overrides_do_not_mutate_defaults():
    handler = lambda button, screen: None  # noqa: E731
    table = build_dispatch_table({"open_tutorial": handler, "quiz": handler})
    assert table["open_tutorial"] is handler
    assert "quiz" in table
    assert DEFAULT_ACTIONS["open_tutorial"] is open_tutorial
    assert "quiz" not in DEFAULT_ACTIONS


def test_resolve_unknown_tag():
    with pytest.raises(KeyError, match="Action not registered: launch"):
        resolve(build_dispatch_table(), "launch")
