"""Launcher tests (CLI path only)."""

import logging

from math_helper.app import main


def _args(tmp_path, *extra):
    return ["--assets", str(tmp_path), "--config", str(tmp_path / "missing.yaml"), *extra]


def test_lists_buttons(asset_root, caplog):
    caplog.set_level(logging.INFO)
    assert main(_args(asset_root)) == 0
    assert "Watch a Tutorial (9 buttons)" in caplog.text
    assert "Estimation" in caplog.text


def test_open_named_button(asset_root, caplog):
    caplog.set_level(logging.INFO)
    assert main(_args(asset_root, "--open", "Money")) == 0
    assert "Opening the Money Tutorial!" in caplog.text


def test_open_unknown_button(asset_root):
    assert main(_args(asset_root, "--open", "Geometry")) == 2


def test_missing_asset_exit_code(tmp_path, make_assets):
    make_assets(tmp_path, skip={"Expansion"})
    assert main(_args(tmp_path)) == 1


def test_open_passes_console_screen(asset_root, monkeypatch):
    from math_helper import actions
    from math_helper.app import ConsoleScreen

    seen = []
    monkeypatch.setitem(
        actions.DEFAULT_ACTIONS, "open_tutorial", lambda button, screen: seen.append((button.name, screen))
    )
    assert main(_args(asset_root, "--open", "Fractions")) == 0
    assert len(seen) == 1
    name, screen = seen[0]
    assert name == "Fractions"
    assert isinstance(screen, ConsoleScreen)
    assert screen.title == "Watch a Tutorial"


def test_oversized_asset_exit_code(asset_root, monkeypatch):
    from PIL import Image

    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    assert main(_args(asset_root)) == 1
