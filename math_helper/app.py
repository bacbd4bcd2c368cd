# -*- coding: utf-8 -*-
"""
Application entry point (GUI preview + CLI).
Run:
  python -m math_helper.app --assets ./assets
Or launch the preview window:
  python -m math_helper.app --gui
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from math_helper.buttons import Grade1ModuleSelectTutorialButtons
from math_helper.config import asset_root, load_config_file, log_level
from math_helper.images import AssetLoadError

LOG = logging.getLogger("math_helper.app")


class ConsoleScreen:
    """Host context for buttons activated from the command line."""

    def __init__(self, title: str) -> None:
        self.title = title

    def __repr__(self) -> str:
        return f"ConsoleScreen({self.title!r})"


def _apply_overrides(cfg: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Map CLI flags onto the loaded config."""
    if args.assets:
        assets = cfg.get("assets")
        if not isinstance(assets, dict):
            assets = cfg["assets"] = {}
        assets["root"] = str(Path(args.assets).resolve())
    return cfg


def _run_cli(cfg: Dict[str, Any], open_name: Optional[str]) -> int:
    """CLI execution path."""
    try:
        factory = Grade1ModuleSelectTutorialButtons(asset_root(cfg))
    except AssetLoadError as exc:
        LOG.exception("failed to load button images: %s", exc)
        return 1

    LOG.info("%s (%d buttons)", factory.get_title_text(), factory.get_number_of_buttons())
    for button in factory.get_buttons():
        width, height = button.button.size
        LOG.info("%d %-14s at (%d, %d) %dx%d", button.ordinal, button.name, button.x, button.y, width, height)

    if open_name:
        try:
            button = factory.find(open_name)
        except KeyError as exc:
            LOG.error("%s", exc.args[0])
            return 2
        button.do_action(ConsoleScreen(factory.get_title_text()))
    return 0


def _run_gui(cfg: Dict[str, Any]) -> int:
    """GUI execution path."""
    try:
        # Import lazily so CLI runs in headless environments.
        from math_helper.gui.preview_window import PreviewWindow
    except Exception as exc:  # pragma: no cover
        LOG.exception("failed to start GUI: %s", exc)
        return 1
    try:
        factory = Grade1ModuleSelectTutorialButtons(asset_root(cfg))
    except AssetLoadError as exc:
        LOG.exception("failed to load button images: %s", exc)
        return 1
    win = PreviewWindow(factory, cfg)
    win.mainloop()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Math Helper module-select buttons")
    parser.add_argument("--gui", action="store_true", help="Open the preview window")
    parser.add_argument("--assets", dest="assets", help="Asset root directory override")
    parser.add_argument("--open", dest="open_name", help="Activate the named button")
    parser.add_argument("--config", dest="config", default="", help="Path to config.yaml")
    args = parser.parse_args(argv)

    cfg = _apply_overrides(load_config_file(Path(args.config) if args.config else None), args)

    logging.basicConfig(
        level=log_level(cfg),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if args.gui:
        return _run_gui(cfg)
    return _run_cli(cfg, args.open_name)


if __name__ == "__main__":
    sys.exit(main())
