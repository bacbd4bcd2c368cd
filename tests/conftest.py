"""Shared fixtures: on-disk button artwork generated with Pillow."""

from pathlib import Path

import pytest
from PIL import Image

from math_helper.buttons import Grade1ModuleSelectTutorialButtons


def _write_assets(root: Path, skip=()):
    image_dir = root / Grade1ModuleSelectTutorialButtons.IMAGE_DIR
    image_dir.mkdir(parents=True, exist_ok=True)
    for definition in Grade1ModuleSelectTutorialButtons.DEFINITIONS:
        if definition.name in skip:
            continue
        Image.new("RGBA", (240, 150), (30, 144, 255, 255)).save(image_dir / definition.file_name, "PNG")
    return image_dir


@pytest.fixture
def make_assets():
    """Return a writer: ``make_assets(root, skip={"Money"})`` -> image directory."""
    return _write_assets


@pytest.fixture
def asset_root(tmp_path, make_assets):
    """Asset root holding all nine Grade 1-2 tutorial images."""
    make_assets(tmp_path)
    return tmp_path


@pytest.fixture
def factory(asset_root):
    return Grade1ModuleSelectTutorialButtons(asset_root)
