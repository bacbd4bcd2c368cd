"""Image asset loading for button artwork."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Union

from PIL import Image, UnidentifiedImageError

LOG = logging.getLogger("math_helper.images")

PathLike = Union[str, Path]
ImageLoader = Callable[[Path], Image.Image]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class AssetLoadError(OSError):
    """Raised when a button image cannot be read or decoded."""

    def __init__(self, path: PathLike, reason: str = "could not be read") -> None:
        self.path = Path(path)
        super().__init__(f"button image {self.path} {reason}")


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_image(path: PathLike) -> Image.Image:
    """Open and fully decode *path* as an RGBA image.

    Pillow opens files lazily, so ``load()`` is forced here to surface
    truncated or corrupt data at load time rather than on first paint.
    """

    img_path = Path(path)
    if not img_path.is_file():
        raise AssetLoadError(img_path, "does not exist")
    try:
        with Image.open(img_path) as handle:
            handle.load()
            image = handle.convert("RGBA")
    except UnidentifiedImageError as exc:
        raise AssetLoadError(img_path, "is not a recognised image") from exc
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise AssetLoadError(img_path, f"could not be decoded ({exc})") from exc
    LOG.debug("loaded %s (%dx%d)", img_path, image.width, image.height)
    return image
