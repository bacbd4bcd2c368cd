"""Module-select button collections.

A factory class declares an ordered tuple of :class:`ButtonDefinition` records,
the image directory they live in, and a title. Building the factory loads every
image and pairs each definition with its rendered form and action handler.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple

from .actions import ActionHandler, build_dispatch_table, resolve
from .images import ImageLoader, PathLike, load_image
from .models import ButtonDefinition, DifficultyLevel, RenderedButton

LOG = logging.getLogger("math_helper.buttons")


@dataclass(frozen=True, eq=False)
class ModuleButton:
    """A definition bound to its rendered image and activation handler."""

    definition: ButtonDefinition
    rendered: RenderedButton
    handler: ActionHandler

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def file_name(self) -> str:
        return self.definition.file_name

    @property
    def x(self) -> int:
        return self.definition.x

    @property
    def y(self) -> int:
        return self.definition.y

    @property
    def ordinal(self) -> int:
        return self.definition.ordinal

    @property
    def button(self) -> RenderedButton:
        return self.rendered

    def do_action(self, screen: Any) -> None:
        self.handler(self, screen)

    def difficulty_selected(self, level: DifficultyLevel) -> None:
        """Tutorial buttons have no difficulty concept; ignore the choice."""

    def __repr__(self) -> str:
        return f"ModuleButton({self.ordinal}, {self.name!r}, x={self.x}, y={self.y})"


def _definitions(*rows: Tuple[str, str, int, int]) -> Tuple[ButtonDefinition, ...]:
    """Number rows in declaration order."""

    return tuple(
        ButtonDefinition(name, file_name, x, y, ordinal)
        for ordinal, (name, file_name, x, y) in enumerate(rows)
    )


class ModuleButtonFactory:
    """Base class for a titled set of image-backed module buttons.

    Subclasses set ``IMAGE_DIR``, ``TITLE_TEXT`` and ``DEFINITIONS``. The
    constructor either loads every image or raises; no partially built
    collection is ever published.
    """

    IMAGE_DIR: ClassVar[Path] = Path(".")
    TITLE_TEXT: ClassVar[str] = ""
    DEFINITIONS: ClassVar[Tuple[ButtonDefinition, ...]] = ()

    def __init__(
        self,
        asset_root: PathLike,
        loader: ImageLoader = load_image,
        actions: Optional[Mapping[str, ActionHandler]] = None,
    ) -> None:
        self.asset_root = Path(asset_root)
        table = build_dispatch_table(actions)
        self._check_definitions()

        built: List[ModuleButton] = []
        for definition in self.DEFINITIONS:
            image = loader(self.image_path(definition))
            rendered = RenderedButton(image=image, name=definition.name)
            built.append(ModuleButton(definition, rendered, resolve(table, definition.action)))

        self._buttons: Tuple[ModuleButton, ...] = tuple(built)
        self._by_name: Dict[str, ModuleButton] = {b.name: b for b in self._buttons}
        self._count = len(self._buttons)
        LOG.info("%s: loaded %d buttons from %s", type(self).__name__, self._count, self.image_dir)

    @classmethod
    def _check_definitions(cls) -> None:
        """Names must be unique and ordinals must follow declaration order."""
        seen: Dict[str, int] = {}
        for index, definition in enumerate(cls.DEFINITIONS):
            if definition.name in seen:
                raise ValueError(
                    f"Button already defined: {definition.name!r} "
                    f"(ordinals {seen[definition.name]} and {definition.ordinal})"
                )
            if definition.ordinal != index:
                raise ValueError(f"Button {definition.name!r} has ordinal {definition.ordinal}, expected {index}")
            seen[definition.name] = definition.ordinal

    @property
    def image_dir(self) -> Path:
        return self.asset_root / self.IMAGE_DIR

    def image_path(self, definition: ButtonDefinition) -> Path:
        return self.image_dir / definition.file_name

    def get_buttons(self) -> Tuple[ModuleButton, ...]:
        return self._buttons

    def get_number_of_buttons(self) -> int:
        return self._count

    def get_title_text(self) -> str:
        return self.TITLE_TEXT

    def find(self, name: str) -> ModuleButton:
        if name not in self._by_name:
            raise KeyError(f"No button named {name!r}")
        return self._by_name[name]

    def button_at(self, ordinal: int) -> ModuleButton:
        if not 0 <= ordinal < self._count:
            raise IndexError(f"ordinal {ordinal} out of range 0..{self._count - 1}")
        return self._buttons[ordinal]


class Grade1ModuleSelectTutorialButtons(ModuleButtonFactory):
    """Tutorial module buttons offered to Grade 1-2 students."""

    IMAGE_DIR = Path("moduleSelect", "grade1-2", "ActiveButtons")
    TITLE_TEXT = "Watch a Tutorial"
    DEFINITIONS = _definitions(
        ("Expansion", "1_expansion.png", 300, 200),
        ("Measure", "2_measure.png", 590, 200),
        ("Fractions", "3_fractions.png", 303, 375),
        ("Comparison", "4_comparison.png", 593, 375),
        ("Odd & Even", "5_odd&even.png", 300, 200),
        ("Money", "6_money.png", 590, 200),
        ("Word Problems", "7_wordProblems.png", 300, 375),
        ("Arithmetic", "8_arithmetic.png", 590, 375),
        ("Estimation", "9_estimation.png", 300, 200),
    )
