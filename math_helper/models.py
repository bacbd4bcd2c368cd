"""Domain models for module-select buttons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, Sequence, Tuple, runtime_checkable

from PIL import Image

DEFAULT_ACTION = "open_tutorial"


class DifficultyLevel(Enum):
    """Difficulty levels offered by the difficulty-select screen."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class ButtonDefinition:
    """Static descriptor of one button's identity, asset and position."""

    name: str
    file_name: str
    x: int
    y: int
    ordinal: int
    action: str = DEFAULT_ACTION


@dataclass
class RenderedButton:
    """Decoded, display-ready form of a button's asset."""

    image: Image.Image
    name: str
    visible: bool = True
    opaque: bool = False

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size


@runtime_checkable
class ModuleSelectButton(Protocol):
    """Capabilities every module-select button offers to the screen."""

    @property
    def name(self) -> str: ...

    @property
    def file_name(self) -> str: ...

    @property
    def x(self) -> int: ...

    @property
    def y(self) -> int: ...

    @property
    def ordinal(self) -> int: ...

    @property
    def button(self) -> RenderedButton: ...

    def do_action(self, screen: Any) -> None: ...


@runtime_checkable
class DifficultyAware(Protocol):
    """Optional capability for buttons that react to a difficulty choice."""

    def difficulty_selected(self, level: DifficultyLevel) -> None: ...


class EnumerableButtonFactory(Protocol):
    """A titled, ordered collection of buttons for one screen."""

    def get_buttons(self) -> Sequence[ModuleSelectButton]: ...

    def get_number_of_buttons(self) -> int: ...

    def get_title_text(self) -> str: ...


def supports_difficulty(button: object) -> bool:
    """Return True when *button* offers ``difficulty_selected``."""

    return isinstance(button, DifficultyAware)

