"""Module-select button collections for the Math Helper application."""

from .buttons import Grade1ModuleSelectTutorialButtons, ModuleButton, ModuleButtonFactory
from .images import AssetLoadError, load_image
from .models import ButtonDefinition, DifficultyLevel, RenderedButton

__all__ = [
    "AssetLoadError",
    "ButtonDefinition",
    "DifficultyLevel",
    "Grade1ModuleSelectTutorialButtons",
    "ModuleButton",
    "ModuleButtonFactory",
    "RenderedButton",
    "load_image",
]
