"""Activation behaviours for module-select buttons.

Each button definition carries an action tag. Factories resolve the tag in a
dispatch table when they are built, so the integrating application can swap
in real launch behaviour without touching the button definitions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional

from .models import DEFAULT_ACTION

if TYPE_CHECKING:  # pragma: no cover
    from .buttons import ModuleButton

LOG = logging.getLogger("math_helper.actions")

ActionHandler = Callable[["ModuleButton", Any], None]


def open_tutorial(button: "ModuleButton", screen: Any) -> None:
    """Placeholder launch: report which tutorial module was opened."""

    LOG.info("Opening the %s Tutorial!", button.name)


DEFAULT_ACTIONS: Dict[str, ActionHandler] = {
    DEFAULT_ACTION: open_tutorial,
}


def build_dispatch_table(overrides: Optional[Mapping[str, ActionHandler]] = None) -> Dict[str, ActionHandler]:
    """Return the default handlers with *overrides* layered on top."""

    table = dict(DEFAULT_ACTIONS)
    if overrides:
        table.update(overrides)
    return table


def resolve(table: Mapping[str, ActionHandler], tag: str) -> ActionHandler:
    if tag not in table:
        raise KeyError(f"Action not registered: {tag}")
    return table[tag]
