# -*- coding: utf-8 -*-
"""Tkinter preview of a module-select button collection.

The window plays the host screen: each rendered button is placed at its
origin and clicking it calls ``do_action`` with the window as context.
"""

from __future__ import annotations

import logging, tkinter as tk
from tkinter import ttk
from typing import Any, Dict, List

from PIL import ImageTk

from math_helper.buttons import ModuleButtonFactory

LOG = logging.getLogger("math_helper.gui")


class PreviewWindow(tk.Tk):
    def __init__(self, factory: ModuleButtonFactory, config: Dict[str, Any]) -> None:
        super().__init__()
        window_cfg = config.get("window") or {}
        self.title(window_cfg.get("title", "Math Helper"))
        self.geometry(window_cfg.get("geometry", "1000x700"))

        self.factory = factory
        self.status_var = tk.StringVar(value="idle")
        # PhotoImage objects are collected unless a reference is held.
        self._photos: List[ImageTk.PhotoImage] = []

        self._build_ui()

    def _build_ui(self) -> None:
        ttk.Label(self, text=self.factory.get_title_text(), font=("Segoe UI", 20, "bold")).place(x=20, y=20)
        ttk.Label(self, textvariable=self.status_var).place(x=20, rely=1.0, y=-30)

        for button in self.factory.get_buttons():
            rendered = button.button
            if not rendered.visible:
                continue
            photo = ImageTk.PhotoImage(rendered.image)
            self._photos.append(photo)
            widget = tk.Label(self, image=photo, borderwidth=0, cursor="hand2")
            widget.place(x=button.x, y=button.y)
            widget.bind("<Button-1>", lambda _evt, b=button: self._on_click(b))

    def _on_click(self, button: Any) -> None:
        self.status_var.set(f"opened: {button.name}")
        button.do_action(self)
