"""Theme primitives for the records window."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Base theme definition."""

    name: str = "Default"
    font_family: str = "Arial"
    background_color: str = "#f2f2f2"
    panel_color: str = "#ffffff"
    primary_color: str = "#007bff"  # save button
    edit_color: str = "#28a745"  # green
    delete_color: str = "#dc3545"  # red
    text_on_color: str = "#ffffff"
    muted_color: str = "#6b7280"

    def apply(self, root) -> None:  # pragma: no cover - UI code
        """Register ttk styles used by the views."""
        import tkinter as tk
        from tkinter import ttk

        style = ttk.Style(root)
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass
        root.configure(background=self.background_color)
        style.configure("Main.TFrame", background=self.background_color)
        style.configure("Panel.TFrame", background=self.panel_color)
        style.configure("TLabel", background=self.panel_color, font=(self.font_family, 10))
        style.configure("Header.TLabel", background=self.panel_color, font=(self.font_family, 16, "bold"))
        style.configure("Muted.TLabel", background=self.panel_color, foreground=self.muted_color)
        for name, color in (
            ("Primary", self.primary_color),
            ("Edit", self.edit_color),
            ("Delete", self.delete_color),
        ):
            style.configure(f"{name}.TButton", background=color, foreground=self.text_on_color,
                            font=(self.font_family, 10, "bold"))
            style.map(f"{name}.TButton", background=[("disabled", "#9ca3af"), ("active", color)])
