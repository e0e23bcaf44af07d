"""Base class for GUI views."""

import tkinter as tk
from tkinter import ttk

from gui.utils.async_tasks import run_in_background


class BaseView(ttk.Frame):
    """A panel bound to the application controller.

    Subclasses build their widgets in `_build`. Local actions go through
    `call`; actions that hit the network go through `call_in_background`
    so the mainloop keeps running while the request is outstanding.
    """

    def __init__(self, parent: tk.Misc, app, **kwargs):
        kwargs.setdefault("style", "Panel.TFrame")
        kwargs.setdefault("padding", 20)
        super().__init__(parent, **kwargs)
        self.app = app
        self._build()

    def _build(self):  # pragma: no cover - UI code
        raise NotImplementedError

    def call(self, action: str, *args, **kwargs):  # pragma: no cover - UI code
        result = getattr(self.app, action)(*args, **kwargs)
        self.after_action()
        return result

    def call_in_background(self, action: str, *args, on_done=None):  # pragma: no cover - UI code
        handler = getattr(self.app, action)

        def finished(result):
            if on_done is not None:
                on_done(result)
            self.after_action()

        run_in_background(self, lambda: handler(*args), finished)

    def after_action(self):  # pragma: no cover - UI code
        pass
