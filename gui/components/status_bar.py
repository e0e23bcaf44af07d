import tkinter as tk
from tkinter import ttk

from gui.state import AppState


class StatusBar(ttk.Frame):
    """
    Status line under the records table.

    Displays: status message, record count, and a busy indicator while
    a save is in flight.
    """

    def __init__(self, parent, state: AppState):
        super().__init__(parent, style="Panel.TFrame", padding=(6, 3))
        self.state = state

        # Status message (left side)
        self.message_var = tk.StringVar(value=state.status_message)
        ttk.Label(self, textvariable=self.message_var, style="Muted.TLabel").pack(side=tk.LEFT)

        metrics_frame = ttk.Frame(self, style="Panel.TFrame")
        metrics_frame.pack(side=tk.RIGHT)

        # Busy indicator
        self.busy_var = tk.StringVar(value="")
        ttk.Label(metrics_frame, textvariable=self.busy_var,
                  style="Muted.TLabel", width=2).pack(side=tk.RIGHT, padx=(4, 0))

        # Record count
        self.count_var = tk.StringVar(value="")
        ttk.Label(metrics_frame, textvariable=self.count_var,
                  style="Muted.TLabel", width=12).pack(side=tk.RIGHT, padx=(8, 0))

    def update_status(self, record_count: int = None):
        """Refresh status bar from app state."""
        self.message_var.set(self.state.status_message)
        self.busy_var.set("●" if self.state.is_busy else "")
        if record_count is not None:
            self.count_var.set(f"{record_count} records")
