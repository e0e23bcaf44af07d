"""Main GUI application object.

`MedicalRecordsApp` is the controller the views call into. Every action
catches record errors at its boundary and reports them through `notify`, so
a failed request never takes the window down.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from medrecords.config import get_settings
from medrecords.exceptions import FetchError, RecordsError
from medrecords.models.schemas import Record
from medrecords.records_client import RecordsClient
from medrecords.utils.logger import get_logger, setup_logging

from gui.services.clients import get_records_client
from gui.services.edit_session import EditSession
from gui.services.records_service import ConfirmFn, RecordCollectionView
from gui.state import AppState

logger = get_logger(__name__)

# (level, title, message)
NotifyFn = Callable[[str, str, str], None]

_LEVELS = {"info": logging.INFO, "warning": logging.WARNING, "error": logging.ERROR}


def log_notification(level: str, title: str, message: str) -> None:
    logger.log(_LEVELS.get(level, logging.INFO), "%s: %s", title, message)


@dataclass
class MedicalRecordsApp:
    """Wires the records client, collection view and edit session together."""

    client: RecordsClient = field(default_factory=get_records_client)
    notify: NotifyFn = log_notification
    state: AppState = field(default_factory=AppState)
    collection: RecordCollectionView = field(init=False)
    session: EditSession = field(init=False)

    def __post_init__(self) -> None:
        self.collection = RecordCollectionView(self.client)
        self.session = EditSession(self.client, self.collection)

    # ------------------- Read-only helpers ----------------------------
    @property
    def records(self):
        return self.collection.records

    @property
    def save_label(self) -> str:
        if self.session.saving:
            return "Saving..."
        return "Update Record" if self.session.is_editing else "Save Record"

    # ------------------- Actions --------------------------------------
    def load_records(self) -> bool:
        self._set_status("Loading records...")
        try:
            self.collection.refresh()
        except RecordsError as exc:
            self._report("Load", exc)
            return False
        self._set_status("Ready")
        return True

    def new_record(self) -> None:
        self.session.start_create()
        self._set_status("New record")

    def edit_record(self, record_or_id: Any) -> None:
        record = record_or_id
        if not isinstance(record_or_id, Record):
            record = self.collection.find(record_or_id)
            if record is None:
                self._notify("warning", "Edit", f"Record {record_or_id} is no longer listed")
                return
        self.session.start_edit(record)
        self._set_status(f"Editing record {record.record_id}")

    def set_field(self, name: str, value: Any) -> None:
        self.session.update_field(name, value)

    def save_record(self) -> bool:
        """Submit the form. True once the create/update was accepted."""
        message = "Record Updated" if self.session.is_editing else "Record Added"
        self.state.is_busy = True
        self._set_status("Saving...")
        try:
            self.session.save()
        except FetchError as exc:
            # the record was stored; only the table reload after it failed
            self._notify("info", "Save", message)
            self._report("Load", exc)
            return True
        except RecordsError as exc:
            self._report("Save", exc)
            return False
        finally:
            self.state.is_busy = self.session.saving
        self._notify("info", "Save", message)
        self._set_status("Ready")
        return True

    def delete_record(self, record_id: str, confirm: Optional[ConfirmFn] = None) -> bool:
        """Delete one row. True once the server removed it."""
        self._set_status(f"Deleting record {record_id}...")
        try:
            if not self.collection.remove(record_id, confirm):
                self._set_status("Ready")
                return False
        except FetchError as exc:
            self._notify("info", "Delete", "Record Deleted")
            self._report("Load", exc)
            return True
        except RecordsError as exc:
            self._report("Delete", exc)
            return False
        self._notify("info", "Delete", "Record Deleted")
        self._set_status("Ready")
        return True

    # ------------------- Internal helpers ----------------------------
    def _report(self, title: str, exc: RecordsError) -> None:
        logger.error("%s failed [%s]: %s", title, exc.code, exc.message)
        level = "warning" if exc.type in ("validation_error", "busy") else "error"
        self._notify(level, title, exc.user_message)
        self._set_status(f"{title} failed")

    def _notify(self, level: str, title: str, message: str) -> None:
        self.state.last_notification = (level, title, message)
        self.notify(level, title, message)

    def _set_status(self, message: str) -> None:
        self.state.status_message = message


def main() -> None:  # pragma: no cover - UI code
    """Start the desktop window."""
    import tkinter as tk
    from tkinter import messagebox

    from gui.theme import Theme
    from gui.views.records import RecordsView

    settings = get_settings()
    setup_logging(settings.log_level)

    root = tk.Tk()
    root.title(settings.window_title)
    root.geometry("1000x640")
    Theme().apply(root)

    def show(level: str, title: str, message: str) -> None:
        log_notification(level, title, message)
        dialog = {"info": messagebox.showinfo, "warning": messagebox.showwarning}.get(
            level, messagebox.showerror
        )
        # actions may finish on a worker thread; dialogs belong to the Tk thread
        root.after(0, lambda: dialog(title, message, parent=root))

    app = MedicalRecordsApp(notify=show)
    view = RecordsView(root, app)
    view.pack(fill=tk.BOTH, expand=True)
    root.after(0, view.reload)
    root.mainloop()
