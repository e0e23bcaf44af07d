"""Records view: the edit form above the records table."""

import tkinter as tk
from tkinter import ttk, messagebox

from medrecords.models.schemas import GENDER_CHOICES, Record
from gui.components.status_bar import StatusBar
from gui.views.base import BaseView

# (field, label) in form order; also the table columns after the id
FORM_FIELDS = [
    ("patient_name", "Patient Name"),
    ("age", "Age"),
    ("gender", "Gender"),
    ("contact_number", "Contact Number"),
    ("doctor_name", "Doctor Name"),
    ("diagnosis", "Diagnosis"),
    ("visit_date", "Visit Date (YYYY-MM-DD)"),
]

TABLE_COLUMNS = [
    ("record_id", "ID", 60),
    ("patient_name", "Patient", 140),
    ("age", "Age", 50),
    ("gender", "Gender", 70),
    ("contact_number", "Contact", 110),
    ("doctor_name", "Doctor", 120),
    ("diagnosis", "Diagnosis", 140),
    ("visit_date", "Date", 90),
]


class RecordsView(BaseView):
    def _build(self):  # pragma: no cover - UI code
        self.vars = {}
        self._loading_form = False
        self._row_ids = {}
        self._save_pending = False

        ttk.Label(self, text="Medical Record Management", style="Header.TLabel").pack(pady=(0, 16))

        # ─────────────────────────────────────────────────────────────
        # FORM
        # ─────────────────────────────────────────────────────────────
        form = ttk.Frame(self, style="Panel.TFrame")
        form.pack(fill=tk.X, pady=(0, 16))
        for col in range(4):
            form.columnconfigure(col, weight=1)

        for index, (name, label) in enumerate(FORM_FIELDS):
            row, col = divmod(index, 4)
            cell = ttk.Frame(form, style="Panel.TFrame")
            cell.grid(row=row, column=col, sticky="ew", padx=5, pady=5)
            ttk.Label(cell, text=label, style="Muted.TLabel").pack(anchor="w")

            var = tk.StringVar()
            if name == "gender":
                widget = ttk.Combobox(cell, textvariable=var, values=GENDER_CHOICES, state="readonly")
            elif name == "age":
                widget = ttk.Spinbox(cell, textvariable=var, from_=0, to=150)
            else:
                widget = ttk.Entry(cell, textvariable=var)
            widget.pack(fill=tk.X)
            var.trace_add("write", lambda *_, n=name, v=var: self._on_field_change(n, v))
            self.vars[name] = var

        buttons = ttk.Frame(form, style="Panel.TFrame")
        buttons.grid(row=2, column=0, columnspan=4, sticky="ew", padx=5, pady=(10, 0))
        buttons.columnconfigure(0, weight=1)
        self.save_btn = ttk.Button(buttons, text=self.app.save_label, style="Primary.TButton",
                                   command=self._on_save)
        self.save_btn.grid(row=0, column=0, sticky="ew")
        ttk.Button(buttons, text="Clear", command=lambda: self.call("new_record")).grid(
            row=0, column=1, padx=(8, 0))

        # ─────────────────────────────────────────────────────────────
        # TABLE
        # ─────────────────────────────────────────────────────────────
        table_frame = ttk.Frame(self, style="Panel.TFrame")
        table_frame.pack(fill=tk.BOTH, expand=True)
        table_frame.rowconfigure(0, weight=1)
        table_frame.columnconfigure(0, weight=1)

        self.table = ttk.Treeview(table_frame, columns=[c[0] for c in TABLE_COLUMNS],
                                  show="headings", selectmode="browse")
        for key, heading, width in TABLE_COLUMNS:
            self.table.heading(key, text=heading)
            self.table.column(key, width=width, anchor="w")
        self.table.grid(row=0, column=0, sticky="nsew")
        scroll = ttk.Scrollbar(table_frame, orient=tk.VERTICAL, command=self.table.yview)
        scroll.grid(row=0, column=1, sticky="ns")
        self.table.configure(yscrollcommand=scroll.set)
        self.table.bind("<Double-1>", lambda _: self._on_edit())

        actions = ttk.Frame(self, style="Panel.TFrame")
        actions.pack(fill=tk.X, pady=(8, 0))
        ttk.Button(actions, text="Edit", style="Edit.TButton", command=self._on_edit).pack(side=tk.LEFT)
        ttk.Button(actions, text="Delete", style="Delete.TButton", command=self._on_delete).pack(
            side=tk.LEFT, padx=(5, 0))
        ttk.Button(actions, text="↻ Refresh", command=self.reload).pack(side=tk.RIGHT)

        self.status_bar = StatusBar(self, self.app.state)
        self.status_bar.pack(fill=tk.X, side=tk.BOTTOM, pady=(8, 0))

    def reload(self):  # pragma: no cover - UI code
        self.call_in_background("load_records")

    def after_action(self):  # pragma: no cover - UI code
        self._render_table()
        self._render_form(self.app.session.buffer)
        self.save_btn.configure(text=self.app.save_label,
                                state=tk.DISABLED if self._save_pending or self.app.session.saving else tk.NORMAL)
        self.status_bar.update_status(len(self.app.records))

    # ------------------- Internal helpers ----------------------------
    def _on_field_change(self, name: str, var: tk.StringVar):  # pragma: no cover - UI code
        if not self._loading_form:
            self.app.set_field(name, var.get())

    def _on_save(self):  # pragma: no cover - UI code
        if self._save_pending:
            return
        self._save_pending = True
        self.save_btn.configure(state=tk.DISABLED, text="Saving...")
        self.call_in_background("save_record", on_done=self._on_save_done)

    def _on_save_done(self, _result):  # pragma: no cover - UI code
        self._save_pending = False

    def _on_edit(self):  # pragma: no cover - UI code
        record_id = self._selected_id()
        if record_id is not None:
            self.call("edit_record", record_id)

    def _on_delete(self):  # pragma: no cover - UI code
        record_id = self._selected_id()
        if record_id is None:
            return
        # asked here so the dialog stays on the Tk thread
        confirmed = messagebox.askyesno("Delete", "Delete this record?", parent=self)
        self.call_in_background("delete_record", record_id, lambda: confirmed)

    def _selected_id(self):  # pragma: no cover - UI code
        selection = self.table.selection()
        if not selection:
            messagebox.showwarning("Records", "Select a record first.", parent=self)
            return None
        return self._row_ids.get(selection[0])

    def _render_table(self):  # pragma: no cover - UI code
        self.table.delete(*self.table.get_children())
        # the server does not guarantee unique ids, so rows get their own iids
        self._row_ids = {}
        for record in self.app.records:
            values = [getattr(record, key) for key, _, _ in TABLE_COLUMNS]
            iid = self.table.insert("", tk.END, values=values)
            self._row_ids[iid] = record.record_id

    def _render_form(self, record: Record):  # pragma: no cover - UI code
        self._loading_form = True
        try:
            for name, var in self.vars.items():
                value = getattr(record, name)
                if var.get() != str(value):
                    var.set(str(value))
        finally:
            self._loading_form = False
