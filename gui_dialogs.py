"""
Dialog windows for SalesTracker GUI
"""
from __future__ import annotations
from typing import Callable, List, Optional

try:
    import tkinter as tk
    from tkinter import ttk, messagebox
except ModuleNotFoundError:
    tk = None
    ttk = None
    messagebox = None

from errors import ValidationError
from models import Party, Transaction
from utils import amount_text


class _FormDialog(tk.Toplevel):
    """Modal two-field form; submit() may raise ValidationError to keep it open"""

    def __init__(self, master, title: str):
        super().__init__(master)
        self.title(title)
        self.resizable(False, False)
        self.result = None
        self.frm = ttk.Frame(self, padding=10)
        self.frm.grid(row=0, column=0, sticky="nsew")
        self._bind_enter_to_ok()

    def _bind_enter_to_ok(self):
        """Bind Enter/Return to OK"""

        def on_enter(event=None):
            self._ok()
            return "break"

        self.bind("<Return>", on_enter)
        self.bind("<KP_Enter>", on_enter)

    def _buttons(self, row: int):
        btns = ttk.Frame(self.frm)
        btns.grid(row=row, column=0, columnspan=2, sticky="e", pady=(10, 0))
        ttk.Button(btns, text="OK", command=self._ok).grid(row=0, column=0, padx=4)
        ttk.Button(btns, text="Cancel", command=self._cancel).grid(row=0, column=1, padx=4)
        self.grab_set()
        self.transient(self.master)

    def submit(self):
        raise NotImplementedError

    def _ok(self):
        """Validate through the store and close on success"""
        try:
            self.result = self.submit()
        except ValidationError as ex:
            messagebox.showerror("Validation Error", str(ex), parent=self)
            return
        self.destroy()

    def _cancel(self):
        """Cancel and close"""
        self.result = None
        self.destroy()


class TransactionDialog(_FormDialog):
    """Dialog for adding/editing a transaction"""

    def __init__(
        self,
        master,
        parties: List[Party],
        on_submit: Callable[[str, Optional[str]], Transaction],
        transaction: Optional[Transaction] = None,
    ):
        super().__init__(master, "Add Transaction" if transaction is None else "Edit Transaction")
        self.on_submit = on_submit

        self.v_party = tk.StringVar(value=transaction.party_name if transaction else "")
        self._initial_amount = amount_text(transaction.amount) if transaction else None
        self.v_amount = tk.StringVar(value=self._initial_amount or "")

        ttk.Label(self.frm, text="Party Name").grid(row=0, column=0, sticky="w", pady=2)
        ttk.Combobox(self.frm, textvariable=self.v_party, values=[p.name for p in parties],
                     width=28).grid(row=0, column=1, sticky="w")

        ttk.Label(self.frm, text="Amount").grid(row=1, column=0, sticky="w", pady=2)
        ttk.Entry(self.frm, textvariable=self.v_amount, width=18).grid(row=1, column=1, sticky="w")

        if transaction is not None:
            ttk.Label(self.frm, text=f"Date: {transaction.date}").grid(row=2, column=0, columnspan=2,
                                                                      sticky="w", pady=(6, 0))
        self._buttons(3)

    def submit(self) -> Transaction:
        amount = self.v_amount.get()
        # untouched amount is kept exactly as stored
        if self._initial_amount is not None and amount.strip() == self._initial_amount:
            amount = None
        return self.on_submit(self.v_party.get(), amount)


class PartyDialog(_FormDialog):
    """Dialog for adding a party"""

    def __init__(self, master, on_submit: Callable[[str, str], Party]):
        super().__init__(master, "Add Party")
        self.on_submit = on_submit

        self.v_name = tk.StringVar()
        self.v_salesman = tk.StringVar()

        ttk.Label(self.frm, text="Party Name").grid(row=0, column=0, sticky="w", pady=2)
        ttk.Entry(self.frm, textvariable=self.v_name, width=28).grid(row=0, column=1, sticky="w")
        ttk.Label(self.frm, text="Salesman").grid(row=1, column=0, sticky="w", pady=2)
        ttk.Entry(self.frm, textvariable=self.v_salesman, width=28).grid(row=1, column=1, sticky="w")
        self._buttons(2)

    def submit(self) -> Party:
        return self.on_submit(self.v_name.get(), self.v_salesman.get())
