"""
Main application window for SalesTracker GUI
"""
from __future__ import annotations
import os
from typing import Optional

try:
    import tkinter as tk
    from tkinter import ttk, messagebox, filedialog, simpledialog
except ModuleNotFoundError:
    tk = None
    ttk = None
    messagebox = None
    filedialog = None
    simpledialog = None

from computations import resolve_salesman
from config import AppSettings, SETTINGS_FILE, save_settings
from csv_handler import export_transactions_to_csv
from errors import EmptyInputWarning, ParseError
from excel_export import export_report
from gui_dialogs import PartyDialog, TransactionDialog
from logging_setup import get_logger
from sheet_import import import_master_sheet, import_transaction_sheet
from store import SalesStore
from utils import app_dir, format_amount

logger = get_logger("main_app")

SHEET_FILETYPES = [
    ("Spreadsheets", "*.xlsx *.xlsm *.csv"),
    ("Excel Workbook", "*.xlsx *.xlsm"),
    ("CSV files", "*.csv"),
    ("All files", "*.*"),
]


class SalesTrackerApp(ttk.Frame):
    """Main application window"""

    def __init__(self, master: tk.Tk, settings: Optional[AppSettings] = None):
        super().__init__(master, padding=8)
        self.master = master
        self.master.title("Sales Tracker")
        self.master.geometry("1000x650")
        self.grid(row=0, column=0, sticky="nsew")
        self.master.rowconfigure(0, weight=1)
        self.master.columnconfigure(0, weight=1)

        self.settings = settings or AppSettings()
        self.store = SalesStore()

        self._build_menu()
        self._build_ui()
        self.refresh_all()

    def _money(self, value: float) -> str:
        return format_amount(value, self.settings.currency_symbol)

    # ---------- Menu ----------
    def _build_menu(self):
        """Build application menu bar"""
        menubar = tk.Menu(self.master)
        filem = tk.Menu(menubar, tearoff=0)
        filem.add_command(label="Import Master Sheet…", command=self.import_master_dialog)
        filem.add_command(label="Import Transaction Sheet…", command=self.import_transactions_dialog)
        filem.add_separator()
        filem.add_command(label="Export Transactions CSV…", command=self.export_csv_dialog)
        filem.add_command(label="Export Excel Report…", command=self.export_excel_dialog)
        filem.add_separator()
        filem.add_command(label="Exit", command=self.master.destroy)
        menubar.add_cascade(label="File", menu=filem)

        settingsm = tk.Menu(menubar, tearoff=0)
        settingsm.add_command(label="Currency Symbol…", command=self.edit_currency_symbol)
        menubar.add_cascade(label="Settings", menu=settingsm)

        self.master.config(menu=menubar)

    # ---------- UI ----------
    def _build_ui(self):
        """Build main UI with tabs and status bar"""
        nb = ttk.Notebook(self)
        nb.grid(row=0, column=0, sticky="nsew")
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)
        self.notebook = nb

        self.tab_transactions = ttk.Frame(nb, padding=8)
        self.tab_parties = ttk.Frame(nb, padding=8)
        self.tab_totals = ttk.Frame(nb, padding=8)

        nb.add(self.tab_transactions, text="Transactions")
        nb.add(self.tab_parties, text="Parties")
        nb.add(self.tab_totals, text="Totals")

        self._build_transactions_tab()
        self._build_parties_tab()
        self._build_totals_tab()

        self.status_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.status_var, anchor="w").grid(row=1, column=0, sticky="ew", pady=(6, 0))

    def _build_transactions_tab(self):
        """Build transactions tab"""
        top = ttk.Frame(self.tab_transactions)
        top.grid(row=0, column=0, sticky="ew")
        self.tab_transactions.columnconfigure(0, weight=1)

        ttk.Button(top, text="Add", command=self.add_transaction).pack(side="left", padx=3)
        ttk.Button(top, text="Edit", command=self.edit_selected_transaction).pack(side="left", padx=3)
        ttk.Button(top, text="Delete", command=self.delete_selected_transaction).pack(side="left", padx=3)
        ttk.Button(top, text="Calculate Totals", command=self.calculate_totals).pack(side="left", padx=12)
        ttk.Button(top, text="Reset Transaction Data", command=self.reset_transactions).pack(side="right", padx=3)

        ttk.Separator(self.tab_transactions, orient="horizontal").grid(row=1, column=0, sticky="ew", pady=6)

        cols = ("date", "party", "salesman", "amount")
        self.txn_tree = ttk.Treeview(self.tab_transactions, columns=cols, show="headings", height=18)
        for c, w in zip(cols, [100, 280, 200, 140]):
            self.txn_tree.heading(c, text=c)
            self.txn_tree.column(c, width=w, anchor="e" if c == "amount" else "w")
        self.txn_tree.grid(row=2, column=0, sticky="nsew")
        self.tab_transactions.rowconfigure(2, weight=1)
        self.txn_tree.bind("<Double-1>", lambda _e: self.edit_selected_transaction())

        yscroll = ttk.Scrollbar(self.tab_transactions, orient="vertical", command=self.txn_tree.yview)
        self.txn_tree.configure(yscroll=yscroll.set)
        yscroll.grid(row=2, column=1, sticky="ns")

    def _build_parties_tab(self):
        """Build parties tab"""
        self.tab_parties.columnconfigure(0, weight=1)
        top = ttk.Frame(self.tab_parties)
        top.grid(row=0, column=0, sticky="ew")
        ttk.Button(top, text="Add Party", command=self.add_party).pack(side="left", padx=3)

        cols = ("name", "salesman")
        self.party_tree = ttk.Treeview(self.tab_parties, columns=cols, show="headings", height=18)
        for c, w in zip(cols, [300, 240]):
            self.party_tree.heading(c, text=c)
            self.party_tree.column(c, width=w, anchor="w")
        self.party_tree.grid(row=1, column=0, sticky="nsew", pady=6)
        self.tab_parties.rowconfigure(1, weight=1)

        yscroll = ttk.Scrollbar(self.tab_parties, orient="vertical", command=self.party_tree.yview)
        self.party_tree.configure(yscroll=yscroll.set)
        yscroll.grid(row=1, column=1, sticky="ns")

    def _build_totals_tab(self):
        """Build totals tab"""
        self.tab_totals.columnconfigure(0, weight=1)

        self.totals_note = tk.StringVar(value="")
        ttk.Label(self.tab_totals, textvariable=self.totals_note).grid(row=0, column=0, sticky="w")

        ttk.Label(self.tab_totals, text="Salesman-wise totals:").grid(row=1, column=0, sticky="w", pady=(8, 0))
        cols = ("salesman", "total", "parties")
        self.salesman_tree = ttk.Treeview(self.tab_totals, columns=cols, show="headings", height=8)
        for c, w in zip(cols, [240, 160, 80]):
            self.salesman_tree.heading(c, text=c)
            self.salesman_tree.column(c, width=w, anchor="w")
        self.salesman_tree.grid(row=2, column=0, sticky="nsew", pady=6)
        self.tab_totals.rowconfigure(2, weight=1)

        ttk.Label(self.tab_totals, text="Party-wise totals:").grid(row=3, column=0, sticky="w", pady=(8, 0))
        pcols = ("party", "total", "transactions")
        self.party_total_tree = ttk.Treeview(self.tab_totals, columns=pcols, show="headings", height=10)
        for c, w in zip(pcols, [280, 160, 100]):
            self.party_total_tree.heading(c, text=c)
            self.party_total_tree.column(c, width=w, anchor="w")
        self.party_total_tree.grid(row=4, column=0, sticky="nsew")
        self.tab_totals.rowconfigure(4, weight=1)

    # ---------- Transactions ----------
    def _selected_txn_id(self, action: str) -> Optional[str]:
        sel = self.txn_tree.selection()
        if not sel:
            messagebox.showinfo(action, "Select a transaction row first.")
            return None
        return sel[0]

    def add_transaction(self):
        """Add new transaction"""
        dlg = TransactionDialog(self.master, self.store.parties, self.store.add_transaction)
        self.master.wait_window(dlg)
        if dlg.result:
            self.refresh_all()

    def edit_selected_transaction(self):
        """Edit selected transaction"""
        txn_id = self._selected_txn_id("Edit")
        if not txn_id:
            return
        txn = self.store.find_transaction(txn_id)
        if txn is None:
            return

        def submit(party_name, amount):
            return self.store.edit_transaction(txn_id, party_name=party_name, amount=amount)

        dlg = TransactionDialog(self.master, self.store.parties, submit, txn)
        self.master.wait_window(dlg)
        if dlg.result:
            self.refresh_all()

    def delete_selected_transaction(self):
        """Delete selected transaction"""
        txn_id = self._selected_txn_id("Delete")
        if not txn_id:
            return
        if messagebox.askyesno("Delete", "Are you sure you want to delete this transaction?"):
            self.store.delete_transaction(txn_id)
            self.refresh_all()

    def reset_transactions(self):
        """Clear all transaction data after confirmation"""
        if messagebox.askyesno(
            "Reset",
            "Are you sure you want to reset all transaction data? This action cannot be undone.",
        ):
            self.store.reset_transactions()
            self.refresh_all()

    # ---------- Parties ----------
    def add_party(self):
        """Add new party"""
        dlg = PartyDialog(self.master, self.store.add_party)
        self.master.wait_window(dlg)
        if dlg.result:
            self.refresh_all()

    # ---------- Calculation ----------
    def calculate_totals(self):
        """Calculate totals and show them"""
        try:
            result = self.store.calculate()
        except EmptyInputWarning as ex:
            messagebox.showwarning("Warning", str(ex))
            return
        self.refresh_all()
        self.notebook.select(self.tab_totals)
        messagebox.showinfo(
            "Calculate", f"Calculations completed successfully. Total: {self._money(result.grand_total)}"
        )

    # ---------- File ops ----------
    def import_master_dialog(self):
        """Replace parties with a master sheet (Party Name | Salesman)"""
        fp = filedialog.askopenfilename(title="Import Master Sheet", filetypes=SHEET_FILETYPES)
        if not fp:
            return
        try:
            parties = import_master_sheet(fp)
        except ParseError as ex:
            logger.warning("Master sheet rejected: %s", ex)
            messagebox.showerror("Master Sheet Error", str(ex))
            return
        self.store.replace_parties(parties, os.path.basename(fp))
        self.refresh_all()
        messagebox.showinfo("Import", f"Master sheet uploaded successfully. {len(parties)} parties loaded.")

    def import_transactions_dialog(self):
        """Replace transactions with a transaction sheet (Party Name | Amount)"""
        fp = filedialog.askopenfilename(title="Import Transaction Sheet", filetypes=SHEET_FILETYPES)
        if not fp:
            return
        try:
            transactions = import_transaction_sheet(fp)
        except ParseError as ex:
            logger.warning("Transaction sheet rejected: %s", ex)
            messagebox.showerror("Transaction Sheet Error", str(ex))
            return
        self.store.replace_transactions(transactions, os.path.basename(fp))
        self.refresh_all()
        messagebox.showinfo(
            "Import", f"Transaction sheet uploaded successfully. {len(transactions)} transactions loaded."
        )

    def export_csv_dialog(self):
        """Export current transactions to CSV file"""
        if not self.store.transactions:
            messagebox.showinfo("Export CSV", "No transactions to export.")
            return
        fp = filedialog.asksaveasfilename(
            title="Export Transactions to CSV",
            initialdir=self.settings.export_dir or None,
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")]
        )
        if not fp:
            return
        try:
            export_transactions_to_csv(self.store.transactions, fp)
            messagebox.showinfo("Export CSV", f"Exported {len(self.store.transactions)} transactions to:\n{fp}")
        except OSError as ex:
            messagebox.showerror("Export failed", str(ex))

    def export_excel_dialog(self):
        """Export calculated totals to Excel file"""
        result = self.store.totals
        if result is None:
            messagebox.showinfo("Export", "Calculate totals first.")
            return
        fp = filedialog.asksaveasfilename(
            title="Export Excel Report",
            initialdir=self.settings.export_dir or None,
            defaultextension=".xlsx",
            filetypes=[("Excel Workbook", "*.xlsx")]
        )
        if not fp:
            return
        try:
            export_report(result, self.store.transactions, self.store.salesman_by_party(), fp)
            messagebox.showinfo("Export", f"Exported: {fp}")
        except OSError as ex:
            messagebox.showerror("Export failed", str(ex))

    def edit_currency_symbol(self):
        """Change the currency symbol and save settings"""
        symbol = simpledialog.askstring(
            "Currency Symbol", "Symbol shown before amounts:",
            initialvalue=self.settings.currency_symbol, parent=self.master,
        )
        if symbol is None:
            return
        self.settings.currency_symbol = symbol.strip()
        try:
            save_settings(self.settings, os.path.join(app_dir(), SETTINGS_FILE))
        except OSError as ex:
            messagebox.showerror("Settings", f"Could not save settings: {ex}")
        self.refresh_all()

    # ---------- Refresh ----------
    def refresh_all(self):
        """Refresh all UI elements"""
        self.refresh_transactions()
        self.refresh_parties()
        self.refresh_totals()
        self.refresh_status()

    def refresh_transactions(self):
        """Refresh transactions tree view"""
        for iid in self.txn_tree.get_children():
            self.txn_tree.delete(iid)
        lookup = self.store.salesman_by_party()
        for t in self.store.transactions:
            values = (t.date, t.party_name, resolve_salesman(t.party_name, lookup), self._money(t.amount))
            self.txn_tree.insert("", "end", iid=t.id, values=values)

    def refresh_parties(self):
        """Refresh parties tree view"""
        for iid in self.party_tree.get_children():
            self.party_tree.delete(iid)
        for p in self.store.parties:
            self.party_tree.insert("", "end", iid=p.id, values=(p.name, p.salesman))

    def refresh_totals(self):
        """Refresh totals tab; totals are cleared by any data change"""
        for tree in (self.salesman_tree, self.party_total_tree):
            for iid in tree.get_children():
                tree.delete(iid)

        result = self.store.totals
        if result is None:
            self.totals_note.set("Totals not calculated. Use 'Calculate Totals' on the Transactions tab.")
            return

        self.totals_note.set(f"Grand Total: {self._money(result.grand_total)}")
        for s in result.salesman_totals:
            self.salesman_tree.insert("", "end", values=(s.salesman, self._money(s.total_amount), s.party_count))
        for p in result.party_totals:
            self.party_total_tree.insert("", "end", values=(
                p.party_name, self._money(p.total_amount), p.transaction_count
            ))

    def refresh_status(self):
        """Refresh status bar"""
        st = self.store.status()
        master = f"Loaded ({st.master_file})" if st.master_loaded else "Pending"
        txns = f"Loaded ({st.transaction_file})" if st.transactions_loaded else "Pending"
        self.status_var.set(
            f"Parties: {st.party_count}   Transactions: {st.transaction_count}   "
            f"Master Sheet: {master}   Transaction Sheet: {txns}"
        )
