"""
SalesTracker GUI
- Load a master sheet (Party Name | Salesman) and a transaction sheet (Party Name | Amount).
- Add, edit and delete transactions; add parties.
- Calculate totals per salesman and per party, and export an Excel report.

Run:
  python sales_tracker_gui.py

Dependencies:
  pip install openpyxl
(Tkinter ships with most Python distributions; on some Linux you may need: sudo apt-get install python3-tk)
"""
from __future__ import annotations

try:
    import tkinter as tk
except ModuleNotFoundError:
    tk = None

from config import get_default_settings
from logging_setup import configure_logging, get_logger


def main():
    """Main entry point for the application"""
    if tk is None:
        raise RuntimeError(
            'tkinter is not available. Install it (e.g., on Ubuntu: sudo apt-get install python3-tk) '
            'and re-run to use the GUI.'
        )

    settings = get_default_settings()
    configure_logging(settings.log_level)
    get_logger("gui").info("Starting Sales Tracker")

    from main_app import SalesTrackerApp

    root = tk.Tk()
    app = SalesTrackerApp(root, settings)
    root.mainloop()


if __name__ == "__main__":
    main()
