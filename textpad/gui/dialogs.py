"""
Module: textpad.gui.dialogs

Modal dialogs backed by tkinter's native choosers and message boxes.
"""

import tkinter as tk
from tkinter import filedialog, messagebox, simpledialog
from typing import Optional, Tuple

import ttkbootstrap as ttk

FILETYPES = [("Text Files", "*.txt"), ("All Files", "*.*")]


class ReplaceDialog(tk.Toplevel):
    """Two-field modal asking for the text to find and its replacement."""

    def __init__(self, parent):
        super().__init__(parent)
        self.title("Replace")
        self.resizable(False, False)
        self.transient(parent)
        self.result: Optional[Tuple[str, str]] = None

        frame = ttk.Frame(self, padding=10)
        frame.pack(fill="both", expand=True)

        self.find_var = tk.StringVar()
        self.replace_var = tk.StringVar()

        ttk.Label(frame, text="Find what:").grid(row=0, column=0, sticky="w", pady=2)
        find_entry = ttk.Entry(frame, textvariable=self.find_var, width=30)
        find_entry.grid(row=0, column=1, padx=5, pady=2)

        ttk.Label(frame, text="Replace with:").grid(row=1, column=0, sticky="w", pady=2)
        ttk.Entry(frame, textvariable=self.replace_var, width=30).grid(
            row=1, column=1, padx=5, pady=2
        )

        buttons = ttk.Frame(frame)
        buttons.grid(row=2, column=0, columnspan=2, sticky="e", pady=(8, 0))
        ttk.Button(buttons, text="OK", command=self.on_ok).pack(side="left", padx=2)
        ttk.Button(
            buttons, text="Cancel", bootstyle="secondary", command=self.on_cancel
        ).pack(side="left", padx=2)

        self.bind("<Return>", lambda e: self.on_ok())
        self.bind("<Escape>", lambda e: self.on_cancel())
        self.protocol("WM_DELETE_WINDOW", self.on_cancel)
        find_entry.focus_set()

    def on_ok(self):
        self.result = (self.find_var.get(), self.replace_var.get())
        self.destroy()

    def on_cancel(self):
        self.result = None
        self.destroy()

    def show(self) -> Optional[Tuple[str, str]]:
        self.wait_visibility()
        self.grab_set()
        self.wait_window()
        return self.result


class TkDialogs:
    def __init__(self, parent):
        self.parent = parent

    def choose_open(self, initial_dir: Optional[str] = None) -> Optional[str]:
        path = filedialog.askopenfilename(
            parent=self.parent, initialdir=initial_dir, filetypes=FILETYPES
        )
        return path or None

    def choose_save(
        self, initial_dir: Optional[str] = None, initial_file: Optional[str] = None
    ) -> Optional[str]:
        path = filedialog.asksaveasfilename(
            parent=self.parent,
            initialdir=initial_dir,
            initialfile=initial_file,
            defaultextension=".txt",
            filetypes=FILETYPES,
        )
        return path or None

    def confirm(self, title: str, message: str) -> Optional[bool]:
        return messagebox.askyesnocancel(title, message, parent=self.parent)

    def ask_string(self, title: str, prompt: str) -> Optional[str]:
        return simpledialog.askstring(title, prompt, parent=self.parent)

    def ask_replace(self) -> Optional[Tuple[str, str]]:
        return ReplaceDialog(self.parent).show()

    def info(self, title: str, message: str):
        messagebox.showinfo(title, message, parent=self.parent)

    def error(self, title: str, message: str):
        messagebox.showerror(title, message, parent=self.parent)
