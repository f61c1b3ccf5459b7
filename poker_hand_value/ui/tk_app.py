"""Minimal Tkinter fallback UI."""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from .summary import summarize


def launch_tk(first: str = "", second: str = "") -> int:
    root = tk.Tk()
    root.title("Poker Hand Value (Fallback)")
    first_var = tk.StringVar(value=first)
    second_var = tk.StringVar(value=second)
    status = tk.StringVar()

    def rate() -> None:
        try:
            status.set("\n".join(summarize(first_var.get(), second_var.get())))
        except ValueError as exc:
            status.set(f"Unable to rate: {exc}")

    ttk.Label(root, text="First hand").grid(row=0, column=0, padx=10, pady=5, sticky="w")
    ttk.Entry(root, textvariable=first_var, width=30).grid(row=0, column=1, padx=10, pady=5)
    ttk.Label(root, text="Second hand").grid(row=1, column=0, padx=10, pady=5, sticky="w")
    ttk.Entry(root, textvariable=second_var, width=30).grid(row=1, column=1, padx=10, pady=5)
    ttk.Button(root, text="Rate", command=rate).grid(row=2, column=0, columnspan=2, pady=10)
    ttk.Label(root, textvariable=status, justify="left").grid(row=3, column=0, columnspan=2, padx=10, pady=10)
    if first:
        rate()
    root.mainloop()
    return 0


__all__ = ["launch_tk"]
