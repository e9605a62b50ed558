"""Shared visual style helpers for the Tk UI (indigo on light grey palette)."""

import tkinter as tk

# Palette
BG = "#f3f4f6"           # gray-100
CARD_BG = "#f9fafb"
TRACK_BG = "#e5e7eb"     # gray-200, empty progress track
BORDER = "#d1d5db"
TEXT = "#1f2937"         # gray-800
MUTED = "#6b7280"
ACCENT = "#4f46e5"       # indigo-600
ACCENT_DARK = "#4338ca"  # indigo-700
ACCENT_SOFT = "#a7a3f2"  # rgba(79, 70, 229, 0.7) over white
DANGER = "#dc2626"       # red-600
DANGER_DARK = "#b91c1c"
GRID = "#e4e3fb"         # rgba(79, 70, 229, 0.1) over white

# Typography
FONT_FAMILY = "Helvetica"
TITLE = (FONT_FAMILY, 30, "bold")
SUBTITLE = (FONT_FAMILY, 18, "bold")
HEADING = (FONT_FAMILY, 15, "bold")
BODY = (FONT_FAMILY, 12)
BODY_DONE = (FONT_FAMILY, 12, "overstrike")
BUTTON = (FONT_FAMILY, 11, "bold")


def card(parent, **kwargs):
    """Lightweight card frame with border."""
    return tk.Frame(
        parent,
        bg=CARD_BG,
        bd=0,
        highlightbackground=BORDER,
        highlightthickness=1,
        **kwargs,
    )


def heading_label(parent, text, font=TITLE):
    return tk.Label(parent, text=text, bg=parent.cget("bg"), fg=ACCENT_DARK, font=font)


def muted_label(parent, text, font=BODY, wrap=None):
    return tk.Label(
        parent,
        text=text,
        bg=parent.cget("bg"),
        fg=MUTED,
        font=font,
        justify="left",
        wraplength=wrap,
        anchor="w",
    )


def primary_button(parent, text, command):
    return tk.Button(
        parent,
        text=text,
        command=command,
        bg=ACCENT,
        fg="#ffffff",
        activebackground=ACCENT_DARK,
        activeforeground="#ffffff",
        relief="flat",
        bd=0,
        font=BUTTON,
        padx=18,
        pady=8,
        cursor="hand2",
        highlightthickness=0,
    )


def danger_button(parent, text, command):
    return tk.Button(
        parent,
        text=text,
        command=command,
        bg=DANGER,
        fg="#ffffff",
        activebackground=DANGER_DARK,
        activeforeground="#ffffff",
        relief="flat",
        bd=0,
        font=BUTTON,
        padx=10,
        pady=3,
        cursor="hand2",
        highlightthickness=0,
    )
