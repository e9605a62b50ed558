# ui/tracker.py (single-page tracker screen)
import logging
import tkinter as tk

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from PIL import Image, ImageTk

from projection import (
    chart_dataset,
    completion_percentage,
    format_percentage,
    progress_summary,
)
from ui import theme
from ui.chart import ProgressChart

logger = logging.getLogger(__name__)

PLACEHOLDER = "Nuevo hábito"
LOGO_HEIGHT = 144
BAR_HEIGHT = 24

STATUS_TEXT = {
    "empty": "Sin hábitos todavía",
    "not_started": "Sin empezar",
    "in_progress": "En progreso",
    "completed": "¡Todo completado!",
}


def submit_name(store, text, placeholder_shown=False):
    """Add `text` to the store and return what the entry should show next.

    The field is cleared only when the store accepted the name; a rejected
    blank name stays as typed and the placeholder is never submitted.
    """
    if placeholder_shown:
        return text
    if store.add(text) is None:
        return text
    return ""


def progress_caption(habits):
    """Return the (percentage, status) lines shown under the progress bar."""
    summary = progress_summary(habits)
    percent = format_percentage(completion_percentage(habits))
    status = STATUS_TEXT[summary["status"]]
    if summary["target"]:
        status = f"{status} ({summary['current']}/{summary['target']})"
    return f"{percent}% completado", status


class HabitTracker(tk.Frame):
    def __init__(self, parent, controller):
        super().__init__(parent, bg=theme.BG)
        self.controller = controller
        self.logo_photo = None

        # Header
        header = tk.Frame(self, bg=theme.BG)
        header.pack(fill="x", padx=24, pady=(18, 8))
        theme.heading_label(header, "Registro de Hábitos", theme.TITLE).pack(anchor="center")

        top = tk.Frame(self, bg=theme.BG)
        top.pack(fill="x", padx=24, pady=8)
        self._build_logo(top)

        # Add form + list
        form_card = theme.card(top, padx=20, pady=16)
        form_card.pack(side="left", fill="both", expand=True)
        theme.heading_label(form_card, "Agregar Nuevo Hábito", theme.SUBTITLE).pack(pady=(0, 10))

        form = tk.Frame(form_card, bg=form_card.cget("bg"))
        form.pack(fill="x", pady=(0, 12))
        self.name = tk.Entry(
            form,
            bg="#ffffff",
            fg=theme.TEXT,
            relief="solid",
            bd=1,
            highlightbackground=theme.BORDER,
            highlightcolor=theme.ACCENT,
            font=theme.BODY,
        )
        self.name.pack(side="left", fill="x", expand=True, ipady=6)
        theme.primary_button(form, "Agregar", self.add).pack(side="left")
        self.name.bind("<Return>", lambda _e: self.add())
        self.name.bind("<FocusIn>", self._clear_placeholder)
        self.name.bind("<FocusOut>", self._show_placeholder)
        self._show_placeholder()

        theme.heading_label(form_card, "Lista de Hábitos", theme.HEADING).pack(pady=(4, 6))
        self.list_frame = tk.Frame(form_card, bg=form_card.cget("bg"))
        self.list_frame.pack(fill="both", expand=True)

        # Progress + chart
        bottom = tk.Frame(self, bg=theme.BG)
        bottom.pack(fill="both", expand=True, padx=24, pady=(8, 18))
        bottom.columnconfigure(0, weight=1)
        bottom.columnconfigure(1, weight=1)
        bottom.rowconfigure(0, weight=1)

        progress_card = theme.card(bottom, padx=20, pady=16)
        progress_card.grid(row=0, column=0, sticky="nsew", padx=(0, 8))
        theme.heading_label(progress_card, "Progreso", theme.HEADING).pack(pady=(0, 10))
        self.bar = tk.Canvas(
            progress_card,
            height=BAR_HEIGHT,
            bg=progress_card.cget("bg"),
            highlightthickness=0,
        )
        self.bar.pack(fill="x")
        self.bar.bind("<Configure>", lambda _e: self._draw_bar())
        self.progress_text = tk.Label(
            progress_card,
            text="",
            bg=progress_card.cget("bg"),
            fg=theme.ACCENT_DARK,
            font=theme.HEADING,
        )
        self.progress_text.pack(pady=(12, 0))
        self.status_text = theme.muted_label(progress_card, "")
        self.status_text.pack(pady=(4, 0))
        self.percent = 0.0

        chart_card = theme.card(bottom, padx=12, pady=12)
        chart_card.grid(row=0, column=1, sticky="nsew", padx=(8, 0))
        theme.heading_label(chart_card, "Gráfico de Progreso", theme.HEADING).pack(pady=(0, 6))
        # chart object is built once and only its data changes afterwards
        self.chart = ProgressChart()
        canvas = FigureCanvasTkAgg(self.chart.figure, master=chart_card)
        canvas.get_tk_widget().pack(fill="both", expand=True)
        self.chart.attach(canvas)

        self.unsubscribe = controller.store.subscribe(lambda _habits: self.refresh())

    def _build_logo(self, parent):
        path = self.controller.settings.logo_path
        try:
            raw = Image.open(path)
            width = max(1, round(raw.width * LOGO_HEIGHT / raw.height))
            resized = raw.resize((width, LOGO_HEIGHT), Image.LANCZOS)
            self.logo_photo = ImageTk.PhotoImage(resized)
        except OSError as exc:
            logger.warning("Logo %s not loaded: %s", path, exc)
            return
        tk.Label(parent, image=self.logo_photo, bd=0, bg=theme.BG).pack(
            side="left", padx=(0, 24)
        )

    # ---------- Input field ----------
    def _show_placeholder(self, _event=None):
        if not self.name.get():
            self.name.insert(0, PLACEHOLDER)
            self.name.configure(fg=theme.MUTED)

    def _clear_placeholder(self, _event=None):
        if self._has_placeholder():
            self.name.delete(0, "end")
            self.name.configure(fg=theme.TEXT)

    def _has_placeholder(self):
        return self.name.cget("fg") == theme.MUTED and self.name.get() == PLACEHOLDER

    def add(self):
        current = self.name.get()
        new_text = submit_name(self.controller.store, current, self._has_placeholder())
        if new_text != current:
            self.name.delete(0, "end")
            self.name.insert(0, new_text)

    # ---------- Rendering ----------
    def refresh(self):
        habits = self.controller.store.list()
        self._render_list(habits)
        self.percent = completion_percentage(habits)
        self._draw_bar()
        percent_line, status_line = progress_caption(habits)
        self.progress_text.configure(text=percent_line)
        self.status_text.configure(text=status_line)
        self.chart.update(chart_dataset(habits))

    def _render_list(self, habits):
        for w in self.list_frame.winfo_children():
            w.destroy()

        if not habits:
            theme.muted_label(
                self.list_frame,
                "Todavía no hay hábitos. Agrega el primero arriba.",
            ).pack(anchor="w", pady=4)
            return

        store = self.controller.store
        for i, h in enumerate(habits):
            row = tk.Frame(self.list_frame, bg=self.list_frame.cget("bg"))
            row.pack(fill="x", pady=3)

            done = tk.BooleanVar(value=h.completed)
            check = tk.Checkbutton(
                row,
                variable=done,
                command=lambda idx=i: store.toggle(idx),
                bg=row.cget("bg"),
                activebackground=row.cget("bg"),
                selectcolor="#ffffff",
                cursor="hand2",
            )
            check.var = done
            check.pack(side="left")

            tk.Label(
                row,
                text=f"{i + 1}. {h.name}",
                anchor="w",
                bg=row.cget("bg"),
                fg=theme.TEXT,
                font=theme.BODY_DONE if h.completed else theme.BODY,
            ).pack(side="left", padx=(4, 12))

            theme.danger_button(row, "Eliminar", lambda idx=i: store.delete(idx)).pack(
                side="left"
            )

    def _draw_bar(self):
        self.bar.delete("all")
        width = self.bar.winfo_width()
        self.bar.create_rectangle(0, 0, width, BAR_HEIGHT, fill=theme.TRACK_BG, width=0)
        filled = width * self.percent / 100.0
        if filled > 0:
            self.bar.create_rectangle(0, 0, filled, BAR_HEIGHT, fill=theme.ACCENT, width=0)
