"""Line chart of per-habit completion, drawn with matplotlib."""

from matplotlib.figure import Figure

from projection import ChartDataset
from ui import theme


def clean_axes(ax):
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    for side in ("left", "bottom"):
        ax.spines[side].set_color(theme.GRID)
    ax.grid(color=theme.GRID, linewidth=1)
    ax.tick_params(labelsize=9, colors=theme.TEXT)


class ProgressChart:
    """Owns one Figure and one line; `update` swaps the data in place."""

    def __init__(self, figsize=(6, 3.6), dpi=100):
        self.figure = Figure(figsize=figsize, dpi=dpi, layout="tight")
        self.ax = self.figure.add_subplot(111)
        self.title_text = self.figure.suptitle(
            "Habit Progress Chart", fontsize=16, fontweight="bold", color=theme.ACCENT
        )
        self.ax.set_title(
            "Daily progress of completed habits", fontsize=11, color=theme.ACCENT_SOFT
        )
        (self.line,) = self.ax.plot(
            [],
            [],
            color=theme.ACCENT,
            marker="o",
            markersize=6,
            markerfacecolor=theme.ACCENT,
            linewidth=2,
            label="Habit Progress",
        )
        self.ax.set_ylim(0, 100)
        self.ax.set_ylabel("Progress (%)", fontsize=11, color=theme.ACCENT)
        self.ax.set_xlabel("Habits", fontsize=11, color=theme.ACCENT)
        legend = self.ax.legend(loc="upper right", frameon=False)
        for text in legend.get_texts():
            text.set_color(theme.ACCENT)
        clean_axes(self.ax)
        self.canvas = None

    def attach(self, canvas):
        """Remember the backend canvas to redraw after each update."""
        self.canvas = canvas

    def update(self, dataset: ChartDataset):
        positions = list(range(len(dataset.labels)))
        self.line.set_data(positions, list(dataset.values))
        self.ax.set_xticks(positions)
        self.ax.set_xticklabels(dataset.labels)
        # keep a single point centred instead of collapsing the x range
        if positions:
            self.ax.set_xlim(-0.5, max(positions) + 0.5)
        else:
            self.ax.set_xlim(0, 1)
        self.ax.set_ylim(0, 100)
        if self.canvas is not None:
            self.canvas.draw_idle()
