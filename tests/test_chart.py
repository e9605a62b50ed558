import pytest

pytest.importorskip("tkinter")

from projection import ChartDataset  # noqa: E402
from ui import theme  # noqa: E402
from ui.chart import ProgressChart  # noqa: E402


class FakeCanvas:
    def __init__(self):
        self.draws = 0

    def draw_idle(self):
        self.draws += 1


def test_update_replaces_line_data_in_place():
    chart = ProgressChart()
    line = chart.line

    chart.update(ChartDataset(("Habit 1", "Habit 2"), (100, 0)))

    assert chart.line is line
    assert len(chart.ax.lines) == 1
    assert list(line.get_xdata()) == [0, 1]
    assert list(line.get_ydata()) == [100, 0]
    assert [t.get_text() for t in chart.ax.get_xticklabels()] == ["Habit 1", "Habit 2"]


def test_y_axis_stays_at_zero_to_hundred():
    chart = ProgressChart()
    chart.update(ChartDataset(("Habit 1",), (100,)))
    assert chart.ax.get_ylim() == (0, 100)


def test_empty_dataset_clears_line():
    chart = ProgressChart()
    chart.update(ChartDataset(("Habit 1",), (100,)))
    chart.update(ChartDataset((), ()))
    assert list(chart.line.get_xdata()) == []
    assert chart.ax.get_xticks().size == 0


def test_attached_canvas_is_redrawn():
    chart = ProgressChart()
    canvas = FakeCanvas()
    chart.update(ChartDataset((), ()))
    chart.attach(canvas)
    chart.update(ChartDataset(("Habit 1",), (0,)))
    chart.update(ChartDataset(("Habit 1",), (100,)))
    assert canvas.draws == 2


def test_labels():
    chart = ProgressChart()
    assert chart.title_text.get_text() == "Habit Progress Chart"
    assert chart.ax.get_title() == "Daily progress of completed habits"
    assert chart.ax.get_ylabel() == "Progress (%)"
    assert chart.ax.get_xlabel() == "Habits"
    assert chart.line.get_label() == "Habit Progress"


def test_colours_come_from_the_shared_theme():
    chart = ProgressChart()
    assert chart.line.get_color() == theme.ACCENT
    assert chart.title_text.get_color() == theme.ACCENT
    assert chart.ax.title.get_color() == theme.ACCENT_SOFT
