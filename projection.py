"""Read-only views derived from a habit snapshot.

Everything here is a pure function of the habits passed in and is
recomputed from scratch on each call.
"""

from typing import NamedTuple, Sequence, Tuple

from models import Habit

DONE_VALUE = 100
NOT_DONE_VALUE = 0


class ChartDataset(NamedTuple):
    labels: Tuple[str, ...]
    values: Tuple[int, ...]


def completion_percentage(habits: Sequence[Habit]) -> float:
    """Share of completed habits scaled to 0..100, unrounded."""
    if not habits:
        return 0.0
    completed = sum(1 for h in habits if h.completed)
    return (completed / len(habits)) * 100.0


def chart_dataset(habits: Sequence[Habit]) -> ChartDataset:
    labels = tuple(f"Habit {i + 1}" for i in range(len(habits)))
    values = tuple(DONE_VALUE if h.completed else NOT_DONE_VALUE for h in habits)
    return ChartDataset(labels, values)


def format_percentage(value: float) -> str:
    return f"{value:.2f}"


def progress_summary(habits: Sequence[Habit]) -> dict:
    """
    Summarize progress as:
      - current (completed habits)
      - target (all habits)
      - percent_complete (rounded to 2 decimals)
      - completed (bool, every habit done)
      - status (string)
    """
    current = sum(1 for h in habits if h.completed)
    target = len(habits)
    percent = round(completion_percentage(habits), 2)

    if target == 0:
        status = "empty"
    elif current == target:
        status = "completed"
    elif current == 0:
        status = "not_started"
    else:
        status = "in_progress"

    return {
        "current": current,
        "target": target,
        "percent_complete": percent,
        "completed": status == "completed",
        "status": status,
    }
