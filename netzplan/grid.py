from __future__ import annotations

# Plain-text renderings: the laid-out network plan and the schedule timeline.

from collections.abc import Collection, Sequence

import numpy as np

from netzplan.layout import grid_extent
from netzplan.model import ScheduledTask, Task
from netzplan.schedule import project_duration

EMPTY = -1

GANTT_EMPTY = 0
GANTT_BAR = 1
GANTT_CRITICAL = 2
_GANTT_GLYPHS = {GANTT_EMPTY: ".", GANTT_BAR: "=", GANTT_CRITICAL: "#"}


def occupancy_grid(tasks: Sequence[Task]) -> np.ndarray:
    """Matrix of task ids indexed by (row, col); `EMPTY` where no task sits."""

    rows, cols = grid_extent(tasks)
    grid = np.full((rows, cols), EMPTY, dtype=np.int64)
    for t in tasks:
        grid[t.position.row, t.position.col] = t.id
    return grid


def render_grid(
    tasks: Sequence[Task],
    *,
    critical: Collection[int] | None = None,
) -> str:
    grid = occupancy_grid(tasks)
    if grid.size == 0:
        return ""

    marked = set(critical or ())
    labels = [
        [
            "" if tid == EMPTY else f"{tid}{'*' if tid in marked else ''}"
            for tid in (int(v) for v in row)
        ]
        for row in grid
    ]
    # Columns that hold no task at all (arrow lanes) are drawn narrow.
    used = np.any(grid != EMPTY, axis=0)
    width = max((len(cell) for line in labels for cell in line), default=1)
    widths = [width if used[c] else 1 for c in range(grid.shape[1])]

    lines = []
    for line in labels:
        cells = [
            f"[{cell.center(widths[c])}]" if cell else " " * (widths[c] + 2)
            for c, cell in enumerate(line)
        ]
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


def task_label(task: Task) -> str:
    return task.name or f"Task {task.id}"


def gantt_rows(scheduled: Sequence[ScheduledTask]) -> list[ScheduledTask]:
    return sorted(scheduled, key=lambda t: (t.FAZ, t.id))


def gantt_matrix(scheduled: Sequence[ScheduledTask]) -> np.ndarray:
    """One row per task in `gantt_rows` order, one column per period."""

    rows = gantt_rows(scheduled)
    if not rows:
        return np.zeros((0, 0), dtype=np.int8)

    periods = max(1, project_duration(rows))
    matrix = np.full((len(rows), periods), GANTT_EMPTY, dtype=np.int8)
    for i, t in enumerate(rows):
        start = max(0, t.FAZ)
        end = max(start + 1, t.FEZ)
        matrix[i, start:end] = GANTT_CRITICAL if t.is_critical else GANTT_BAR
    return matrix


def render_gantt(scheduled: Sequence[ScheduledTask]) -> str:
    """Timeline of FAZ..FEZ bars; critical tasks are drawn with `#`."""

    rows = gantt_rows(scheduled)
    matrix = gantt_matrix(rows)
    if matrix.size == 0:
        return ""

    labels = [task_label(t) for t in rows]
    width = max(len(label) for label in labels)
    periods = "".join(str(i % 10) for i in range(matrix.shape[1]))

    lines = [f"{'':<{width}} |{periods}|"]
    for t, label, cells in zip(rows, labels, matrix):
        bar = "".join(_GANTT_GLYPHS[int(v)] for v in cells)
        lines.append(f"{label:<{width}} |{bar}| {t.FAZ}->{t.FEZ}")
    return "\n".join(lines)
