from __future__ import annotations

from netzplan.layout import update_task_positions
from netzplan.model import Position, ScheduledTask, Task
from netzplan.schedule import calculate_schedule

__all__ = [
    "Position",
    "ScheduledTask",
    "Task",
    "calculate_schedule",
    "update_task_positions",
]
