from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from netzplan.graph import topo_order
from netzplan.model import ScheduledTask
from netzplan.schedule import project_duration


def critical_path(scheduled: Sequence[ScheduledTask]) -> list[int]:
    """Critical task ids in topological order."""

    crit = {t.id for t in scheduled if t.is_critical}
    return [tid for tid in topo_order(scheduled) if tid in crit]


def summarize_schedule(scheduled: Sequence[ScheduledTask]) -> dict[str, Any]:
    by_id = {t.id: t for t in scheduled}
    path = critical_path(scheduled)

    return {
        "project_duration": project_duration(scheduled),
        "task_count": len(scheduled),
        "critical_count": len(path),
        "critical_path": path,
        "critical_path_tasks": ">".join(by_id[tid].name or str(tid) for tid in path),
        "total_float": sum(t.GP for t in scheduled),
        "free_float": sum(t.FP for t in scheduled),
        "float_by_task": {
            str(t.id): {"GP": t.GP, "FP": t.FP} for t in scheduled
        },
    }
