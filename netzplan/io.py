from __future__ import annotations

import csv
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from netzplan.model import ScheduledTask, Task, parse_tasks


def read_tasks_json(path: Path) -> list[Task]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        raw = raw.get("tasks")
    if not isinstance(raw, list):
        raise TypeError("task file must hold a list of tasks or {'tasks': [...]}")
    return parse_tasks(raw)


def _write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2, sort_keys=True), encoding="utf-8")


def write_tasks_json(path: Path, tasks: Sequence[Task]) -> None:
    _write_json(path, {"tasks": [t.to_json() for t in tasks]})


def write_schedule_json(path: Path, scheduled: Sequence[ScheduledTask]) -> None:
    _write_json(path, {"tasks": [t.to_json() for t in scheduled]})


def write_summary_json(path: Path, summary: dict[str, Any]) -> None:
    _write_json(path, summary)


def write_schedule_csv(path: Path, scheduled: Sequence[ScheduledTask]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(
            [
                "id",
                "name",
                "duration",
                "dependencies",
                "row",
                "col",
                "FAZ",
                "FEZ",
                "SAZ",
                "SEZ",
                "GP",
                "FP",
                "critical",
            ]
        )
        for t in scheduled:
            w.writerow(
                [
                    t.id,
                    t.name,
                    t.duration,
                    ";".join(str(d) for d in t.dependencies),
                    t.position.row,
                    t.position.col,
                    t.FAZ,
                    t.FEZ,
                    t.SAZ,
                    t.SEZ,
                    t.GP,
                    t.FP,
                    int(t.is_critical),
                ]
            )
