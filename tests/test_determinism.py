from __future__ import annotations

import json

from netzplan.layout import update_task_positions
from netzplan.model import Task
from netzplan.plan import DEFAULT_TASKS
from netzplan.schedule import calculate_schedule


def _dump(tasks: list) -> str:
    return json.dumps([t.to_json() for t in tasks], sort_keys=True)


def test_repeated_calls_are_byte_identical() -> None:
    tasks = list(DEFAULT_TASKS)
    assert _dump(calculate_schedule(tasks)) == _dump(calculate_schedule(tasks))
    assert _dump(update_task_positions(tasks)) == _dump(update_task_positions(tasks))


def test_input_order_does_not_change_cpm_values() -> None:
    tasks = list(DEFAULT_TASKS)

    def values(ts: list[Task]) -> dict[int, tuple[int, ...]]:
        return {
            t.id: (t.FAZ, t.FEZ, t.SAZ, t.SEZ, t.GP, t.FP)
            for t in calculate_schedule(ts)
        }

    assert values(tasks) == values(list(reversed(tasks)))


def test_sample_plan_golden_schedule() -> None:
    got = [
        (t.id, t.FAZ, t.FEZ, t.SAZ, t.SEZ, t.GP, t.FP)
        for t in calculate_schedule(list(DEFAULT_TASKS))
    ]
    assert got == [
        (0, 0, 1, 0, 1, 0, 0),
        (1, 1, 4, 1, 4, 0, 0),
        (2, 4, 6, 4, 6, 0, 0),
        (3, 6, 11, 6, 11, 0, 0),
        (4, 11, 14, 11, 14, 0, 0),
        (5, 11, 15, 12, 16, 1, 1),
        (6, 14, 15, 14, 15, 0, 0),
        (7, 15, 16, 15, 16, 0, 0),
    ]
