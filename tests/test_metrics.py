from __future__ import annotations

from netzplan.metrics import critical_path, summarize_schedule
from netzplan.model import Task
from netzplan.schedule import calculate_schedule


def test_summary_for_five_task_scenario(five_tasks: list[Task]) -> None:
    summary = summarize_schedule(calculate_schedule(five_tasks))
    assert summary["project_duration"] == 14
    assert summary["task_count"] == 5
    assert summary["critical_count"] == 4
    assert summary["critical_path"] == [0, 1, 2, 4]
    assert summary["critical_path_tasks"] == "A>B>C>E"
    assert summary["total_float"] == 2
    assert summary["free_float"] == 2
    assert summary["float_by_task"]["3"] == {"GP": 2, "FP": 2}


def test_summary_unnamed_tasks_fall_back_to_ids() -> None:
    scheduled = calculate_schedule([Task(5, "", 1), Task(6, "", 2, (5,))])
    assert summarize_schedule(scheduled)["critical_path_tasks"] == "5>6"


def test_summary_empty() -> None:
    summary = summarize_schedule([])
    assert summary["project_duration"] == 0
    assert summary["critical_path"] == []
    assert summary["critical_path_tasks"] == ""


def test_critical_path_is_topological() -> None:
    tasks = [Task(2, "c", 1, (1,)), Task(1, "b", 1, (0,)), Task(0, "a", 1)]
    assert critical_path(calculate_schedule(tasks)) == [0, 1, 2]
