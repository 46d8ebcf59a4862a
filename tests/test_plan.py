from __future__ import annotations

from netzplan.model import Position, Task
from netzplan.plan import (
    DEFAULT_TASKS,
    TASK_TEMPLATES,
    add_dependency,
    add_task,
    add_task_from_template,
    find_template,
    hydrate,
    remove_dependency,
    remove_task,
    update_duration,
    update_name,
)
from netzplan.validate import validate_tasks


def test_default_tasks_are_valid_and_laid_out() -> None:
    tasks = hydrate(DEFAULT_TASKS)
    validate_tasks(tasks)
    by_id = {t.id: t for t in tasks}
    assert by_id[0].position == Position(0, 0)
    assert by_id[4].position.col == by_id[5].position.col
    assert by_id[4].position.row != by_id[5].position.row


def test_add_task_depends_on_last_task() -> None:
    tasks = add_task([Task(0, "a", 2), Task(3, "b", 1, (0,))])
    new = tasks[-1]
    assert (new.id, new.name, new.duration, new.dependencies) == (4, "", 1, (3,))
    assert new.position == Position(0, 4)


def test_add_task_to_empty_plan() -> None:
    tasks = add_task([])
    assert tasks == [Task(0, "", 1, (), Position(0, 0))]


def test_add_task_from_template() -> None:
    tpl = find_template("implementation")
    assert tpl is not None
    tasks = add_task_from_template([Task(0, "a", 2)], tpl)
    assert (tasks[-1].name, tasks[-1].duration) == ("Implementation", 5)
    assert find_template("nope") is None
    assert len({t.key for t in TASK_TEMPLATES}) == len(TASK_TEMPLATES)


def test_remove_task_strips_dependency_references(five_tasks: list[Task]) -> None:
    tasks = remove_task(five_tasks, 1)
    assert [t.id for t in tasks] == [0, 2, 3, 4]
    by_id = {t.id: t for t in tasks}
    assert by_id[2].dependencies == ()
    assert by_id[2].position == Position(1, 0)


def test_update_name_and_duration(five_tasks: list[Task]) -> None:
    tasks = update_name(five_tasks, 2, "renamed")
    assert tasks[2].name == "renamed"
    assert update_duration(five_tasks, 2, 3.7)[2].duration == 3
    assert update_duration(five_tasks, 2, 0)[2].duration == 1
    assert update_duration(five_tasks, 2, -5)[2].duration == 1
    assert update_duration(five_tasks, 2, float("nan"))[2].duration == 1


def test_add_dependency_rejects_self_unknown_and_cycles(five_tasks: list[Task]) -> None:
    base = hydrate(five_tasks)
    assert add_dependency(five_tasks, 2, 2) == base
    assert add_dependency(five_tasks, 2, 42) == base
    # 0 -> 4 would close the cycle 0 <- 1 <- 2 <- 4.
    assert add_dependency(five_tasks, 0, 4) == base


def test_add_dependency_adds_once_and_relayouts(five_tasks: list[Task]) -> None:
    tasks = add_dependency(five_tasks, 3, 2)
    by_id = {t.id: t for t in tasks}
    assert by_id[3].dependencies == (1, 2)
    assert add_dependency(tasks, 3, 2) == tasks
    # Column follows the shallowest dependency (1), so 3 stays beside 2.
    assert by_id[3].position == Position(1, 4)


def test_remove_dependency(five_tasks: list[Task]) -> None:
    tasks = remove_dependency(five_tasks, 4, 3)
    by_id = {t.id: t for t in tasks}
    assert by_id[4].dependencies == (2,)
    assert remove_dependency(five_tasks, 4, 99) == hydrate(five_tasks)
