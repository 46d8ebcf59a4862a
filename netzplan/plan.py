from __future__ import annotations

# Editing actions for a network plan.
#
# Each action takes the current task list and returns a new, laid-out list.
# Invalid edits (unknown ids, self-dependencies, edges that would close a
# cycle) leave the plan unchanged.

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace

from netzplan.graph import has_path
from netzplan.layout import update_task_positions
from netzplan.model import Position, Task


@dataclass(frozen=True)
class TaskTemplate:
    key: str
    name: str
    duration: int


TASK_TEMPLATES: tuple[TaskTemplate, ...] = (
    TaskTemplate("kickoff", "Kickoff", 1),
    TaskTemplate("requirements", "Requirements analysis", 3),
    TaskTemplate("design", "System design", 2),
    TaskTemplate("implementation", "Implementation", 5),
    TaskTemplate("code-review", "Code review", 1),
    TaskTemplate("test", "Testing", 3),
    TaskTemplate("integration", "Integration", 2),
    TaskTemplate("deployment", "Deployment", 1),
    TaskTemplate("acceptance", "Acceptance", 1),
    TaskTemplate("documentation", "Documentation", 2),
)


def find_template(key: str) -> TaskTemplate | None:
    for tpl in TASK_TEMPLATES:
        if tpl.key == key:
            return tpl
    return None


DEFAULT_TASKS: tuple[Task, ...] = (
    Task(0, "Kickoff", 1),
    Task(1, "Requirements analysis", 3, (0,)),
    Task(2, "System design", 2, (1,)),
    Task(3, "Implementation", 5, (2,)),
    Task(4, "Code review", 3, (3,)),
    Task(5, "Testing", 4, (3,)),
    Task(6, "Deployment", 1, (4,)),
    Task(7, "Acceptance", 1, (6,)),
)


def _clamp_duration(duration: float) -> int:
    if not duration or not math.isfinite(duration):
        return 1
    return max(1, math.floor(duration))


def hydrate(tasks: Sequence[Task]) -> list[Task]:
    return update_task_positions(tasks)


def _append(tasks: Sequence[Task], name: str, duration: int) -> list[Task]:
    next_id = max((t.id for t in tasks), default=-1) + 1
    deps = (tasks[-1].id,) if tasks else ()
    new = Task(next_id, name, duration, deps, Position())
    return update_task_positions([*tasks, new])


def add_task(tasks: Sequence[Task]) -> list[Task]:
    """Append an empty task depending on the current last task."""

    return _append(tasks, "", 1)


def add_task_from_template(tasks: Sequence[Task], template: TaskTemplate) -> list[Task]:
    return _append(tasks, template.name, _clamp_duration(template.duration))


def remove_task(tasks: Sequence[Task], task_id: int) -> list[Task]:
    kept = [
        replace(t, dependencies=tuple(d for d in t.dependencies if d != task_id))
        for t in tasks
        if t.id != task_id
    ]
    return update_task_positions(kept)


def update_name(tasks: Sequence[Task], task_id: int, name: str) -> list[Task]:
    return update_task_positions(
        [replace(t, name=name) if t.id == task_id else t for t in tasks]
    )


def update_duration(tasks: Sequence[Task], task_id: int, duration: float) -> list[Task]:
    d = _clamp_duration(duration)
    return update_task_positions(
        [replace(t, duration=d) if t.id == task_id else t for t in tasks]
    )


def add_dependency(tasks: Sequence[Task], task_id: int, dep_id: int) -> list[Task]:
    ids = {t.id for t in tasks}
    if task_id == dep_id or task_id not in ids or dep_id not in ids:
        return update_task_positions(tasks)
    # The edge would close a cycle if dep_id already (transitively) waits on task_id.
    if has_path(tasks, dep_id, task_id):
        return update_task_positions(tasks)

    out = []
    for t in tasks:
        if t.id == task_id and dep_id not in t.dependencies:
            t = replace(t, dependencies=(*t.dependencies, dep_id))
        out.append(t)
    return update_task_positions(out)


def remove_dependency(tasks: Sequence[Task], task_id: int, dep_id: int) -> list[Task]:
    return update_task_positions(
        [
            replace(t, dependencies=tuple(d for d in t.dependencies if d != dep_id))
            if t.id == task_id
            else t
            for t in tasks
        ]
    )
