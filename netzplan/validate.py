from __future__ import annotations

from collections.abc import Sequence

from netzplan.graph import find_cycle_members
from netzplan.model import Task


class TaskValidationError(ValueError):
    pass


def validate_tasks(tasks: Sequence[Task]) -> None:
    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise TaskValidationError(f"duplicate task id {t.id}")
        seen.add(t.id)

    for t in tasks:
        if t.duration < 1:
            raise TaskValidationError(
                f"task {t.id} duration must be >= 1 (got {t.duration})"
            )
        for dep in t.dependencies:
            if dep == t.id:
                raise TaskValidationError(f"task {t.id} depends on itself")
            if dep not in seen:
                raise TaskValidationError(
                    f"task {t.id} references unknown dependency {dep}"
                )

    cyclic = find_cycle_members(tasks)
    if cyclic:
        raise TaskValidationError(
            "dependency cycle detected involving tasks "
            + ", ".join(str(i) for i in cyclic)
        )
