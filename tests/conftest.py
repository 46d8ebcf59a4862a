from __future__ import annotations

import pytest

from netzplan.model import Task


@pytest.fixture
def five_tasks() -> list[Task]:
    return [
        Task(0, "A", 2, ()),
        Task(1, "B", 4, (0,)),
        Task(2, "C", 4, (1,)),
        Task(3, "D", 2, (1,)),
        Task(4, "E", 4, (2, 3)),
    ]
