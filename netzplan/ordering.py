from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from netzplan.graph import find_cycle_members, topo_order
from netzplan.model import Task

logger = logging.getLogger(__name__)


class CycleError(ValueError):
    def __init__(self, task_ids: Sequence[int]) -> None:
        self.task_ids = tuple(task_ids)
        super().__init__(
            "Dependency cycle detected involving tasks: "
            + ", ".join(str(i) for i in self.task_ids)
        )


class TopoOrdering(Protocol):
    def order(self, tasks: Sequence[Task]) -> list[int]:
        raise NotImplementedError


@dataclass(frozen=True)
class FallbackTopoOrdering:
    """Kahn order; undrainable ids are appended in input order.

    Timing computed for the appended ids is best-effort only.
    """

    def order(self, tasks: Sequence[Task]) -> list[int]:
        order = topo_order(tasks)
        if logger.isEnabledFor(logging.WARNING):
            cyclic = find_cycle_members(tasks)
            if cyclic:
                logger.warning(
                    "dependency cycle: appending tasks %s in input order", cyclic
                )
        return order


@dataclass(frozen=True)
class StrictTopoOrdering:
    def order(self, tasks: Sequence[Task]) -> list[int]:
        cyclic = find_cycle_members(tasks)
        if cyclic:
            raise CycleError(cyclic)
        return topo_order(tasks)


def default_ordering() -> TopoOrdering:
    return FallbackTopoOrdering()
