from __future__ import annotations

# Id-keyed graph primitives shared by the schedule and layout engines.
#
# Edges are stored as id values only; no record references another record.

from collections import deque
from collections.abc import Sequence

from netzplan.model import Task
from netzplan.types import Successors


def build_successors(tasks: Sequence[Task]) -> Successors:
    succ: Successors = {}
    for t in tasks:
        succ.setdefault(t.id, [])
    for t in tasks:
        for dep_id in t.dependencies:
            # Dangling dependency ids get a synthetic entry.
            succ.setdefault(dep_id, []).append(t.id)
    return succ


def _drain(tasks: Sequence[Task]) -> list[int]:
    """Kahn's algorithm; returns only the ids that reach zero in-degree."""

    known = {t.id for t in tasks}
    indeg: dict[int, int] = {
        t.id: sum(1 for d in t.dependencies if d in known) for t in tasks
    }
    succ = build_successors(tasks)

    # Ties are broken by input order (stable FIFO).
    q: deque[int] = deque(t.id for t in tasks if indeg[t.id] == 0)
    order: list[int] = []
    while q:
        tid = q.popleft()
        order.append(tid)
        for s in succ.get(tid, ()):
            indeg[s] = indeg.get(s, 0) - 1
            if indeg[s] == 0:
                q.append(s)
    return order


def topo_order(tasks: Sequence[Task]) -> list[int]:
    order = _drain(tasks)
    if len(order) != len(tasks):
        emitted = set(order)
        order.extend(t.id for t in tasks if t.id not in emitted)
    return order


def find_cycle_members(tasks: Sequence[Task]) -> list[int]:
    """Ids that can never be emitted by a topological sort, in input order.

    This includes tasks on a cycle and every task downstream of one.
    """

    emitted = set(_drain(tasks))
    return [t.id for t in tasks if t.id not in emitted]


def has_path(tasks: Sequence[Task], from_id: int, to_id: int) -> bool:
    """True if `to_id` is reachable from `from_id` along dependency edges."""

    by_id = {t.id: t for t in tasks}
    visited: set[int] = set()
    stack = [from_id]
    while stack:
        cur = stack.pop()
        if cur == to_id:
            return True
        if cur in visited:
            continue
        visited.add(cur)
        node = by_id.get(cur)
        if node is None:
            continue
        stack.extend(node.dependencies)
    return False
