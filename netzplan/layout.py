from __future__ import annotations

# Grid placement for the dependency graph.
#
# Columns follow dependency depth; a row only ever holds tasks that are
# transitively related, so no lane suggests a dependency that does not exist.

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from netzplan.graph import build_successors, topo_order
from netzplan.model import Position, Task

# Every dependency hop advances two columns; odd columns carry the arrows.
COLUMN_STEP = 2


def compute_ancestors(tasks: Sequence[Task]) -> dict[int, frozenset[int]]:
    """Transitive dependency ids per task.

    Ids on the active search path contribute nothing further, so cycles
    terminate without being resolved.
    """

    by_id = {t.id: t for t in tasks}
    memo: dict[int, frozenset[int]] = {}
    visiting: set[int] = set()

    def visit(tid: int) -> frozenset[int]:
        if tid in memo:
            return memo[tid]
        if tid in visiting:
            return frozenset()
        t = by_id.get(tid)
        if t is None:
            return frozenset()

        visiting.add(tid)
        acc: set[int] = set()
        for dep in t.dependencies:
            acc.add(dep)
            acc |= visit(dep)
        visiting.discard(tid)

        result = frozenset(acc)
        memo[tid] = result
        return result

    return {t.id: visit(t.id) for t in tasks}


def are_related(ancestors: dict[int, frozenset[int]], a: int, b: int) -> bool:
    return a in ancestors.get(b, frozenset()) or b in ancestors.get(a, frozenset())


def connected_components(tasks: Sequence[Task]) -> list[list[int]]:
    known = {t.id for t in tasks}
    succ = build_successors(tasks)

    adjacency: dict[int, set[int]] = {t.id: set() for t in tasks}
    for t in tasks:
        for dep in t.dependencies:
            if dep in known:
                adjacency[t.id].add(dep)
        for s in succ.get(t.id, ()):
            adjacency[t.id].add(s)

    seen: set[int] = set()
    components: list[list[int]] = []
    for t in tasks:
        if t.id in seen:
            continue
        seen.add(t.id)
        members = [t.id]
        q: deque[int] = deque([t.id])
        while q:
            cur = q.popleft()
            for nxt in adjacency[cur]:
                if nxt not in seen:
                    seen.add(nxt)
                    members.append(nxt)
                    q.append(nxt)
        components.append(sorted(members))

    by_id = {t.id: t for t in tasks}

    def _component_key(members: list[int]) -> int:
        roots = [
            m for m in members if not any(d in known for d in by_id[m].dependencies)
        ]
        # A component without roots is entirely cyclic.
        return min(roots) if roots else min(members)

    components.sort(key=_component_key)
    return components


@dataclass
class _Placement:
    occupied: set[tuple[int, int]] = field(default_factory=set)
    row_members: dict[int, list[int]] = field(default_factory=dict)
    positions: dict[int, Position] = field(default_factory=dict)

    def place(self, tid: int, pos: Position) -> None:
        self.occupied.add((pos.row, pos.col))
        self.row_members.setdefault(pos.row, []).append(tid)
        self.positions[tid] = pos


def _column_for(task: Task, placement: _Placement) -> int:
    if not task.dependencies:
        return 0
    # Unplaced dependencies (dangling, or under a cycle) count as column 0.
    cols = [
        placement.positions[d].col if d in placement.positions else 0
        for d in task.dependencies
    ]
    return min(cols) + COLUMN_STEP


def _row_for(
    tid: int,
    col: int,
    placement: _Placement,
    ancestors: dict[int, frozenset[int]],
) -> int:
    row = 0
    while True:
        if (row, col) not in placement.occupied and all(
            are_related(ancestors, tid, other)
            for other in placement.row_members.get(row, ())
        ):
            return row
        row += 1


def update_task_positions(tasks: Sequence[Task]) -> list[Task]:
    """Return a copy of `tasks` with every `position` recomputed."""

    snapshot = list(tasks)
    by_id = {t.id: t for t in snapshot}
    ancestors = compute_ancestors(snapshot)
    order = topo_order(snapshot)
    rank = {tid: i for i, tid in enumerate(order)}

    placement = _Placement()
    for members in connected_components(snapshot):
        for tid in sorted(members, key=rank.__getitem__):
            col = _column_for(by_id[tid], placement)
            row = _row_for(tid, col, placement, ancestors)
            placement.place(tid, Position(row=row, col=col))

    return [t.with_position(placement.positions[t.id]) for t in snapshot]


def grid_extent(tasks: Sequence[Task]) -> tuple[int, int]:
    """(rows, cols) needed to hold every task position."""

    if not tasks:
        return (0, 0)
    return (
        max(t.position.row for t in tasks) + 1,
        max(t.position.col for t in tasks) + 1,
    )
