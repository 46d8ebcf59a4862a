from __future__ import annotations

# Critical Path Method: forward pass, backward pass, floats, critical marking.
#
# Every function is pure; intermediate results are id-keyed dicts.

import logging
from collections.abc import Sequence

from netzplan.graph import build_successors
from netzplan.model import ScheduledTask, Task
from netzplan.ordering import TopoOrdering, default_ordering
from netzplan.types import EarliestTimes, Floats, LatestTimes, Successors

logger = logging.getLogger(__name__)


def compute_earliest(tasks: Sequence[Task], order: Sequence[int]) -> EarliestTimes:
    FAZ: dict[int, int] = {}
    FEZ: dict[int, int] = {}

    by_id = {t.id: t for t in tasks}
    for tid in order:
        t = by_id.get(tid)
        if t is None:
            continue
        # Unknown (or, under a cycle, not yet computed) dependencies count as 0.
        dep_fez = [FEZ.get(d, 0) for d in t.dependencies]
        faz = max(dep_fez) if dep_fez else 0
        FAZ[tid] = faz
        FEZ[tid] = faz + t.duration
    return EarliestTimes(FAZ=FAZ, FEZ=FEZ)


def compute_latest(
    tasks: Sequence[Task],
    order: Sequence[int],
    successors: Successors,
    earliest: EarliestTimes,
) -> LatestTimes:
    SAZ: dict[int, int] = {}
    SEZ: dict[int, int] = {}

    by_id = {t.id: t for t in tasks}
    project_duration = max((earliest.FEZ.get(t.id, 0) for t in tasks), default=0)

    for tid in reversed(order):
        t = by_id.get(tid)
        if t is None:
            continue
        succs = successors.get(tid, [])
        if not succs:
            sez = project_duration
        else:
            # Successors without a latest start only occur under a cycle.
            saz_succ = [SAZ[s] for s in succs if s in SAZ]
            sez = min(saz_succ) if saz_succ else project_duration
        SEZ[tid] = sez
        SAZ[tid] = sez - t.duration

    return LatestTimes(SAZ=SAZ, SEZ=SEZ, project_duration=project_duration)


def compute_floats(
    tasks: Sequence[Task],
    successors: Successors,
    earliest: EarliestTimes,
    latest: LatestTimes,
) -> Floats:
    GP: dict[int, int] = {}
    FP: dict[int, int] = {}

    for t in tasks:
        fez = earliest.FEZ.get(t.id, 0)
        gp = latest.SEZ.get(t.id, 0) - fez
        GP[t.id] = gp

        succs = successors.get(t.id, [])
        if not succs:
            FP[t.id] = gp
        else:
            fp = min(earliest.FAZ.get(s, 0) - fez for s in succs)
            FP[t.id] = min(fp, gp)
    return Floats(GP=GP, FP=FP)


def mark_critical(tasks: Sequence[Task], floats: Floats) -> set[int]:
    return {t.id for t in tasks if floats.GP.get(t.id, 0) == 0}


def merge_schedule(
    tasks: Sequence[Task],
    earliest: EarliestTimes,
    latest: LatestTimes,
    floats: Floats,
    critical: set[int],
) -> list[ScheduledTask]:
    return [
        ScheduledTask(
            id=t.id,
            name=t.name,
            duration=t.duration,
            dependencies=tuple(t.dependencies),
            position=t.position,
            FAZ=earliest.FAZ.get(t.id, 0),
            FEZ=earliest.FEZ.get(t.id, 0),
            SAZ=latest.SAZ.get(t.id, 0),
            SEZ=latest.SEZ.get(t.id, 0),
            GP=floats.GP.get(t.id, 0),
            FP=floats.FP.get(t.id, 0),
            is_critical=t.id in critical,
        )
        for t in tasks
    ]


def calculate_schedule(
    tasks: Sequence[Task],
    *,
    ordering: TopoOrdering | None = None,
) -> list[ScheduledTask]:
    """Compute the full CPM schedule for `tasks`.

    Returns one `ScheduledTask` per input task, in input order. Computed fields
    already present on the input (e.g. a previous schedule) are ignored.
    """

    ordering = ordering or default_ordering()
    snapshot = list(tasks)

    known = {t.id for t in snapshot}
    dangling = sorted({d for t in snapshot for d in t.dependencies if d not in known})
    if dangling:
        logger.debug("ignoring unknown dependency ids %s", dangling)

    order = ordering.order(snapshot)
    succ = build_successors(snapshot)
    earliest = compute_earliest(snapshot, order)
    latest = compute_latest(snapshot, order, succ, earliest)
    floats = compute_floats(snapshot, succ, earliest, latest)
    critical = mark_critical(snapshot, floats)
    return merge_schedule(snapshot, earliest, latest, floats, critical)


def project_duration(scheduled: Sequence[ScheduledTask]) -> int:
    return max((t.FEZ for t in scheduled), default=0)
