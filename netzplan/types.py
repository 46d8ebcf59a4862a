from __future__ import annotations

from dataclasses import dataclass

# Edge structure: task id -> ids of the tasks that depend on it.
Successors = dict[int, list[int]]

TimesRecord = dict[int, int]


@dataclass(frozen=True)
class EarliestTimes:
    FAZ: TimesRecord
    FEZ: TimesRecord


@dataclass(frozen=True)
class LatestTimes:
    SAZ: TimesRecord
    SEZ: TimesRecord
    project_duration: int


@dataclass(frozen=True)
class Floats:
    GP: TimesRecord
    FP: TimesRecord
