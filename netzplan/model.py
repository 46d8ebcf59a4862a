from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class Position:
    row: int = 0
    col: int = 0

    @staticmethod
    def from_json(obj: dict[str, Any] | None) -> "Position":
        if not obj:
            return Position()
        return Position(row=int(obj.get("row", 0)), col=int(obj.get("col", 0)))

    def to_json(self) -> dict[str, int]:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class Task:
    id: int
    name: str
    duration: int
    dependencies: tuple[int, ...] = ()
    position: Position = field(default_factory=Position)

    @staticmethod
    def from_json(obj: dict[str, Any]) -> "Task":
        deps = obj.get("dependencies") or []
        if not isinstance(deps, (list, tuple)):
            raise TypeError("dependencies must be a list of task ids")
        return Task(
            id=int(obj["id"]),
            name=str(obj.get("name") or ""),
            duration=int(obj["duration"]),
            dependencies=tuple(int(d) for d in deps),
            position=Position.from_json(obj.get("position")),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "duration": self.duration,
            "dependencies": list(self.dependencies),
            "position": self.position.to_json(),
        }

    def with_position(self, position: Position) -> "Task":
        return replace(self, position=position)


@dataclass(frozen=True)
class ScheduledTask(Task):
    # Computed fields, always recomputed in full by the schedule engine.
    FAZ: int = 0
    FEZ: int = 0
    SAZ: int = 0
    SEZ: int = 0
    GP: int = 0
    FP: int = 0
    is_critical: bool = False

    def to_json(self) -> dict[str, Any]:
        out = super().to_json()
        out.update(
            {
                "FAZ": self.FAZ,
                "FEZ": self.FEZ,
                "SAZ": self.SAZ,
                "SEZ": self.SEZ,
                "GP": self.GP,
                "FP": self.FP,
                "isCritical": self.is_critical,
            }
        )
        return out


def parse_tasks(items: list[dict[str, Any]]) -> list[Task]:
    return [Task.from_json(item) for item in items]
