"""Move record produced by the generator."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MoveKind


@dataclass(frozen=True, slots=True)
class MoveRecord:
    square: str
    kind: MoveKind = MoveKind.MOVE

    @property
    def is_capture(self) -> bool:
        return self.kind is MoveKind.CAPTURE

    def to_dict(self) -> dict[str, str]:
        return {"square": self.square, "kind": self.kind.value}

    def __str__(self) -> str:
        return f"{self.square} {self.kind.value}"
