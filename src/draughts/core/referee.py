"""Referee — violation tracking for the interactive input loop.

One Referee instance per game. Every rejected input is recorded against
the player who typed it. There is no retry limit, and the report is shown
when the game ends.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum


class ViolationKind(Enum):
    MALFORMED_SQUARE = "malformed_square"
    NOT_YOUR_PIECE = "not_your_piece"
    MISSED_CAPTURE = "missed_capture"
    ILLEGAL_MOVE = "illegal_move"


@dataclass
class _ViolationRecord:
    kind: ViolationKind
    details: str


class Referee:
    """Tracks rejected inputs per player for a single game."""

    def __init__(self) -> None:
        self._violations: dict[str, list[_ViolationRecord]] = defaultdict(list)

    def record_violation(
        self, player: str, kind: ViolationKind, details: str
    ) -> None:
        self._violations[player].append(_ViolationRecord(kind=kind, details=details))

    def total(self, player: str) -> int:
        return len(self._violations.get(player, []))

    def get_report(self) -> dict:
        report = {}
        for player, violations in self._violations.items():
            counts: dict = {"total_violations": len(violations)}
            for kind in ViolationKind:
                counts[kind.value] = 0
            for v in violations:
                counts[v.kind.value] += 1
            counts["last_violation"] = violations[-1].details
            report[player] = counts
        return report
