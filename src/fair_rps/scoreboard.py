from __future__ import annotations

from dataclasses import dataclass

from protocol import Outcome


@dataclass
class ScoreBoard:
    """Outcome counts for one play session. Kept in memory only."""

    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def rounds(self) -> int:
        return self.wins + self.losses + self.draws

    def record(self, outcome: Outcome) -> None:
        if outcome == "player_win":
            self.wins += 1
        elif outcome == "computer_win":
            self.losses += 1
        else:
            self.draws += 1

    def format_table(self) -> str:
        if not self.rounds:
            return "(no rounds played)"

        lines: list[str] = []
        header = f"{'rounds':>6}  {'wins':>4}  {'losses':>6}  {'draws':>5}"
        lines.append(header)
        lines.append("-" * len(header))
        lines.append(f"{self.rounds:>6}  {self.wins:>4}  {self.losses:>6}  {self.draws:>5}")
        return "\n".join(lines)
