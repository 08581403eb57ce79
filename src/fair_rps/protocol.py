from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Literal, Sequence

Outcome = Literal["player_win", "computer_win", "draw"]

EXIT_TOKEN: Final[str] = "0"
HELP_TOKEN: Final[str] = "?"


class InvalidMovesError(ValueError):
    pass


def validate_moves(values: Sequence[str]) -> tuple[str, ...]:
    moves = tuple(values)
    if len(moves) < 3:
        raise InvalidMovesError(f"expected at least 3 moves, got {len(moves)}")
    if len(moves) % 2 == 0:
        raise InvalidMovesError(f"expected an odd number of moves, got {len(moves)}")
    duplicates = sorted({m for m in moves if moves.count(m) > 1})
    if duplicates:
        raise InvalidMovesError("moves must not repeat: " + ", ".join(duplicates))
    return moves


@dataclass(frozen=True)
class MoveRelation:
    """Who-beats-whom for an odd-sized, ordered move list.

    Moves sit on a circle. The move at index i loses to the N // 2 moves
    that follow it and beats the N // 2 moves that precede it, wrapping
    around the ends. The window runs backwards from the move so that the
    names in their usual order, ``("rock", "paper", "scissors")``, give the
    classic game (rock beats scissors, paper beats rock). Counting the
    following moves as beaten would make rock beat paper. For five moves
    the usual rock-paper-scissors-lizard-Spock relation comes from
    ``("rock", "Spock", "paper", "lizard", "scissors")``.

    ``beats`` is also available as ``winners_of``: the moves a move defeats.

    The move list is assumed to be validated already (see ``validate_moves``).
    """

    moves: tuple[str, ...]
    _beats: dict[str, tuple[str, ...]] = field(init=False, repr=False, compare=False)
    _loses_to: dict[str, tuple[str, ...]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        moves = tuple(self.moves)
        n = len(moves)
        half = n // 2
        beats: dict[str, tuple[str, ...]] = {}
        loses_to: dict[str, tuple[str, ...]] = {}
        for i, move in enumerate(moves):
            beats[move] = tuple(moves[(i - k) % n] for k in range(half, 0, -1))
            loses_to[move] = tuple(moves[(i + k) % n] for k in range(1, half + 1))

        # frozen dataclass: assign the derived tables once.
        object.__setattr__(self, "moves", moves)
        object.__setattr__(self, "_beats", beats)
        object.__setattr__(self, "_loses_to", loses_to)

    def beats(self, move: str) -> tuple[str, ...]:
        return self._beats[move]

    winners_of = beats

    def loses_to(self, move: str) -> tuple[str, ...]:
        return self._loses_to[move]

    def resolve(self, player: str, computer: str) -> Outcome:
        if player == computer:
            return "draw"
        return "player_win" if computer in self._beats[player] else "computer_win"
