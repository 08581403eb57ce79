from __future__ import annotations

import secrets
from typing import Callable, Literal, Sequence

from commit_reveal import Commitment, TokenBytes, commit
from help_table import build_help_table, format_help_table
from protocol import EXIT_TOKEN, HELP_TOKEN, MoveRelation, Outcome
from scoreboard import ScoreBoard

SessionState = Literal["awaiting_input", "resolving", "terminal"]

PROMPT = "Enter your move: "

_VERDICT: dict[Outcome, str] = {
    "draw": "It's a draw!",
    "player_win": "You win!",
    "computer_win": "You lose!",
}


class GameSession:
    """One interactive play loop against the computer.

    The computer's move is chosen and committed (``HMAC: ...``) before the
    first prompt. Each numeric answer is resolved against that move and the
    key is revealed so the player can recompute the HMAC. With ``reroll``
    the computer commits to a fresh move after every round; otherwise one
    commitment covers the whole session.
    """

    def __init__(
        self,
        moves: Sequence[str],
        *,
        prompt: Callable[[str], str] = input,
        echo: Callable[[str], None] = print,
        token_bytes: TokenBytes = secrets.token_bytes,
        choose: Callable[[Sequence[str]], str] = secrets.choice,
        reroll: bool = False,
    ) -> None:
        self.relation = MoveRelation(tuple(moves))
        self.scoreboard = ScoreBoard()
        self.state: SessionState = "awaiting_input"
        self.reroll = reroll
        self._prompt = prompt
        self._echo = echo
        self._token_bytes = token_bytes
        self._choose = choose
        self._commitment: Commitment | None = None

    @property
    def moves(self) -> tuple[str, ...]:
        return self.relation.moves

    def start(self) -> None:
        self._new_commitment()
        self.display_moves()

    def run(self) -> None:
        self.start()
        while self.state != "terminal":
            try:
                token = self._prompt(PROMPT)
            except (EOFError, KeyboardInterrupt):
                # Closed input or Ctrl+C counts as the exit command.
                self._echo("")
                token = EXIT_TOKEN
            self.handle(token)

    def handle(self, token: str) -> SessionState:
        if self.state == "terminal":
            return self.state

        if token == EXIT_TOKEN:
            if self.scoreboard.rounds:
                self._echo(self.scoreboard.format_table())
            self._echo("Goodbye!")
            self.state = "terminal"
            return self.state

        if token == HELP_TOKEN:
            self._echo("Help Table:")
            self._echo(format_help_table(build_help_table(self.relation)))
            return self.state

        index = _parse_index(token, len(self.moves))
        if index is None:
            self._echo("Invalid input. Please try again.")
            self.display_moves()
            return self.state

        self.state = "resolving"
        self._show_result(self.moves[index])
        if self.reroll:
            self._new_commitment()
        self.state = "awaiting_input"
        return self.state

    def display_moves(self) -> None:
        self._echo("Available moves:")
        for number, move in enumerate(self.moves, start=1):
            self._echo(f"{number} - {move}")
        self._echo(f"{EXIT_TOKEN} - exit")
        self._echo(f"{HELP_TOKEN} - help")

    def _show_result(self, player_move: str) -> None:
        commitment = self._current()
        outcome = self.relation.resolve(player_move, commitment.move)
        self.scoreboard.record(outcome)
        self._echo(f"Your move: {player_move}")
        self._echo(f"Computer move: {commitment.move}")
        self._echo(_VERDICT[outcome])
        self._echo(f"HMAC key: {commitment.reveal()}")

    def _new_commitment(self) -> None:
        move = self._choose(self.moves)
        self._commitment = commit(move, token_bytes=self._token_bytes)
        self._echo(f"HMAC: {self._commitment.digest}")

    def _current(self) -> Commitment:
        if self._commitment is None:
            raise RuntimeError("session not started")
        return self._commitment


def _parse_index(token: str, count: int) -> int | None:
    if not (token.isascii() and token.isdigit()):
        return None
    number = int(token)
    if not 1 <= number <= count:
        return None
    return number - 1
