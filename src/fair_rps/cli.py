from __future__ import annotations

import argparse
import sys

from commit_reveal import EntropyError, verify_commitment
from protocol import InvalidMovesError, validate_moves
from session import GameSession

USAGE_EXAMPLE = "Example: fair-rps rock paper scissors (put -- first if a move starts with '-')"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fair-rps",
        description="Play a provably fair generalized rock-paper-scissors against the computer.",
        epilog="Moves that start with '-' go after '--', e.g. fair-rps -- -a b c",
    )
    parser.add_argument("moves", nargs="*", help="Odd number (>= 3) of distinct move names, in circle order")
    parser.add_argument(
        "--reroll",
        action="store_true",
        help="Commit to a new computer move after every round (default: one move per session)",
    )
    args = parser.parse_args(argv)

    try:
        moves = validate_moves(args.moves)
    except InvalidMovesError as exc:
        parser.print_usage(sys.stderr)
        print(f"Invalid arguments: {exc}.", file=sys.stderr)
        print("Please provide an odd number >= 3 of non-repeating strings.", file=sys.stderr)
        print(USAGE_EXAMPLE, file=sys.stderr)
        return 1

    session = GameSession(moves, reroll=args.reroll, prompt=input, echo=print)
    try:
        session.run()
    except EntropyError as exc:
        print(f"Cannot commit to a move: {exc}", file=sys.stderr)
        return 2
    return 0


def verify_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fair-rps-verify",
        description="Check a revealed key against the HMAC published before the round.",
    )
    parser.add_argument("--key", required=True, help="Revealed 'HMAC key' value")
    parser.add_argument("--move", required=True, help="Computer move shown after the round")
    parser.add_argument("--hmac", required=True, dest="digest", help="'HMAC' value published before the round")
    args = parser.parse_args(argv)

    if verify_commitment(expected_digest=args.digest, key=args.key, move=args.move):
        print("OK")
        return 0
    print("MISMATCH")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
