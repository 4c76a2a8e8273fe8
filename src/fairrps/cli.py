from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from fairrps.commit_reveal import verify_hmac
from fairrps.config import Settings
from fairrps.errors import InvalidConfiguration
from fairrps.protocol import MoveSet
from fairrps.session import (
    EXIT_TOKEN,
    HELP_TOKEN,
    GameSession,
    HelpRequested,
    Rejected,
    Resolution,
    SessionState,
)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, input_fn: Callable[[str], str] = input) -> int:
    parser = argparse.ArgumentParser(
        prog="fairrps",
        description="Rock-paper-scissors against the computer with a verifiable HMAC commitment.",
        epilog="Example: fairrps Rock Paper Scissors",
    )
    parser.add_argument("moves", nargs="*", metavar="MOVE", help="An odd number (>= 3) of unique moves")
    parser.add_argument("--key-bytes", type=int, default=None, help="HMAC key size in bytes (min 32)")
    parser.add_argument("--log-level", default=None, help="Logging level for diagnostics on stderr")
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env().with_overrides(key_bytes=args.key_bytes, log_level=args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    _configure_logging(settings)

    try:
        moves = MoveSet(args.moves)
    except InvalidConfiguration as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("Please provide an odd number of unique moves (>= 3), e.g. fairrps Rock Paper Scissors", file=sys.stderr)
        return 1

    session = GameSession(moves, key_bytes=settings.key_bytes)
    print(f"HMAC: {session.commit()}")
    print("Available moves:")
    for number, name in session.menu():
        print(f"{number} - {name}")
    print(f"{EXIT_TOKEN} - exit")
    print(f"{HELP_TOKEN} - help")

    try:
        choice = input_fn("Enter your move: ")
    except EOFError:
        print()
        choice = EXIT_TOKEN

    result = session.submit(choice)
    if isinstance(result, HelpRequested):
        print(result.table)
    elif isinstance(result, Rejected):
        if session.state is SessionState.ABORTED:
            print("Exiting without a move. Run again to play another round.")
        else:
            print("Invalid move. Run again to play another round.")
        logger.info("session ended without a result: %s", result.reason)
    elif isinstance(result, Resolution):
        _show_result(result)
    return 0


def verify_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fairrps-verify",
        description="Check that a revealed key and computer move match the HMAC shown before you played.",
    )
    parser.add_argument("--key", required=True, help="Revealed HMAC key (hex)")
    parser.add_argument("--move", required=True, help="Computer move as printed")
    parser.add_argument("--hmac", required=True, help="HMAC printed before you chose")
    args = parser.parse_args(argv)

    if verify_hmac(args.key, args.move, args.hmac):
        print("OK: the HMAC matches the revealed move and key.")
        return 0
    print("MISMATCH: the HMAC does not match the revealed move and key.")
    return 1


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _show_result(result: Resolution) -> None:
    print(f"Your move: {result.human_move}")
    print(f"Computer move: {result.computer_move}")
    print(f"You {result.outcome}!")
    print(f"HMAC key: {result.key}")


if __name__ == "__main__":
    raise SystemExit(main())
