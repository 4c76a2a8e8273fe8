from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Union

from fairrps.commit_reveal import MIN_KEY_BYTES, Commitment, EntropySource, SystemEntropy
from fairrps.errors import InvalidInput, SessionStateError
from fairrps.protocol import MoveSet, Outcome, determine_outcome
from fairrps.table import build_table, format_table

logger = logging.getLogger(__name__)

HELP_TOKEN = "?"
EXIT_TOKEN = "0"
LEADING_INT = re.compile(r"[+-]?[0-9]+")


class SessionState(enum.Enum):
    INITIALIZED = "initialized"
    COMMITTED = "committed"
    AWAITING_INPUT = "awaiting_input"
    RESOLVED = "resolved"
    HELP_REQUESTED = "help_requested"
    INVALID = "invalid"
    ABORTED = "aborted"


TERMINAL_STATES = frozenset(
    {
        SessionState.RESOLVED,
        SessionState.HELP_REQUESTED,
        SessionState.INVALID,
        SessionState.ABORTED,
    }
)


@dataclass(frozen=True)
class Resolution:
    human_move: str
    computer_move: str
    outcome: Outcome
    key: str
    hmac: str


@dataclass(frozen=True)
class HelpRequested:
    grid: list[list[str]]
    table: str


@dataclass(frozen=True)
class Rejected:
    token: str
    error: InvalidInput

    @property
    def reason(self) -> str:
        return str(self.error)


SessionResult = Union[Resolution, HelpRequested, Rejected]


class GameSession:
    """One round against the computer.

    The computer's move is committed (HMAC published) before the human is asked
    for input; the key is only handed out in a :class:`Resolution`.
    """

    def __init__(
        self,
        moves: MoveSet,
        *,
        entropy: EntropySource | None = None,
        key_bytes: int = MIN_KEY_BYTES,
    ) -> None:
        self.moves = moves
        self._entropy = entropy or SystemEntropy()
        self._key_bytes = key_bytes
        self._commitment: Commitment | None = None
        self._state = SessionState.INITIALIZED

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_terminal(self) -> bool:
        return self._state in TERMINAL_STATES

    @property
    def hmac(self) -> str:
        if self._commitment is None:
            raise SessionStateError("no commitment yet; call commit() first")
        return self._commitment.digest

    def commit(self) -> str:
        """Pick the computer's move and return the HMAC to show the human."""
        self._expect(SessionState.INITIALIZED)
        index = self._entropy.randbelow(len(self.moves))
        commitment = Commitment.create(
            self.moves.name_at(index), entropy=self._entropy, num_bytes=self._key_bytes
        )
        self._commitment = commitment
        self._transition(SessionState.COMMITTED)
        logger.debug("committed to computer move, hmac=%s", commitment.digest)
        return commitment.digest

    def menu(self) -> list[tuple[int, str]]:
        if self._state is SessionState.COMMITTED:
            self._transition(SessionState.AWAITING_INPUT)
        self._expect(SessionState.AWAITING_INPUT)
        return self.moves.menu()

    def submit(self, token: str) -> SessionResult:
        if self._state is SessionState.COMMITTED:
            self._transition(SessionState.AWAITING_INPUT)
        self._expect(SessionState.AWAITING_INPUT)

        choice = token.strip()
        if choice == HELP_TOKEN:
            self._transition(SessionState.HELP_REQUESTED)
            grid = build_table(self.moves)
            return HelpRequested(grid=grid, table=format_table(grid))

        if choice == EXIT_TOKEN:
            self._transition(SessionState.ABORTED)
            return Rejected(token=token, error=InvalidInput("exit requested"))

        index = self._parse_choice(choice)
        if index is None:
            self._transition(SessionState.INVALID)
            return Rejected(
                token=token,
                error=InvalidInput(f"expected a number from 1 to {len(self.moves)}, got {token!r}"),
            )

        commitment = self._commitment
        if commitment is None:
            raise SessionStateError("no commitment to resolve against")
        computer = self.moves.index_of(commitment.move)
        outcome = determine_outcome(index, computer, len(self.moves))
        self._transition(SessionState.RESOLVED)
        return Resolution(
            human_move=self.moves.name_at(index),
            computer_move=commitment.move,
            outcome=outcome,
            key=commitment.key,
            hmac=commitment.digest,
        )

    def _parse_choice(self, choice: str) -> int | None:
        # Leading integer; trailing text is ignored, so "2.0" and "2 apples" are move 2.
        match = LEADING_INT.match(choice)
        if match is None:
            return None
        number = int(match.group())
        if not 1 <= number <= len(self.moves):
            return None
        return number - 1

    def _expect(self, state: SessionState) -> None:
        if self._state is not state:
            raise SessionStateError(f"session is {self._state.value}, expected {state.value}")

    def _transition(self, state: SessionState) -> None:
        logger.debug("session %s -> %s", self._state.value, state.value)
        self._state = state
