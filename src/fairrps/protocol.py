from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal, Sequence

from fairrps.errors import IndexOutOfRange, InvalidConfiguration, UnknownMove

Outcome = Literal["Win", "Lose", "Draw"]

MIN_MOVES = 3


@dataclass(frozen=True, init=False)
class MoveSet:
    """Ordered, unique move names. Each move beats the ``len // 2`` moves that
    precede it in circular order and loses to the ones that follow it."""

    names: tuple[str, ...]

    def __init__(self, names: Sequence[str]) -> None:
        names = tuple(names)
        if len(names) < MIN_MOVES or len(names) % 2 == 0:
            raise InvalidConfiguration(
                f"expected an odd number of moves (>= {MIN_MOVES}), got {len(names)}"
            )
        if len(set(names)) != len(names):
            dupes = sorted({n for n in names if names.count(n) > 1})
            raise InvalidConfiguration(f"duplicate moves: {', '.join(dupes)}")
        object.__setattr__(self, "names", names)

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def index_of(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise UnknownMove(name) from None

    def name_at(self, index: int) -> str:
        if not 0 <= index < len(self.names):
            raise IndexOutOfRange(f"move index {index} not in [0, {len(self.names)})")
        return self.names[index]

    def menu(self) -> list[tuple[int, str]]:
        return [(i + 1, name) for i, name in enumerate(self.names)]


def determine_outcome(human: int, computer: int, n: int) -> Outcome:
    """Outcome for the human, given both move indices in a set of ``n``."""
    for index in (human, computer):
        if not 0 <= index < n:
            raise IndexOutOfRange(f"move index {index} not in [0, {n})")

    if human == computer:
        return "Draw"
    return "Win" if (human - computer + n) % n <= n // 2 else "Lose"
