from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))


class FixedEntropy:
    """Deterministic stand-in for the system CSPRNG."""

    def __init__(self, move_index: int = 0, key_byte: int = 0xAB) -> None:
        self.move_index = move_index
        self.key_byte = key_byte

    def token_bytes(self, num_bytes: int) -> bytes:
        return bytes([self.key_byte]) * num_bytes

    def randbelow(self, upper: int) -> int:
        return self.move_index % upper


@pytest.fixture
def fixed_entropy():
    return FixedEntropy
