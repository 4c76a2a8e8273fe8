from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from typing import Final, Protocol

MIN_KEY_BYTES: Final[int] = 32


class EntropySource(Protocol):
    def token_bytes(self, num_bytes: int) -> bytes: ...

    def randbelow(self, upper: int) -> int: ...


class SystemEntropy:
    """Operating-system CSPRNG, via :mod:`secrets`."""

    def token_bytes(self, num_bytes: int) -> bytes:
        return secrets.token_bytes(num_bytes)

    def randbelow(self, upper: int) -> int:
        return secrets.randbelow(upper)


def generate_key(num_bytes: int = MIN_KEY_BYTES, entropy: EntropySource | None = None) -> str:
    # Hex rather than base64 so the revealed key is easy to paste into other HMAC tools.
    if num_bytes < MIN_KEY_BYTES:
        raise ValueError(f"key must be at least {MIN_KEY_BYTES} bytes, got {num_bytes}")
    source = entropy or SystemEntropy()
    return source.token_bytes(num_bytes).hex()


def compute_hmac(key: str, message: str) -> str:
    return hmac.new(bytes.fromhex(key), message.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_hmac(key: str, message: str, digest: str) -> bool:
    digest = digest.strip().lower()
    if not digest.isascii():
        return False
    try:
        computed = compute_hmac(key, message)
    except ValueError:
        return False
    return secrets.compare_digest(digest, computed)


@dataclass(frozen=True)
class Commitment:
    move: str
    key: str
    digest: str

    @classmethod
    def create(
        cls,
        move: str,
        *,
        entropy: EntropySource | None = None,
        num_bytes: int = MIN_KEY_BYTES,
    ) -> "Commitment":
        key = generate_key(num_bytes, entropy)
        return cls(move=move, key=key, digest=compute_hmac(key, move))

    def verify(self) -> bool:
        return verify_hmac(self.key, self.move, self.digest)
