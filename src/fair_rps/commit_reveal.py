from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass, field
from typing import Callable, Final

KEY_BYTES: Final[int] = 32

TokenBytes = Callable[[int], bytes]


class EntropyError(RuntimeError):
    pass


def generate_key(num_bytes: int = KEY_BYTES, *, token_bytes: TokenBytes = secrets.token_bytes) -> str:
    if num_bytes < KEY_BYTES:
        raise ValueError(f"key must be at least {KEY_BYTES} bytes, got {num_bytes}")
    try:
        raw = token_bytes(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise EntropyError(f"secure random source unavailable: {exc}") from exc
    if len(raw) != num_bytes:
        raise EntropyError(f"random source returned {len(raw)} bytes, expected {num_bytes}")
    return raw.hex()


def compute_hmac(key: str, move: str) -> str:
    # The published hex text is the HMAC key, so the reveal can be checked
    # with any HMAC-SHA256 tool by pasting it in as-is.
    return hmac.new(key.encode("utf-8"), move.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_commitment(*, expected_digest: str, key: str, move: str) -> bool:
    # compare_digest only accepts ASCII str, so compare the encoded bytes.
    return hmac.compare_digest(
        expected_digest.lower().encode("utf-8"),
        compute_hmac(key, move).encode("utf-8"),
    )


@dataclass(frozen=True)
class Commitment:
    move: str = field(repr=False)
    digest: str
    _key: str = field(repr=False)

    def reveal(self) -> str:
        return self._key


def commit(move: str, *, token_bytes: TokenBytes = secrets.token_bytes) -> Commitment:
    key = generate_key(token_bytes=token_bytes)
    return Commitment(move=move, digest=compute_hmac(key, move), _key=key)
