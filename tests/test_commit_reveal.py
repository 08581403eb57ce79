from __future__ import annotations

import hashlib
import hmac
import re
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "fair_rps"
sys.path.insert(0, str(APP_DIR))

from commit_reveal import (  # type: ignore[import-not-found]  # noqa: E402
    KEY_BYTES,
    EntropyError,
    commit,
    compute_hmac,
    generate_key,
    verify_commitment,
)


def _fixed_bytes(n: int) -> bytes:
    return bytes(range(n))


def test_generate_key_is_256_bit_lowercase_hex() -> None:
    key = generate_key()
    assert re.fullmatch(r"[0-9a-f]{64}", key)
    assert KEY_BYTES == 32


def test_generate_key_rejects_short_keys() -> None:
    with pytest.raises(ValueError):
        generate_key(16)


def test_entropy_failure_is_reported() -> None:
    def broken(n: int) -> bytes:
        raise OSError("no randomness")

    with pytest.raises(EntropyError, match="no randomness"):
        generate_key(token_bytes=broken)
    with pytest.raises(EntropyError):
        commit("rock", token_bytes=broken)


def test_short_read_from_random_source_is_an_entropy_failure() -> None:
    with pytest.raises(EntropyError):
        generate_key(token_bytes=lambda n: b"\x00")


def test_compute_hmac_matches_hmac_sha256_over_hex_key() -> None:
    key = _fixed_bytes(32).hex()
    expected = hmac.new(key.encode("utf-8"), b"paper", hashlib.sha256).hexdigest()
    assert compute_hmac(key, "paper") == expected
    assert re.fullmatch(r"[0-9a-f]{64}", expected)


def test_commit_then_reveal_reproduces_digest() -> None:
    c = commit("lizard", token_bytes=_fixed_bytes)
    key = c.reveal()
    assert key == _fixed_bytes(32).hex()
    assert compute_hmac(key, "lizard") == c.digest
    assert verify_commitment(expected_digest=c.digest, key=key, move="lizard")


def test_verify_commitment_detects_substitution() -> None:
    c = commit("rock", token_bytes=_fixed_bytes)
    assert not verify_commitment(expected_digest=c.digest, key=c.reveal(), move="paper")
    assert not verify_commitment(expected_digest=c.digest, key=generate_key(), move="rock")
    assert verify_commitment(expected_digest=c.digest.upper(), key=c.reveal(), move="rock")


def test_verify_commitment_rejects_non_ascii_digest() -> None:
    c = commit("rock", token_bytes=_fixed_bytes)
    assert not verify_commitment(expected_digest="é" * 64, key=c.reveal(), move="rock")
    assert verify_commitment(expected_digest=c.digest, key=c.reveal(), move="rock")


def test_commitment_repr_hides_key_and_move() -> None:
    c = commit("scissors", token_bytes=_fixed_bytes)
    text = repr(c)
    assert c.reveal() not in text
    assert "scissors" not in text
    assert c.digest in text


def test_fresh_commitments_use_fresh_keys() -> None:
    first, second = commit("rock"), commit("rock")
    assert first.reveal() != second.reveal()
    assert first.digest != second.digest
