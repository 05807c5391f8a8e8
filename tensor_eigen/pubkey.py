"""Solana public keys, base58 encoding and program-derived addresses."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Iterable

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}

PUBKEY_LENGTH = 32
MAX_SEEDS = 16
MAX_SEED_LENGTH = 32
_PDA_MARKER = b"ProgramDerivedAddress"

# Edwards25519 field prime and curve constant d.
_P = 2**255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P


class PubkeyError(ValueError):
    """Raised for malformed keys, bad seeds or failed address derivation."""


def b58encode(data: bytes) -> str:
    """Encode bytes as base58 text using the Bitcoin alphabet."""
    data = bytes(data)
    stripped = data.lstrip(b"\0")
    leading_zeros = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    chars = []
    while number:
        number, remainder = divmod(number, 58)
        chars.append(_ALPHABET[remainder])
    return "1" * leading_zeros + "".join(reversed(chars))


def b58decode(text: str) -> bytes:
    """Decode base58 text into bytes."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise PubkeyError(f"invalid base58 character {char!r}") from None
    leading_zeros = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\0" * leading_zeros + body


@dataclass(frozen=True)
class Pubkey:
    """A 32-byte Solana address."""

    key: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.key)
        if len(raw) != PUBKEY_LENGTH:
            raise PubkeyError(
                f"public key must be {PUBKEY_LENGTH} bytes, got {len(raw)}"
            )
        object.__setattr__(self, "key", raw)

    @classmethod
    def from_string(cls, text: str) -> "Pubkey":
        """Parse a base58 encoded address."""
        raw = b58decode(text)
        if len(raw) != PUBKEY_LENGTH:
            raise PubkeyError(f"invalid public key length for {text!r}")
        return cls(raw)

    def __bytes__(self) -> bytes:
        return self.key

    def __str__(self) -> str:
        return b58encode(self.key)

    def __repr__(self) -> str:
        return f"Pubkey('{self}')"


def is_on_curve(data: bytes) -> bool:
    """Tell whether 32 bytes decompress to a point on the ed25519 curve."""
    data = bytes(data)
    if len(data) != PUBKEY_LENGTH:
        return False
    y = (int.from_bytes(data, "little") & ((1 << 255) - 1)) % _P
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    ratio = u * pow(v, _P - 2, _P) % _P
    return ratio == 0 or pow(ratio, (_P - 1) // 2, _P) == 1


def _check_seeds(seeds: list[bytes], limit: int) -> None:
    if len(seeds) > limit:
        raise PubkeyError("max seed length exceeded")
    if any(len(seed) > MAX_SEED_LENGTH for seed in seeds):
        raise PubkeyError("max seed length exceeded")


def create_program_address(seeds: Iterable[bytes], program_id: Pubkey) -> Pubkey:
    """Derive a program address from seeds; raise if it lands on the curve."""
    seeds = [bytes(seed) for seed in seeds]
    _check_seeds(seeds, MAX_SEEDS)
    hasher = hashlib.sha256()
    for seed in seeds:
        hasher.update(seed)
    hasher.update(bytes(program_id))
    hasher.update(_PDA_MARKER)
    digest = hasher.digest()
    if is_on_curve(digest):
        raise PubkeyError("Invalid seeds, address must fall off the curve")
    return Pubkey(digest)


def find_program_address(
    seeds: Iterable[bytes], program_id: Pubkey
) -> tuple[Pubkey, int]:
    """Find the first off-curve program address, trying bumps from 255 down."""
    seeds = [bytes(seed) for seed in seeds]
    _check_seeds(seeds, MAX_SEEDS - 1)
    for bump in range(255, -1, -1):
        try:
            return create_program_address([*seeds, bytes([bump])], program_id), bump
        except PubkeyError:
            continue
    raise PubkeyError("Unable to find a viable program address bump seed")


SYSTEM_PROGRAM_ID = Pubkey(bytes(PUBKEY_LENGTH))

TOKEN_PROGRAM_IDS = (
    Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"),
    Pubkey.from_string("TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"),
)