"""Anchor account and instruction discriminators."""

from __future__ import annotations

import hashlib
from enum import Enum


class DiscriminatorError(ValueError):
    """Raised when account data does not carry the expected discriminator."""


class DiscriminatorKind(Enum):
    """Kind of Anchor discriminator; the value is the hash prefix."""

    ACCOUNT = "account"
    INSTRUCTION = "global"

    @classmethod
    def parse(cls, text: str) -> "DiscriminatorKind":
        """Parse a kind name or one of its short aliases."""
        lowered = text.lower()
        if lowered in ("account", "acc", "a"):
            return cls.ACCOUNT
        if lowered in ("instruction", "ix", "i"):
            return cls.INSTRUCTION
        raise ValueError(f"Invalid discriminator kind: {text}")


def _kind(kind: DiscriminatorKind | str) -> DiscriminatorKind:
    return kind if isinstance(kind, DiscriminatorKind) else DiscriminatorKind.parse(kind)


def anchor_discriminator(kind: DiscriminatorKind | str, name: str) -> bytes:
    """Return the first eight bytes of sha256("<prefix>:<name>")."""
    prefix = _kind(kind).value
    return hashlib.sha256(f"{prefix}:{name}".encode()).digest()[:8]


def check_discriminator(data: bytes, name: str) -> bytes:
    """Verify that data starts with the account discriminator for name."""
    data = bytes(data)
    if len(data) < 8:
        raise DiscriminatorError("Data too short")
    if data[:8] != anchor_discriminator(DiscriminatorKind.ACCOUNT, name):
        raise DiscriminatorError("Invalid discriminator for type")
    return data


def format_discriminator(kind: DiscriminatorKind | str, name: str) -> str:
    """Render a discriminator as a byte list and as hex."""
    disc = anchor_discriminator(kind, name)
    byte_list = ", ".join(str(b) for b in disc)
    return (
        f"Discriminator (bytes):   [{byte_list}]\n"
        f"Discriminator (hex)  :   0x{disc.hex()}"
    )