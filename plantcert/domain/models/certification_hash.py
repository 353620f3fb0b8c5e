"""Final certification hash value helpers.

A certification hash is a 32-byte digest recorded when equipment is
approved. The all-zero digest means "no hash recorded" and is never a
valid certification anchor.
"""

from __future__ import annotations

import hmac
from typing import Final

HASH_SIZE: Final[int] = 32

ZERO_HASH: Final[bytes] = bytes(HASH_SIZE)


def is_zero_hash(value: bytes) -> bool:
    """Return True if the value is the all-zero digest."""
    return value == ZERO_HASH


def validate_hash(value: bytes) -> bytes:
    """Ensure a certification hash is exactly 32 bytes.

    Raises:
        ValueError: If the value is not bytes of the expected size.
    """
    if not isinstance(value, (bytes, bytearray)) or len(value) != HASH_SIZE:
        size = len(value) if isinstance(value, (bytes, bytearray)) else "N/A"
        raise ValueError(
            f"Certification hash must be {HASH_SIZE} bytes, got {size}"
        )
    return bytes(value)


def hashes_match(stored: bytes, candidate: bytes) -> bool:
    """Constant-time comparison of two digests."""
    return hmac.compare_digest(stored, candidate)


def hash_to_hex(value: bytes) -> str:
    """Render a 32-byte hash as a 0x-prefixed lowercase hex string.

    Example:
        >>> hash_to_hex(ZERO_HASH)
        '0x0000000000000000000000000000000000000000000000000000000000000000'
    """
    return "0x" + validate_hash(value).hex()


def hash_from_hex(text: str) -> bytes:
    """Parse a hex string (with or without 0x prefix) into a 32-byte hash.

    Raises:
        ValueError: If the text is not valid hex or has the wrong length.
    """
    digits = text[2:] if text.lower().startswith("0x") else text
    return validate_hash(bytes.fromhex(digits))
