"""Account address helpers.

Addresses identify principals (people, organisations, the gateway). The
registry treats them as opaque strings supplied by a trusted boundary
layer; the only interpretation it applies is detecting the null address.
"""

from __future__ import annotations

from typing import Final

Address = str

ZERO_ADDRESS: Final[Address] = "0x" + "0" * 40


def is_null_address(address: Address | None) -> bool:
    """Return True for a missing, blank or all-zero address."""
    if address is None:
        return True
    stripped = address.strip()
    if not stripped:
        return True
    return stripped.lower() == ZERO_ADDRESS
