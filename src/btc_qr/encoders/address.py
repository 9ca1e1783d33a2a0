"""Bitcoin address surface checks.

Only the outer shape is tested: prefix, alphabet and length. No Base58Check
or Bech32 checksum is verified.
"""

from __future__ import annotations

import re

# Base58 alphabet excludes 0, O, I and l.
_LEGACY = re.compile(r"^[13][a-km-zA-HJ-NP-Z1-9]{25,34}$")
_BECH32_MAINNET = re.compile(r"^bc1[a-z0-9]{39,87}$", re.IGNORECASE | re.ASCII)
_BECH32_TESTNET = re.compile(r"^tb1[a-z0-9]{39,87}$", re.IGNORECASE | re.ASCII)

_ADDRESS_PATTERNS = (_LEGACY, _BECH32_MAINNET, _BECH32_TESTNET)


def validate_address(address: str) -> bool:
    """Check if the trimmed *address* looks like a legacy or Bech32 address."""
    candidate = address.strip()
    return any(p.match(candidate) for p in _ADDRESS_PATTERNS)
