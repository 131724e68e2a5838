# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pure input checks for whitelist requests.

Nothing in this module holds state or touches the filesystem. Checks that
need the current whitelist (already present / not present) belong to the
controller.

Check order for ``validate_accounts``:
    1. non-empty          -> ERROR_EMPTY_ENTRY
    2. well-formed        -> ERROR_INVALID_ENTRY
    3. no repeats         -> ERROR_DUPLICATED_ENTRY
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from permissioning.constants import ACCOUNT_BYTES_SIZE, HEX_PREFIX
from permissioning.enums import EnumWhitelistOperationResult

# bytes.fromhex tolerates whitespace between byte pairs, so the digits are
# checked separately before decoding.
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


def decode_account(account: str) -> bytes:
    """Decode a ``0x``-prefixed account identifier into raw bytes.

    Args:
        account: Hex-encoded account, e.g. ``"0x" + 40 hex digits``.

    Returns:
        The decoded identifier bytes.

    Raises:
        ValueError: If the prefix is missing, the digits are not hex, the
            digit count is odd, or the result is not 20 bytes long.
    """
    if not account.startswith(HEX_PREFIX):
        raise ValueError(f"Account '{account}' must start with '{HEX_PREFIX}'")

    digits = account[len(HEX_PREFIX) :]
    if not _HEX_DIGITS.fullmatch(digits):
        raise ValueError(f"Account '{account}' contains non-hex characters")
    if len(digits) % 2:
        raise ValueError(f"Account '{account}' has an odd number of hex digits")

    raw = bytes.fromhex(digits)
    if len(raw) != ACCOUNT_BYTES_SIZE:
        raise ValueError(
            f"Account '{account}' is {len(raw)} bytes, expected {ACCOUNT_BYTES_SIZE}"
        )
    return raw


def is_valid_account(account: object) -> bool:
    """Return True if ``account`` is a well-formed account identifier."""
    if not isinstance(account, str):
        return False
    try:
        decode_account(account)
    except ValueError:
        return False
    return True


def has_duplicates(values: Iterable[str]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[str] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def validate_accounts(
    accounts: Sequence[str] | None,
) -> EnumWhitelistOperationResult:
    """Check a batch of accounts before it reaches the whitelist.

    Args:
        accounts: Candidate account identifiers.

    Returns:
        SUCCESS, or the first failing check's result.
    """
    if not accounts:
        return EnumWhitelistOperationResult.ERROR_EMPTY_ENTRY

    if not all(is_valid_account(account) for account in accounts):
        return EnumWhitelistOperationResult.ERROR_INVALID_ENTRY

    if has_duplicates(accounts):
        return EnumWhitelistOperationResult.ERROR_DUPLICATED_ENTRY

    return EnumWhitelistOperationResult.SUCCESS


__all__ = [
    "decode_account",
    "has_duplicates",
    "is_valid_account",
    "validate_accounts",
]
