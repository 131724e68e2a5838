# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""EnumWhitelistOperationResult - outcome of a whitelist mutation attempt."""

from __future__ import annotations

from enum import Enum


class EnumWhitelistOperationResult(str, Enum):
    """Outcome of an add/remove request against a whitelist.

    Closed set: every mutation returns exactly one of these members.
    """

    SUCCESS = "SUCCESS"
    """The change was applied in memory and confirmed on disk."""

    ERROR_EMPTY_ENTRY = "ERROR_EMPTY_ENTRY"
    """No entries were supplied."""

    ERROR_INVALID_ENTRY = "ERROR_INVALID_ENTRY"
    """At least one entry is not a well-formed identifier."""

    ERROR_DUPLICATED_ENTRY = "ERROR_DUPLICATED_ENTRY"
    """The request lists the same entry more than once."""

    ERROR_EXISTING_ENTRY = "ERROR_EXISTING_ENTRY"
    """At least one entry to add is already whitelisted."""

    ERROR_ABSENT_ENTRY = "ERROR_ABSENT_ENTRY"
    """At least one entry to remove is not whitelisted."""

    ERROR_WHITELIST_PERSIST_FAIL = "ERROR_WHITELIST_PERSIST_FAIL"
    """The permissions file could not be read or written; memory was restored."""

    ERROR_WHITELIST_FILE_SYNC = "ERROR_WHITELIST_FILE_SYNC"
    """The permissions file no longer matches the in-memory whitelist."""

    @property
    def is_success(self) -> bool:
        """Return True only for SUCCESS."""
        return self is EnumWhitelistOperationResult.SUCCESS

    @property
    def is_input_error(self) -> bool:
        """Return True for results detected before any storage access."""
        return self in _INPUT_ERRORS


_INPUT_ERRORS: frozenset[EnumWhitelistOperationResult] = frozenset(
    {
        EnumWhitelistOperationResult.ERROR_EMPTY_ENTRY,
        EnumWhitelistOperationResult.ERROR_INVALID_ENTRY,
        EnumWhitelistOperationResult.ERROR_DUPLICATED_ENTRY,
        EnumWhitelistOperationResult.ERROR_EXISTING_ENTRY,
        EnumWhitelistOperationResult.ERROR_ABSENT_ENTRY,
    }
)


__all__ = [
    "EnumWhitelistOperationResult",
]
