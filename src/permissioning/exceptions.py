# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exception classes for local permissioning.

All exceptions inherit from ``PermissioningError`` so callers can catch the
whole family at an API boundary. The whitelist controller converts the two
persistence errors into ``EnumWhitelistOperationResult`` members; they only
escape when the persistor is used directly.
"""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path

from permissioning.enums import EnumWhitelistCategory


class PermissioningError(Exception):
    """Base exception for all permissioning errors.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class WhitelistPersistError(PermissioningError):
    """The permissions file could not be read, parsed or written.

    Attributes:
        category: Whitelist category being read or written.
        path: Location of the permissions file.
    """

    def __init__(
        self,
        message: str,
        *,
        category: EnumWhitelistCategory,
        path: Path,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.path = path


class WhitelistFileSyncError(PermissioningError):
    """The permissions file is readable but holds unexpected content.

    Raised when something other than this process changed the file since
    the last confirmed write.

    Attributes:
        category: Whitelist category that was compared.
        expected: Entries the caller expected to find.
        actual: Entries actually found in the file.
    """

    def __init__(
        self,
        category: EnumWhitelistCategory,
        expected: Collection[str],
        actual: Collection[str],
    ) -> None:
        self.category = category
        self.expected = sorted(set(expected))
        self.actual = sorted(set(actual))
        missing = sorted(set(expected) - set(actual))
        unexpected = sorted(set(actual) - set(expected))
        super().__init__(
            f"{category.config_key} in the permissions file is out of sync: "
            f"missing={missing} unexpected={unexpected}"
        )


class PermissioningConfigurationError(PermissioningError):
    """Permissioning configuration could not be built.

    Covers a missing or malformed permissions file, a missing whitelist key
    and invalid or duplicated whitelist entries.
    """


class WhitelistReloadError(PermissioningError):
    """Reloading the whitelist from the permissions file failed.

    The underlying cause is chained as ``__cause__``.
    """


__all__ = [
    "PermissioningConfigurationError",
    "PermissioningError",
    "WhitelistFileSyncError",
    "WhitelistPersistError",
    "WhitelistReloadError",
]
