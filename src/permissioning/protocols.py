# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Protocol definitions for whitelist controller dependency injection.

The controller depends on these protocols, not on the YAML persistor or the
file-based configuration builder, so tests and alternative backends can be
passed in at construction.
"""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path
from typing import Protocol, runtime_checkable

from permissioning.enums import EnumWhitelistCategory
from permissioning.models import ModelPermissioningConfig


@runtime_checkable
class ProtocolWhitelistPersistor(Protocol):
    """Protocol for reading back and rewriting a persisted whitelist.

    Implementations must provide:
    - ``verify_matches``: Confirm the stored entries equal an expected set.
    - ``write``: Atomically replace the stored entries.
    """

    def verify_matches(
        self,
        category: EnumWhitelistCategory,
        expected: Collection[str],
    ) -> None:
        """Compare stored entries for ``category`` with ``expected``.

        Order and multiplicity are ignored.

        Raises:
            WhitelistPersistError: If the stored entries cannot be read.
            WhitelistFileSyncError: If they differ from ``expected``.
        """
        ...

    def write(
        self,
        category: EnumWhitelistCategory,
        entries: Collection[str],
    ) -> None:
        """Replace the stored entries for ``category``.

        Raises:
            WhitelistPersistError: If the entries cannot be written.
        """
        ...


@runtime_checkable
class ProtocolPermissioningConfigSource(Protocol):
    """Protocol for building a fresh permissioning configuration."""

    def __call__(
        self,
        *,
        node_whitelist_enabled: bool,
        node_config_file_path: Path | None,
        account_whitelist_enabled: bool,
        account_config_file_path: Path | None,
    ) -> ModelPermissioningConfig:
        """Build a configuration snapshot.

        Raises:
            PermissioningConfigurationError: If the configuration is invalid.
        """
        ...


__all__ = [
    "ProtocolPermissioningConfigSource",
    "ProtocolWhitelistPersistor",
]
