# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Account whitelist controller.

Owns the in-memory account whitelist and keeps it consistent with the
permissions file.

Mutation protocol (add and remove):
    1. Validate the request (empty, malformed, duplicated).
    2. Check it against the current whitelist (already present / absent).
    3. Snapshot the current whitelist as ``old``.
    4. Verify the file still holds ``old``.
    5. Write the new whitelist.
    6. Verify the file now holds the new whitelist.
    7. Publish the new whitelist.

Failure handling:
    - ``WhitelistPersistError`` in steps 4-6: keep ``old`` and return
      ERROR_WHITELIST_PERSIST_FAIL.
    - ``WhitelistFileSyncError`` in steps 4 or 6: publish the new whitelist
      anyway and return ERROR_WHITELIST_FILE_SYNC. The file was changed by
      someone else, so ``old`` is no longer a known good state and the
      mismatch is left for the operator.

Thread Safety:
    Mutations and reloads are serialised by one lock held for the whole
    operation, including file I/O. The whitelist itself is an immutable
    tuple replaced wholesale, so ``contains`` and ``current_whitelist`` read
    it without locking and always see a complete snapshot.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from permissioning.config_builder import build_permissioning_config
from permissioning.enums import EnumWhitelistCategory, EnumWhitelistOperationResult
from permissioning.exceptions import (
    PermissioningConfigurationError,
    WhitelistFileSyncError,
    WhitelistPersistError,
)
from permissioning.models import ModelPermissioningConfig, ModelReloadResult
from permissioning.persistence import YamlWhitelistPersistor
from permissioning.protocols import (
    ProtocolPermissioningConfigSource,
    ProtocolWhitelistPersistor,
)
from permissioning.validation import validate_accounts

logger = logging.getLogger(__name__)

_CATEGORY = EnumWhitelistCategory.ACCOUNTS


def _accounts_from_config(config: ModelPermissioningConfig) -> tuple[str, ...]:
    """Return the accounts a configuration seeds the whitelist with.

    Raises:
        PermissioningConfigurationError: If the configured accounts are
            malformed or duplicated.
    """
    if not config.account_whitelist_enabled or not config.account_whitelist:
        return ()

    result = validate_accounts(config.account_whitelist)
    if not result.is_success:
        raise PermissioningConfigurationError(
            f"Configured account whitelist rejected: {result.value}"
        )
    return tuple(config.account_whitelist)


class AccountWhitelistController:
    """Gatekeeper for the account whitelist.

    Args:
        config: Active permissioning configuration. Seeds the whitelist when
            account whitelisting is enabled.
        persistor: Backend holding the persisted whitelist.
        config_source: Builds a fresh configuration on reload.

    Raises:
        PermissioningConfigurationError: If the configured accounts are
            invalid.
    """

    def __init__(
        self,
        config: ModelPermissioningConfig,
        persistor: ProtocolWhitelistPersistor,
        *,
        config_source: ProtocolPermissioningConfigSource = build_permissioning_config,
    ) -> None:
        self._config = config
        self._persistor = persistor
        self._config_source = config_source
        self._lock = threading.Lock()
        self._accounts: tuple[str, ...] = _accounts_from_config(config)

    @classmethod
    def from_config(
        cls,
        config: ModelPermissioningConfig,
    ) -> AccountWhitelistController:
        """Create a controller persisting to the configured permissions file.

        Raises:
            PermissioningConfigurationError: If no account permissions file
                is configured or the configured accounts are invalid.
        """
        if config.account_config_file_path is None:
            raise PermissioningConfigurationError(
                "No account permissions file configured"
            )
        return cls(config, YamlWhitelistPersistor(config.account_config_file_path))

    @property
    def config(self) -> ModelPermissioningConfig:
        """The active configuration snapshot."""
        return self._config

    # ------------------------------------------------------------------
    # Read Operations
    # ------------------------------------------------------------------

    def contains(self, account: str) -> bool:
        """Return True if ``account`` is whitelisted."""
        return account in self._accounts

    def current_whitelist(self) -> list[str]:
        """Return a copy of the whitelist in insertion order."""
        return list(self._accounts)

    # ------------------------------------------------------------------
    # Write Operations
    # ------------------------------------------------------------------

    def add_accounts(
        self,
        accounts: Sequence[str] | None,
    ) -> EnumWhitelistOperationResult:
        """Whitelist ``accounts`` and persist the change.

        Args:
            accounts: Account identifiers to add.

        Returns:
            SUCCESS, or the reason the request was rejected or failed.
        """
        result = validate_accounts(accounts)
        if accounts is None or not result.is_success:
            return self._rejected("add", result)

        with self._lock:
            old = self._accounts
            if any(account in old for account in accounts):
                return self._rejected(
                    "add", EnumWhitelistOperationResult.ERROR_EXISTING_ENTRY
                )
            return self._apply("add", old, (*old, *accounts))

    def remove_accounts(
        self,
        accounts: Sequence[str] | None,
    ) -> EnumWhitelistOperationResult:
        """Remove ``accounts`` from the whitelist and persist the change.

        Every account must currently be whitelisted.

        Args:
            accounts: Account identifiers to remove.

        Returns:
            SUCCESS, or the reason the request was rejected or failed.
        """
        result = validate_accounts(accounts)
        if accounts is None or not result.is_success:
            return self._rejected("remove", result)

        with self._lock:
            old = self._accounts
            if not all(account in old for account in accounts):
                return self._rejected(
                    "remove", EnumWhitelistOperationResult.ERROR_ABSENT_ENTRY
                )
            removed = set(accounts)
            updated = tuple(account for account in old if account not in removed)
            return self._apply("remove", old, updated)

    def reload(self) -> ModelReloadResult:
        """Rebuild the whitelist from a freshly read configuration.

        The permissions file is only read. On failure the previous
        whitelist and configuration stay active and the cause is returned.

        Returns:
            ModelReloadResult carrying the error, if any.
        """
        with self._lock:
            current = self._accounts
            # Readers keep seeing ``current`` until the rebuilt list is published.
            try:
                updated_config = self._config_source(
                    node_whitelist_enabled=self._config.node_whitelist_enabled,
                    node_config_file_path=self._config.node_config_file_path,
                    account_whitelist_enabled=self._config.account_whitelist_enabled,
                    account_config_file_path=self._config.account_config_file_path,
                )
                reloaded = _accounts_from_config(updated_config)
            except Exception as e:
                logger.warning(
                    "Error reloading permissions file. In-memory whitelisted "
                    "accounts stay at the previous valid configuration. "
                    "Details: %s",
                    e,
                )
                return ModelReloadResult(cause=e)

            self._accounts = reloaded
            self._config = updated_config
            logger.info(
                "whitelist_reloaded",
                extra={
                    "category": _CATEGORY.value,
                    "previous_count": len(current),
                    "count": len(reloaded),
                },
            )
            return ModelReloadResult()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply(
        self,
        operation: str,
        old: tuple[str, ...],
        updated: tuple[str, ...],
    ) -> EnumWhitelistOperationResult:
        """Persist ``updated``, then publish it unless the file I/O failed.

        Readers keep seeing ``old`` until the outcome is known. Must be
        called with the lock held.
        """
        try:
            self._persistor.verify_matches(_CATEGORY, old)
            self._persistor.write(_CATEGORY, updated)
            self._persistor.verify_matches(_CATEGORY, updated)
        except WhitelistPersistError as e:
            logger.error(
                "whitelist_persist_failed",
                extra={
                    "operation": operation,
                    "category": _CATEGORY.value,
                    "error": str(e),
                },
            )
            return EnumWhitelistOperationResult.ERROR_WHITELIST_PERSIST_FAIL
        except WhitelistFileSyncError as e:
            self._accounts = updated
            logger.warning(
                "whitelist_file_sync_failed",
                extra={
                    "operation": operation,
                    "category": _CATEGORY.value,
                    "error": str(e),
                },
            )
            return EnumWhitelistOperationResult.ERROR_WHITELIST_FILE_SYNC

        self._accounts = updated
        logger.info(
            "whitelist_updated",
            extra={
                "operation": operation,
                "category": _CATEGORY.value,
                "previous_count": len(old),
                "count": len(updated),
            },
        )
        return EnumWhitelistOperationResult.SUCCESS

    @staticmethod
    def _rejected(
        operation: str,
        result: EnumWhitelistOperationResult,
    ) -> EnumWhitelistOperationResult:
        logger.debug("Rejected whitelist %s request: %s", operation, result.value)
        return result


__all__ = ["AccountWhitelistController"]
