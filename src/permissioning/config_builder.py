# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Build a permissioning configuration from the permissions file.

``build_permissioning_config`` is the default configuration source used by
the whitelist controller at startup and on every reload. Only enabled
categories are read. For each enabled category the file must exist, parse
as a YAML mapping and contain the category key.

Example:
    config = build_permissioning_config(
        node_whitelist_enabled=False,
        node_config_file_path=None,
        account_whitelist_enabled=True,
        account_config_file_path=Path("permissions_config.yaml"),
    )
"""

from __future__ import annotations

import logging
from pathlib import Path

from permissioning.constants import ENODE_PREFIX
from permissioning.enums import EnumWhitelistCategory
from permissioning.exceptions import PermissioningConfigurationError
from permissioning.models import ModelPermissioningConfig
from permissioning.persistence import entries_for, read_permissions_file
from permissioning.validation import has_duplicates, is_valid_account

logger = logging.getLogger(__name__)


def _load_category(
    path: Path | None,
    category: EnumWhitelistCategory,
) -> list[str]:
    """Read one whitelist category, requiring its key to be present."""
    if path is None:
        raise PermissioningConfigurationError(
            f"{category.config_key} is enabled but no permissions file is configured"
        )
    if not path.is_file():
        raise PermissioningConfigurationError(
            f"Permissions file not found: {path}"
        )

    try:
        document = read_permissions_file(path)
        if category.config_key not in document:
            raise PermissioningConfigurationError(
                f"{category.config_key} config option missing in '{path}'"
            )
        entries = entries_for(document, category)
    except (OSError, ValueError) as e:
        raise PermissioningConfigurationError(str(e)) from e

    if has_duplicates(entries):
        raise PermissioningConfigurationError(
            f"{category.config_key} in '{path}' contains duplicate entries"
        )
    return entries


def _check_accounts(accounts: list[str], path: Path | None) -> None:
    invalid = [account for account in accounts if not is_valid_account(account)]
    if invalid:
        raise PermissioningConfigurationError(
            f"Invalid account(s) {invalid} in accounts whitelist of '{path}'"
        )


def _check_nodes(nodes: list[str], path: Path | None) -> None:
    invalid = [node for node in nodes if not node.startswith(ENODE_PREFIX)]
    if invalid:
        raise PermissioningConfigurationError(
            f"Invalid enode URL(s) {invalid} in nodes whitelist of '{path}'"
        )


def build_permissioning_config(
    *,
    node_whitelist_enabled: bool,
    node_config_file_path: Path | None,
    account_whitelist_enabled: bool,
    account_config_file_path: Path | None,
) -> ModelPermissioningConfig:
    """Build a fresh configuration snapshot from the permissions file.

    Args:
        node_whitelist_enabled: Read the node whitelist.
        node_config_file_path: Permissions file holding the node whitelist.
        account_whitelist_enabled: Read the account whitelist.
        account_config_file_path: Permissions file holding the account whitelist.

    Returns:
        Immutable configuration. Disabled categories carry empty whitelists.

    Raises:
        PermissioningConfigurationError: If an enabled category's file is
            missing or malformed, its key is absent, or it contains
            invalid or duplicated entries.
    """
    node_whitelist: list[str] = []
    account_whitelist: list[str] = []

    if node_whitelist_enabled:
        node_whitelist = _load_category(
            node_config_file_path, EnumWhitelistCategory.NODES
        )
        _check_nodes(node_whitelist, node_config_file_path)

    if account_whitelist_enabled:
        account_whitelist = _load_category(
            account_config_file_path, EnumWhitelistCategory.ACCOUNTS
        )
        _check_accounts(account_whitelist, account_config_file_path)

    logger.debug(
        "Built permissioning config. nodes_enabled=%s nodes=%d "
        "accounts_enabled=%s accounts=%d",
        node_whitelist_enabled,
        len(node_whitelist),
        account_whitelist_enabled,
        len(account_whitelist),
    )

    return ModelPermissioningConfig(
        node_whitelist_enabled=node_whitelist_enabled,
        node_config_file_path=node_config_file_path,
        node_whitelist=tuple(node_whitelist),
        account_whitelist_enabled=account_whitelist_enabled,
        account_config_file_path=account_config_file_path,
        account_whitelist=tuple(account_whitelist),
    )


__all__ = ["build_permissioning_config"]
