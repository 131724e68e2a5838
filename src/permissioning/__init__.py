"""Local permissioning.

Keeps an in-memory account whitelist consistent with its YAML permissions
file. Every change is validated, checked against the file, written
atomically and read back; I/O failures roll memory back and external edits
to the file are reported as sync errors.

Usage:
    from permissioning import AccountWhitelistController, build_permissioning_config

    config = build_permissioning_config(
        node_whitelist_enabled=False,
        node_config_file_path=None,
        account_whitelist_enabled=True,
        account_config_file_path=Path("permissions_config.yaml"),
    )
    controller = AccountWhitelistController.from_config(config)
    controller.add_accounts(["0xfe3b557e8fb62b89f4916b721be55ceb828dbd73"])
"""

from permissioning.config_builder import build_permissioning_config
from permissioning.controller import AccountWhitelistController
from permissioning.enums import EnumWhitelistCategory, EnumWhitelistOperationResult
from permissioning.exceptions import (
    PermissioningConfigurationError,
    PermissioningError,
    WhitelistFileSyncError,
    WhitelistPersistError,
    WhitelistReloadError,
)
from permissioning.models import ModelPermissioningConfig, ModelReloadResult
from permissioning.persistence import YamlWhitelistPersistor
from permissioning.validation import is_valid_account, validate_accounts

__all__ = [
    "AccountWhitelistController",
    "EnumWhitelistCategory",
    "EnumWhitelistOperationResult",
    "ModelPermissioningConfig",
    "ModelReloadResult",
    "PermissioningConfigurationError",
    "PermissioningError",
    "WhitelistFileSyncError",
    "WhitelistPersistError",
    "WhitelistReloadError",
    "YamlWhitelistPersistor",
    "build_permissioning_config",
    "is_valid_account",
    "validate_accounts",
]
