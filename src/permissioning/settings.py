# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Startup settings for local permissioning, loaded from the environment.

Environment variables:
    PERMISSIONING_NODE_WHITELIST_ENABLED: bool (default false)
    PERMISSIONING_NODE_CONFIG_FILE: path (default permissions_config.yaml)
    PERMISSIONING_ACCOUNT_WHITELIST_ENABLED: bool (default false)
    PERMISSIONING_ACCOUNT_CONFIG_FILE: path (default permissions_config.yaml)
    PERMISSIONING_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from permissioning.config_builder import build_permissioning_config
from permissioning.constants import DEFAULT_PERMISSIONS_CONFIG_FILE
from permissioning.models import ModelPermissioningConfig


class PermissioningSettings(BaseSettings):
    """Pydantic Settings for local permissioning."""

    model_config = SettingsConfigDict(
        env_prefix="PERMISSIONING_",
        extra="ignore",
    )

    node_whitelist_enabled: bool = Field(
        default=False,
        description="Enable node whitelisting",
    )
    node_config_file: Path = Field(
        default=Path(DEFAULT_PERMISSIONS_CONFIG_FILE),
        description="Permissions file holding the node whitelist",
    )
    account_whitelist_enabled: bool = Field(
        default=False,
        description="Enable account whitelisting",
    )
    account_config_file: Path = Field(
        default=Path(DEFAULT_PERMISSIONS_CONFIG_FILE),
        description="Permissions file holding the account whitelist",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level for the CLI and API entrypoints",
    )

    def to_config(self) -> ModelPermissioningConfig:
        """Read the permissions file(s) into a configuration snapshot.

        Raises:
            PermissioningConfigurationError: If an enabled whitelist cannot
                be loaded.
        """
        return build_permissioning_config(
            node_whitelist_enabled=self.node_whitelist_enabled,
            node_config_file_path=self.node_config_file,
            account_whitelist_enabled=self.account_whitelist_enabled,
            account_config_file_path=self.account_config_file,
        )


__all__ = ["PermissioningSettings"]
