# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelPermissioningConfig - immutable snapshot of local permissioning.

A configuration is built once at startup and again on every reload. It is
never patched in place: a reload produces a new instance and the controller
swaps its reference.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ModelPermissioningConfig(BaseModel):
    """Local permissioning configuration.

    Attributes:
        node_whitelist_enabled: Whether node whitelisting is active.
        node_config_file_path: Permissions file holding the node whitelist.
        node_whitelist: Node entries read from the permissions file.
        account_whitelist_enabled: Whether account whitelisting is active.
        account_config_file_path: Permissions file holding the account whitelist.
        account_whitelist: Account identifiers read from the permissions file.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    node_whitelist_enabled: bool = Field(
        default=False,
        description="Enable node whitelisting",
    )
    node_config_file_path: Path | None = Field(
        default=None,
        description="Permissions file holding the node whitelist",
    )
    node_whitelist: tuple[str, ...] = Field(
        default=(),
        description="Whitelisted enode URLs",
    )
    account_whitelist_enabled: bool = Field(
        default=False,
        description="Enable account whitelisting",
    )
    account_config_file_path: Path | None = Field(
        default=None,
        description="Permissions file holding the account whitelist",
    )
    account_whitelist: tuple[str, ...] = Field(
        default=(),
        description="Whitelisted 0x-prefixed account identifiers",
    )

    @classmethod
    def create_disabled(cls) -> ModelPermissioningConfig:
        """Return a configuration with every whitelist switched off."""
        return cls()


__all__ = ["ModelPermissioningConfig"]
