"""Whitelist controllers."""

from permissioning.controller.account_whitelist_controller import (
    AccountWhitelistController,
)

__all__ = ["AccountWhitelistController"]
