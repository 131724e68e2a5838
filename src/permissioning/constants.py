# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Shared Constants for local permissioning.

This module defines constants used across the validator, the configuration
builder and the whitelist persistor so the permissions file layout and the
account identifier format are declared in exactly one place.

Usage:
    from permissioning.constants import ACCOUNT_BYTES_SIZE, HEX_PREFIX
"""

# =============================================================================
# Account Identifiers
# =============================================================================

ACCOUNT_BYTES_SIZE: int = 20
"""
Number of bytes an account identifier decodes to.

An account is written as ``"0x"`` followed by 40 hexadecimal digits.
"""

HEX_PREFIX: str = "0x"
"""Mandatory prefix of every hex-encoded identifier."""

ENODE_PREFIX: str = "enode://"
"""Mandatory prefix of every node whitelist entry."""

# =============================================================================
# Permissions File Layout
# =============================================================================

ACCOUNTS_WHITELIST_KEY: str = "accounts-whitelist"
"""Top-level key holding the account whitelist in the permissions file."""

NODES_WHITELIST_KEY: str = "nodes-whitelist"
"""Top-level key holding the node whitelist in the permissions file."""

DEFAULT_PERMISSIONS_CONFIG_FILE: str = "permissions_config.yaml"
"""Permissions file name used when no explicit path is configured."""


__all__ = [
    "ACCOUNTS_WHITELIST_KEY",
    "ACCOUNT_BYTES_SIZE",
    "DEFAULT_PERMISSIONS_CONFIG_FILE",
    "ENODE_PREFIX",
    "HEX_PREFIX",
    "NODES_WHITELIST_KEY",
]
