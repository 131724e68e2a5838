# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""EnumWhitelistCategory - whitelist kinds stored in the permissions file."""

from __future__ import annotations

from enum import Enum

from permissioning.constants import ACCOUNTS_WHITELIST_KEY, NODES_WHITELIST_KEY


class EnumWhitelistCategory(str, Enum):
    """Whitelist categories held in a permissions file."""

    ACCOUNTS = "accounts"
    NODES = "nodes"

    @property
    def config_key(self) -> str:
        """Top-level key of this category in the permissions file."""
        if self is EnumWhitelistCategory.ACCOUNTS:
            return ACCOUNTS_WHITELIST_KEY
        return NODES_WHITELIST_KEY


__all__ = [
    "EnumWhitelistCategory",
]
