# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelReloadResult - outcome of reloading the whitelist from file."""

from __future__ import annotations

from dataclasses import dataclass

from permissioning.exceptions import WhitelistReloadError


@dataclass(frozen=True)
class ModelReloadResult:
    """Result of a whitelist reload.

    Attributes:
        cause: The error that aborted the reload, or None on success.
    """

    cause: BaseException | None = None

    @property
    def is_success(self) -> bool:
        """Return True if the reload completed."""
        return self.cause is None

    def raise_for_error(self) -> None:
        """Raise WhitelistReloadError chained from the cause, if any."""
        if self.cause is not None:
            raise WhitelistReloadError(
                f"Error reloading permissions file: {self.cause}"
            ) from self.cause
