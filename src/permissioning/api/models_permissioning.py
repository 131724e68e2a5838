# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Request and response models for the permissioning API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from permissioning.enums import EnumWhitelistOperationResult


class ModelAccountsRequest(BaseModel):
    """Body of add/remove requests."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    accounts: list[Any] | None = Field(
        default=None,
        description=(
            "0x-prefixed account identifiers. Entries of any other shape "
            "are rejected with ERROR_INVALID_ENTRY."
        ),
        examples=[["0xfe3b557e8fb62b89f4916b721be55ceb828dbd73"]],
    )


class ModelAccountsResponse(BaseModel):
    """Current account whitelist."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    accounts: list[str] = Field(..., description="Whitelisted accounts")


class ModelAccountCheckResponse(BaseModel):
    """Whitelist membership of a single account."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    account: str = Field(..., description="Account that was checked")
    whitelisted: bool = Field(..., description="Whether the account is whitelisted")


class ModelWhitelistOperationResponse(BaseModel):
    """Outcome of an add/remove request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    result: EnumWhitelistOperationResult = Field(
        ..., description="Operation outcome"
    )


class ModelReloadResponse(BaseModel):
    """Outcome of a successful reload."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    reloaded: bool = Field(default=True, description="Whether the reload completed")
    accounts: int = Field(..., ge=0, description="Accounts whitelisted after reload")


__all__ = [
    "ModelAccountCheckResponse",
    "ModelAccountsRequest",
    "ModelAccountsResponse",
    "ModelReloadResponse",
    "ModelWhitelistOperationResponse",
]
