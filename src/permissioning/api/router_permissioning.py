# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""FastAPI router for account whitelist endpoints.

The router is a thin shell over AccountWhitelistController. Endpoints are
plain ``def`` functions: the controller blocks on file I/O, so FastAPI runs
them in its threadpool.

Status codes for add/remove:
    200 SUCCESS
    400 input rejected (empty, invalid, duplicated, existing, absent)
    409 ERROR_WHITELIST_FILE_SYNC
    500 ERROR_WHITELIST_PERSIST_FAIL
"""

# NOTE: Do NOT use `from __future__ import annotations` in this module.
# FastAPI requires runtime-accessible type annotations for dependency injection.

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from permissioning.api.models_permissioning import (
    ModelAccountCheckResponse,
    ModelAccountsRequest,
    ModelAccountsResponse,
    ModelReloadResponse,
    ModelWhitelistOperationResponse,
)
from permissioning.controller import AccountWhitelistController
from permissioning.enums import EnumWhitelistOperationResult


def status_code_for(result: EnumWhitelistOperationResult) -> int:
    """Map an operation result to its HTTP status code."""
    if result.is_success:
        return 200
    if result.is_input_error:
        return 400
    if result is EnumWhitelistOperationResult.ERROR_WHITELIST_FILE_SYNC:
        return 409
    return 500


def _operation_response(result: EnumWhitelistOperationResult) -> JSONResponse:
    body = ModelWhitelistOperationResponse(result=result)
    return JSONResponse(
        status_code=status_code_for(result),
        content=body.model_dump(mode="json"),
    )


def create_permissioning_router(
    *,
    get_controller: Callable[[], AccountWhitelistController],
) -> APIRouter:
    """Create a FastAPI router for account whitelist endpoints.

    Args:
        get_controller: Dependency callable returning the shared controller.

    Returns:
        Configured APIRouter ready to be mounted on a FastAPI app.
    """
    router = APIRouter(
        prefix="/api/v1/permissioning",
        tags=["permissioning"],
    )
    Controller = Annotated[AccountWhitelistController, Depends(get_controller)]

    @router.get(
        "/accounts",
        response_model=ModelAccountsResponse,
        summary="List whitelisted accounts",
    )
    def get_accounts(controller: Controller) -> ModelAccountsResponse:
        return ModelAccountsResponse(accounts=controller.current_whitelist())

    @router.get(
        "/accounts/{account}",
        response_model=ModelAccountCheckResponse,
        summary="Check whether an account is whitelisted",
    )
    def check_account(
        account: str,
        controller: Controller,
    ) -> ModelAccountCheckResponse:
        return ModelAccountCheckResponse(
            account=account,
            whitelisted=controller.contains(account),
        )

    @router.post(
        "/accounts",
        response_model=ModelWhitelistOperationResponse,
        summary="Add accounts to the whitelist",
    )
    def add_accounts(
        request: ModelAccountsRequest,
        controller: Controller,
    ) -> JSONResponse:
        return _operation_response(controller.add_accounts(request.accounts))

    @router.post(
        "/accounts/remove",
        response_model=ModelWhitelistOperationResponse,
        summary="Remove accounts from the whitelist",
    )
    def remove_accounts(
        request: ModelAccountsRequest,
        controller: Controller,
    ) -> JSONResponse:
        return _operation_response(controller.remove_accounts(request.accounts))

    @router.post(
        "/reload",
        response_model=ModelReloadResponse,
        summary="Reload the whitelist from the permissions file",
    )
    def reload_permissions(controller: Controller) -> ModelReloadResponse:
        """Reload the whitelist; the previous one stays active on failure."""
        result = controller.reload()
        if not result.is_success:
            raise HTTPException(
                status_code=500,
                detail=f"Error reloading permissions file: {result.cause}",
            )
        return ModelReloadResponse(accounts=len(controller.current_whitelist()))

    return router


__all__ = ["create_permissioning_router", "status_code_for"]
