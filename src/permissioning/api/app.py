# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""FastAPI application factory for the permissioning API.

Usage:
    >>> app = create_app()
    >>> # Run with uvicorn:
    >>> # uvicorn permissioning.api.app:create_app --factory
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from permissioning.api.router_permissioning import create_permissioning_router
from permissioning.controller import AccountWhitelistController
from permissioning.settings import PermissioningSettings

logger = logging.getLogger(__name__)


def create_app(
    *,
    settings: PermissioningSettings | None = None,
    controller: AccountWhitelistController | None = None,
) -> FastAPI:
    """Create a FastAPI application with account whitelist endpoints.

    Args:
        settings: Startup settings. Loaded from PERMISSIONING_* environment
            variables when omitted. Ignored when ``controller`` is given.
        controller: Pre-built controller, mainly for tests.

    Returns:
        Configured FastAPI application.

    Raises:
        PermissioningConfigurationError: If the permissions file cannot be
            loaded at startup.
    """
    if controller is None:
        settings = settings or PermissioningSettings()
        controller = AccountWhitelistController.from_config(settings.to_config())
        logger.info(
            "Account whitelist loaded. enabled=%s accounts=%d path=%s",
            controller.config.account_whitelist_enabled,
            len(controller.current_whitelist()),
            controller.config.account_config_file_path,
        )

    shared_controller = controller

    def get_controller() -> AccountWhitelistController:
        return shared_controller

    app = FastAPI(
        title="Local Permissioning API",
        description="REST API for managing the account whitelist",
        version="0.1.0",
    )
    app.include_router(create_permissioning_router(get_controller=get_controller))

    @app.get("/health", tags=["infrastructure"])
    def health_check() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "healthy"}

    return app


__all__ = ["create_app"]
