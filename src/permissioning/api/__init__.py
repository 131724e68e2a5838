"""REST API for local permissioning.

Provides the FastAPI router exposing the account whitelist controller and an
application factory that builds the controller from PERMISSIONING_* settings.
"""

from permissioning.api.app import create_app
from permissioning.api.router_permissioning import create_permissioning_router

__all__ = [
    "create_app",
    "create_permissioning_router",
]
