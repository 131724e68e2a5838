"""Permissioning models.

Configuration snapshot and result types shared by the controller, the
HTTP API and the CLI.
"""

from permissioning.models.model_permissioning_config import (
    ModelPermissioningConfig,
)
from permissioning.models.model_reload_result import ModelReloadResult

__all__ = [
    "ModelPermissioningConfig",
    "ModelReloadResult",
]
