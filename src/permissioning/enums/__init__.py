"""
Permissioning Enums Package.

Unified import location for the enums shared by the validator, the
persistor and the whitelist controller:

    from permissioning.enums import (
        EnumWhitelistCategory,
        EnumWhitelistOperationResult,
    )
"""

from permissioning.enums.enum_whitelist_category import EnumWhitelistCategory
from permissioning.enums.enum_whitelist_operation_result import (
    EnumWhitelistOperationResult,
)

__all__ = [
    "EnumWhitelistCategory",
    "EnumWhitelistOperationResult",
]
