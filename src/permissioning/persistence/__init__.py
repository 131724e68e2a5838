"""Whitelist persistence.

Provides the YAML permissions-file persistor used by the whitelist
controller, plus the document helpers shared with the configuration
builder.
"""

from permissioning.persistence.whitelist_persistor import (
    YamlWhitelistPersistor,
    entries_for,
    read_permissions_file,
)

__all__ = [
    "YamlWhitelistPersistor",
    "entries_for",
    "read_permissions_file",
]
