# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""YAML-backed persistence for permissions whitelists.

The permissions file is a YAML mapping with one list per whitelist
category::

    accounts-whitelist:
      - "0xfe3b557e8fb62b89f4916b721be55ceb828dbd73"
    nodes-whitelist:
      - "enode://6f8a80d1...@192.168.0.10:30303"

A missing key reads as an empty list. Writes replace one category's list
and leave every other key untouched. Unquoted hex scalars such as
``0xfe3b...`` are read as strings, not YAML 1.1 integers.

Atomicity:
    The new document is written to a temporary file in the same directory,
    fsynced, then moved over the original with ``os.replace``. The directory
    is fsynced after the rename. Readers see either the old or the new file,
    never a partial one.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Collection
from pathlib import Path
from typing import Any

import yaml

from permissioning.enums import EnumWhitelistCategory
from permissioning.exceptions import WhitelistFileSyncError, WhitelistPersistError

logger = logging.getLogger(__name__)

_YAML_INT_TAG = "tag:yaml.org,2002:int"


class _PermissionsLoader(yaml.SafeLoader):
    """SafeLoader that never resolves plain scalars to integers."""


_PermissionsLoader.yaml_implicit_resolvers = {
    first_char: [
        (tag, pattern) for tag, pattern in resolvers if tag != _YAML_INT_TAG
    ]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


# =========================================================================
# Document Helpers
# =========================================================================


def read_permissions_file(path: Path) -> dict[str, Any]:
    """Load the permissions file as a mapping.

    Args:
        path: Location of the permissions file.

    Returns:
        Parsed document. An empty file yields an empty dict.

    Raises:
        OSError: If the file cannot be opened or read.
        ValueError: If the file is not valid YAML or not a mapping.
    """
    with path.open(encoding="utf-8") as f:
        try:
            data = yaml.load(f, Loader=_PermissionsLoader)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in permissions file '{path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Permissions file '{path}' must contain a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def entries_for(
    document: dict[str, Any],
    category: EnumWhitelistCategory,
) -> list[str]:
    """Extract the whitelist of ``category`` from a permissions document.

    Raises:
        ValueError: If the value is not a list of strings.
    """
    value = document.get(category.config_key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(
            f"'{category.config_key}' must be a list, got {type(value).__name__}"
        )
    for entry in value:
        if not isinstance(entry, str):
            raise ValueError(
                f"'{category.config_key}' entries must be strings, got {entry!r}"
            )
    return list(value)


# =========================================================================
# Persistor
# =========================================================================


class YamlWhitelistPersistor:
    """Reads back and rewrites whitelists stored in a YAML permissions file.

    Implements ``ProtocolWhitelistPersistor``. Every failure to read, parse
    or write the file is reported as ``WhitelistPersistError``; a readable
    file with unexpected entries is reported as ``WhitelistFileSyncError``.

    Thread Safety:
        Not thread-safe on its own. The whitelist controller serialises all
        calls under its mutation lock.
    """

    def __init__(self, config_file_path: str | Path) -> None:
        self._path = Path(config_file_path)

    @property
    def path(self) -> Path:
        """Location of the permissions file."""
        return self._path

    def read_entries(self, category: EnumWhitelistCategory) -> list[str]:
        """Return the stored entries for ``category`` in file order.

        Raises:
            WhitelistPersistError: If the file is missing, unreadable or malformed.
        """
        try:
            return entries_for(read_permissions_file(self._path), category)
        except (OSError, ValueError) as e:
            raise WhitelistPersistError(
                f"Unable to read {category.config_key} from '{self._path}': {e}",
                category=category,
                path=self._path,
            ) from e

    def verify_matches(
        self,
        category: EnumWhitelistCategory,
        expected: Collection[str],
    ) -> None:
        """Confirm the stored entries equal ``expected`` as a set.

        Raises:
            WhitelistPersistError: If the file cannot be read.
            WhitelistFileSyncError: If the stored entries differ.
        """
        actual = self.read_entries(category)
        if set(actual) != set(expected):
            error = WhitelistFileSyncError(category, expected, actual)
            logger.warning(
                "whitelist_file_out_of_sync",
                extra={
                    "category": category.value,
                    "path": str(self._path),
                    "expected": error.expected,
                    "actual": error.actual,
                },
            )
            raise error
        logger.debug(
            "Permissions file matches expected state. category=%s entries=%d",
            category.value,
            len(actual),
        )

    def write(
        self,
        category: EnumWhitelistCategory,
        entries: Collection[str],
    ) -> None:
        """Replace the stored entries for ``category``.

        Other keys in the permissions file are preserved.

        Raises:
            WhitelistPersistError: If the file cannot be read or replaced.
        """
        try:
            document = read_permissions_file(self._path)
            document[category.config_key] = list(entries)
            self._replace(document)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(
                "whitelist_write_failed",
                extra={
                    "category": category.value,
                    "path": str(self._path),
                    "error": str(e),
                },
            )
            raise WhitelistPersistError(
                f"Unable to write {category.config_key} to '{self._path}': {e}",
                category=category,
                path=self._path,
            ) from e
        logger.debug(
            "Wrote permissions file. category=%s entries=%d path=%s",
            category.value,
            len(entries),
            self._path,
        )

    def _replace(self, document: dict[str, Any]) -> None:
        """Atomically swap the permissions file for ``document``."""
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.",
            suffix=".tmp",
            dir=self._path.parent,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(document, f, default_flow_style=False, sort_keys=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        _fsync_directory(self._path.parent)


def _fsync_directory(directory: Path) -> None:
    """Flush a rename in ``directory`` to disk. No-op outside POSIX."""
    if os.name != "posix":
        return
    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


__all__ = [
    "YamlWhitelistPersistor",
    "entries_for",
    "read_permissions_file",
]
