"""
Pytest configuration and fixtures for permissioning tests.

Shared fixtures for building permissions files and file-backed controllers
on top of ``tmp_path``.
"""

from collections.abc import Callable, Collection
from pathlib import Path

import pytest
import yaml

from permissioning.config_builder import build_permissioning_config
from permissioning.controller import AccountWhitelistController

# =========================================================================
# Sample Accounts
# =========================================================================


@pytest.fixture
def account_a() -> str:
    return "0xfe3b557e8fb62b89f4916b721be55ceb828dbd73"


@pytest.fixture
def account_b() -> str:
    return "0x627306090abab3a6e1400e9345bc60c78a8bef57"


@pytest.fixture
def account_c() -> str:
    return "0xf17f52151ebef6c7334fad080c5704d77216b732"


# =========================================================================
# Permissions Files
# =========================================================================


@pytest.fixture
def write_permissions_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a permissions YAML file and returning its path.

    ``accounts=None`` / ``nodes=None`` leave the key out of the file.
    """

    def _write(
        accounts: Collection[str] | None = (),
        nodes: Collection[str] | None = None,
        name: str = "permissions_config.yaml",
    ) -> Path:
        document: dict[str, list[str]] = {}
        if accounts is not None:
            document["accounts-whitelist"] = list(accounts)
        if nodes is not None:
            document["nodes-whitelist"] = list(nodes)
        path = tmp_path / name
        path.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def stored_accounts() -> Callable[[Path], list[str]]:
    """Return a reader for the accounts-whitelist stored in a file."""

    def _read(path: Path) -> list[str]:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return list(data.get("accounts-whitelist", []))

    return _read


@pytest.fixture
def make_controller(
    write_permissions_file: Callable[..., Path],
) -> Callable[..., AccountWhitelistController]:
    """Factory building a file-backed controller seeded with ``accounts``."""

    def _make(accounts: Collection[str] = ()) -> AccountWhitelistController:
        path = write_permissions_file(accounts=accounts)
        config = build_permissioning_config(
            node_whitelist_enabled=False,
            node_config_file_path=None,
            account_whitelist_enabled=True,
            account_config_file_path=path,
        )
        return AccountWhitelistController.from_config(config)

    return _make
