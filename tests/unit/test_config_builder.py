# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for building permissioning configuration from file."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from pydantic import ValidationError

from permissioning.config_builder import build_permissioning_config
from permissioning.exceptions import PermissioningConfigurationError
from permissioning.models import ModelPermissioningConfig

NODE = "enode://" + "ab" * 64 + "@127.0.0.1:30303"


def _build(
    *,
    accounts_path: Path | None = None,
    nodes_path: Path | None = None,
) -> ModelPermissioningConfig:
    return build_permissioning_config(
        node_whitelist_enabled=nodes_path is not None,
        node_config_file_path=nodes_path,
        account_whitelist_enabled=accounts_path is not None,
        account_config_file_path=accounts_path,
    )


@pytest.mark.unit
class TestBuildPermissioningConfig:
    """Tests for the file-based configuration source."""

    def test_reads_accounts(
        self,
        write_permissions_file: Callable[..., Path],
        account_a: str,
        account_b: str,
    ) -> None:
        path = write_permissions_file(accounts=[account_a, account_b])

        config = _build(accounts_path=path)

        assert config.account_whitelist_enabled is True
        assert config.account_config_file_path == path
        assert config.account_whitelist == (account_a, account_b)
        assert config.node_whitelist_enabled is False
        assert config.node_whitelist == ()

    def test_reads_both_categories_from_one_file(
        self,
        write_permissions_file: Callable[..., Path],
        account_a: str,
    ) -> None:
        path = write_permissions_file(accounts=[account_a], nodes=[NODE])

        config = _build(accounts_path=path, nodes_path=path)

        assert config.account_whitelist == (account_a,)
        assert config.node_whitelist == (NODE,)

    def test_reads_unquoted_accounts(
        self, tmp_path: Path, account_a: str, account_b: str
    ) -> None:
        path = tmp_path / "permissions_config.yaml"
        path.write_text(
            f"accounts-whitelist:\n  - {account_a}\n  - {account_b}\n",
            encoding="utf-8",
        )

        config = _build(accounts_path=path)

        assert config.account_whitelist == (account_a, account_b)

    def test_empty_account_list_is_allowed(
        self,
        write_permissions_file: Callable[..., Path],
    ) -> None:
        config = _build(accounts_path=write_permissions_file(accounts=[]))
        assert config.account_whitelist == ()

    def test_disabled_categories_are_not_read(self, tmp_path: Path) -> None:
        config = build_permissioning_config(
            node_whitelist_enabled=False,
            node_config_file_path=tmp_path / "missing.yaml",
            account_whitelist_enabled=False,
            account_config_file_path=tmp_path / "missing.yaml",
        )
        assert config.account_whitelist == ()
        assert config.node_whitelist == ()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(PermissioningConfigurationError, match="not found"):
            _build(accounts_path=tmp_path / "missing.yaml")

    def test_enabled_without_path(self) -> None:
        with pytest.raises(PermissioningConfigurationError, match="no permissions file"):
            build_permissioning_config(
                node_whitelist_enabled=False,
                node_config_file_path=None,
                account_whitelist_enabled=True,
                account_config_file_path=None,
            )

    def test_missing_accounts_key(
        self,
        write_permissions_file: Callable[..., Path],
    ) -> None:
        path = write_permissions_file(accounts=None, nodes=[NODE])
        with pytest.raises(PermissioningConfigurationError, match="config option missing"):
            _build(accounts_path=path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "permissions_config.yaml"
        path.write_text("accounts-whitelist: [", encoding="utf-8")
        with pytest.raises(PermissioningConfigurationError, match="Invalid YAML") as exc_info:
            _build(accounts_path=path)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_invalid_account(
        self,
        write_permissions_file: Callable[..., Path],
        account_a: str,
    ) -> None:
        path = write_permissions_file(accounts=[account_a, "0x1234"])
        with pytest.raises(PermissioningConfigurationError, match="Invalid account"):
            _build(accounts_path=path)

    def test_duplicate_account(
        self,
        write_permissions_file: Callable[..., Path],
        account_a: str,
    ) -> None:
        path = write_permissions_file(accounts=[account_a, account_a])
        with pytest.raises(PermissioningConfigurationError, match="duplicate"):
            _build(accounts_path=path)

    def test_invalid_node(
        self,
        write_permissions_file: Callable[..., Path],
    ) -> None:
        path = write_permissions_file(nodes=["http://not-an-enode"])
        with pytest.raises(PermissioningConfigurationError, match="Invalid enode"):
            _build(nodes_path=path)


@pytest.mark.unit
class TestModelPermissioningConfig:
    def test_is_frozen(self) -> None:
        config = ModelPermissioningConfig.create_disabled()
        with pytest.raises(ValidationError):
            config.account_whitelist_enabled = True  # type: ignore[misc]

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            ModelPermissioningConfig(accounts_enabled=True)  # type: ignore[call-arg]

    def test_disabled_defaults(self) -> None:
        config = ModelPermissioningConfig.create_disabled()
        assert config.account_whitelist_enabled is False
        assert config.node_whitelist_enabled is False
        assert config.account_config_file_path is None
