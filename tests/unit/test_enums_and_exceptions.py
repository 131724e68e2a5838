# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for permissioning enums, exceptions and result models."""

from __future__ import annotations

from pathlib import Path

import pytest

from permissioning.enums import EnumWhitelistCategory, EnumWhitelistOperationResult
from permissioning.exceptions import (
    PermissioningConfigurationError,
    PermissioningError,
    WhitelistFileSyncError,
    WhitelistPersistError,
    WhitelistReloadError,
)
from permissioning.models import ModelReloadResult


@pytest.mark.unit
class TestEnumWhitelistOperationResult:
    """Tests for the operation result enum."""

    def test_members(self) -> None:
        assert {member.value for member in EnumWhitelistOperationResult} == {
            "SUCCESS",
            "ERROR_EMPTY_ENTRY",
            "ERROR_INVALID_ENTRY",
            "ERROR_DUPLICATED_ENTRY",
            "ERROR_EXISTING_ENTRY",
            "ERROR_ABSENT_ENTRY",
            "ERROR_WHITELIST_PERSIST_FAIL",
            "ERROR_WHITELIST_FILE_SYNC",
        }

    def test_string_comparison(self) -> None:
        assert EnumWhitelistOperationResult.SUCCESS == "SUCCESS"

    def test_only_success_is_success(self) -> None:
        successes = [r for r in EnumWhitelistOperationResult if r.is_success]
        assert successes == [EnumWhitelistOperationResult.SUCCESS]

    def test_input_errors(self) -> None:
        input_errors = {r for r in EnumWhitelistOperationResult if r.is_input_error}
        assert input_errors == {
            EnumWhitelistOperationResult.ERROR_EMPTY_ENTRY,
            EnumWhitelistOperationResult.ERROR_INVALID_ENTRY,
            EnumWhitelistOperationResult.ERROR_DUPLICATED_ENTRY,
            EnumWhitelistOperationResult.ERROR_EXISTING_ENTRY,
            EnumWhitelistOperationResult.ERROR_ABSENT_ENTRY,
        }


@pytest.mark.unit
class TestEnumWhitelistCategory:
    def test_config_keys(self) -> None:
        assert EnumWhitelistCategory.ACCOUNTS.config_key == "accounts-whitelist"
        assert EnumWhitelistCategory.NODES.config_key == "nodes-whitelist"


@pytest.mark.unit
class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            WhitelistPersistError,
            WhitelistFileSyncError,
            PermissioningConfigurationError,
            WhitelistReloadError,
        ],
    )
    def test_hierarchy(self, exc_class: type[Exception]) -> None:
        assert issubclass(exc_class, PermissioningError)

    def test_persist_error_attributes(self) -> None:
        error = WhitelistPersistError(
            "boom",
            category=EnumWhitelistCategory.ACCOUNTS,
            path=Path("perm.yaml"),
        )
        assert error.message == "boom"
        assert str(error) == "boom"
        assert error.path == Path("perm.yaml")

    def test_sync_error_describes_difference(self) -> None:
        error = WhitelistFileSyncError(
            EnumWhitelistCategory.ACCOUNTS,
            expected=["0xb", "0xa"],
            actual=["0xa", "0xc"],
        )

        assert error.expected == ["0xa", "0xb"]
        assert error.actual == ["0xa", "0xc"]
        assert "accounts-whitelist" in error.message
        assert "missing=['0xb']" in error.message
        assert "unexpected=['0xc']" in error.message


@pytest.mark.unit
class TestModelReloadResult:
    def test_success(self) -> None:
        result = ModelReloadResult()
        assert result.is_success is True
        result.raise_for_error()

    def test_failure_raises_chained(self) -> None:
        cause = PermissioningConfigurationError("Permissions file not found")
        result = ModelReloadResult(cause=cause)

        assert result.is_success is False
        with pytest.raises(WhitelistReloadError, match="not found") as exc_info:
            result.raise_for_error()
        assert exc_info.value.__cause__ is cause
