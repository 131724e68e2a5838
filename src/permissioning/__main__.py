# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Account Whitelist CLI.

Inspects and edits the account whitelist held in a permissions file, going
through the same validation and verify/write/verify protocol as the API.

The permissions file defaults to PERMISSIONING_ACCOUNT_CONFIG_FILE (or
permissions_config.yaml) unless overridden with --config.

Usage:
    python -m permissioning list
    python -m permissioning check 0xfe3b557e8fb62b89f4916b721be55ceb828dbd73
    python -m permissioning add 0xfe3b...bd73 0x627306090abab3a6e1400e9345bc60c78a8bef57
    python -m permissioning remove 0xfe3b...bd73
    python -m permissioning --config custom_permissions.yaml --json list

Exit Codes:
    0 - Success
    1 - Request rejected, persistence failed, or account not whitelisted
    2 - Error: CLI usage error, invalid settings or invalid permissions file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from permissioning.config_builder import build_permissioning_config
from permissioning.controller import AccountWhitelistController
from permissioning.exceptions import PermissioningConfigurationError
from permissioning.settings import PermissioningSettings

# JSON output indentation (spaces)
JSON_INDENT_SPACES = 2

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m permissioning",
        description="Inspect and edit the account whitelist of a permissions file.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Permissions file (default: PERMISSIONING_ACCOUNT_CONFIG_FILE)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="List whitelisted accounts")

    check = subparsers.add_parser("check", help="Check whether an account is whitelisted")
    check.add_argument("account")

    add = subparsers.add_parser("add", help="Add accounts to the whitelist")
    add.add_argument("accounts", nargs="+")

    remove = subparsers.add_parser("remove", help="Remove accounts from the whitelist")
    remove.add_argument("accounts", nargs="+")

    return parser


def _emit(payload: dict[str, Any], text: str, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, indent=JSON_INDENT_SPACES))
    else:
        print(text)


def _load_controller(config_file: Path) -> AccountWhitelistController:
    """Build a controller for the account whitelist in ``config_file``.

    Account whitelisting is always enabled here: the CLI exists to manage it.
    """
    config = build_permissioning_config(
        node_whitelist_enabled=False,
        node_config_file_path=None,
        account_whitelist_enabled=True,
        account_config_file_path=config_file,
    )
    return AccountWhitelistController.from_config(config)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = PermissioningSettings()
    except ValidationError as e:
        message = f"Invalid PERMISSIONING_* settings: {e}"
        _emit({"error": message}, f"Error: {message}", args.json)
        return EXIT_ERROR

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )

    config_file = args.config or settings.account_config_file
    try:
        controller = _load_controller(config_file)
    except PermissioningConfigurationError as e:
        _emit({"error": e.message}, f"Error: {e.message}", args.json)
        return EXIT_ERROR

    if args.command == "list":
        accounts = controller.current_whitelist()
        text = "\n".join(accounts) if accounts else "(no accounts whitelisted)"
        _emit({"accounts": accounts}, text, args.json)
        return EXIT_SUCCESS

    if args.command == "check":
        whitelisted = controller.contains(args.account)
        state = "whitelisted" if whitelisted else "not whitelisted"
        _emit(
            {"account": args.account, "whitelisted": whitelisted},
            f"{args.account}: {state}",
            args.json,
        )
        return EXIT_SUCCESS if whitelisted else EXIT_FAILURE

    if args.command == "add":
        result = controller.add_accounts(args.accounts)
    else:
        result = controller.remove_accounts(args.accounts)

    _emit(
        {"command": args.command, "result": result.value},
        f"{args.command}: {result.value}",
        args.json,
    )
    return EXIT_SUCCESS if result.is_success else EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
