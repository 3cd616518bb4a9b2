#!/usr/bin/env python3
"""plaidkit CLI - query Plaid accounts and balances."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from plaidkit import credentials
from plaidkit.client import PlaidClient
from plaidkit.errors import MissingCredentialsError
from plaidkit.logger import get_logger
from plaidkit.models import HttpOptions, PlaidConfig, PlaidError
from plaidkit.models.config import TLS_VERSIONS

logger = get_logger()


def exit_with_config_error(message: str) -> None:
    """Exit with error message and auth instruction."""
    logger.error(message)
    logger.error("Please run 'plaidkit auth' to set up credentials.")
    sys.exit(1)


def setup_credentials() -> bool:
    """Prompt for Plaid credentials and store them in the keyring."""
    logger.info("plaidkit credential setup")
    logger.info("=" * 25)

    current_client_id = credentials.get(credentials.KEY_CLIENT_ID)
    current_secret = credentials.get(credentials.KEY_SECRET)

    client_id_prompt = f"Plaid client_id (current: {current_client_id}): " if current_client_id else "Plaid client_id: "
    secret_prompt = f"Plaid secret (current: {credentials.mask(current_secret)}): " if current_secret else "Plaid secret: "

    client_id = input(client_id_prompt).strip() or current_client_id
    secret = input(secret_prompt).strip() or current_secret

    if not client_id:
        logger.error("Plaid client_id is required")
        return False
    if not secret:
        logger.error("Plaid secret is required")
        return False

    try:
        credentials.set_client_id(client_id)
        credentials.set_secret(secret)
    except ValidationError as e:
        for error in e.errors():
            logger.error(f"Invalid credential: {error['msg']}")
        return False

    logger.info("Credentials updated successfully")
    return True


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="plaidkit - Fetch Plaid accounts and balances"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Settings file (default: ~/.plaidkit/config.yml)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("auth", help="Store Plaid client_id and secret in the system keyring")

    accounts_parser = subparsers.add_parser("accounts", help="Fetch accounts for an Item")
    accounts_parser.add_argument("--access-token", required=True, help="Item access token")

    balance_parser = subparsers.add_parser("balance", help="Fetch real-time balances for an Item")
    balance_parser.add_argument("--access-token", required=True, help="Item access token")
    balance_parser.add_argument(
        "--account-id",
        action="append",
        dest="account_ids",
        metavar="ID",
        help="Only return this account (repeatable)"
    )
    balance_parser.add_argument("--timeout", type=float, metavar="SECONDS", help="Connect timeout override")
    balance_parser.add_argument("--recv-timeout", type=float, metavar="SECONDS", help="Read timeout override")
    balance_parser.add_argument(
        "--tls",
        action="append",
        choices=TLS_VERSIONS,
        dest="ssl_versions",
        help="Allowed TLS version (repeatable)"
    )

    return parser


def build_params(access_token: str, account_ids: Optional[List[str]] = None) -> dict:
    params = {"access_token": access_token}
    if account_ids:
        params["options"] = {"account_ids": account_ids}
    return params


def report(result) -> int:
    """Log a result as JSON. Returns the exit status."""
    if isinstance(result, PlaidError):
        logger.error(f"Plaid error {result.error_type} {result.error_code or ''}: {result.error_message}")
        if result.request_id:
            logger.error(f"request_id: {result.request_id}")
        return 1

    logger.info(result.model_dump_json(indent=2, exclude_none=True))
    return 0


def cmd_accounts(client: PlaidClient, access_token: str) -> int:
    """Fetch accounts for an Item."""
    return report(client.accounts.get(build_params(access_token)))


def cmd_balance(
    client: PlaidClient,
    access_token: str,
    account_ids: Optional[List[str]] = None,
    timeout: Optional[float] = None,
    recv_timeout: Optional[float] = None,
    ssl_versions: Optional[List[str]] = None,
) -> int:
    """Fetch balances, applying any transport overrides."""
    params = build_params(access_token, account_ids)
    overrides = {
        key: value
        for key, value in {"timeout": timeout, "recv_timeout": recv_timeout, "ssl_versions": ssl_versions}.items()
        if value
    }

    if not overrides:
        return report(client.accounts.get_balance(params))

    http_options = HttpOptions(**{**client.defaults.http_options.model_dump(exclude_none=True), **overrides})
    return report(client.accounts.get_balance_with_http_options(params, http_options))


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    if args.command == "auth":
        if not setup_credentials():
            sys.exit(1)
        return

    try:
        client = PlaidClient(PlaidConfig.load(args.config))
        commands = {
            "accounts": lambda: cmd_accounts(client, args.access_token),
            "balance": lambda: cmd_balance(
                client, args.access_token, args.account_ids, args.timeout, args.recv_timeout, args.ssl_versions
            ),
        }
        status = commands[args.command]()
    except MissingCredentialsError as e:
        exit_with_config_error(str(e))
    except ValidationError as e:
        logger.error("Invalid configuration or parameters:")
        for error in e.errors():
            field = ".".join(str(part) for part in error['loc'])
            logger.error(f"  {field}: {error['msg']}")
        sys.exit(1)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
