#!/usr/bin/env python
"""A command-line smoke check against the configured exchange host.

Pings the REST API, prints the clock skew between this machine and the
exchange and, when API credentials are stored in the keyring, verifies that
they are accepted by fetching the account.

Usage:
    python scripts/check_connectivity.py [--verbose]
"""

import argparse
import asyncio
import sys

import httpx
from loguru import logger

from binance_rest.account import Account
from binance_rest.client import Client
from binance_rest.config import Settings
from binance_rest.errors import AuthError, BinanceClientError
from binance_rest.logging_config import setup_logging
from binance_rest.market import Market
from binance_rest.utils.time import get_current_ms, ms_to_datetime


async def run(settings: Settings) -> int:
    async with httpx.AsyncClient(timeout=settings.api.timeout_s) as http_client:
        client = Client.from_settings(settings, http_client=http_client)
        market = Market(client)

        await market.ping()
        server_ms = await market.get_server_time()
        skew_ms = get_current_ms() - server_ms
        logger.info(
            f"Reached {client.base_url}; server time "
            f"{ms_to_datetime(server_ms).isoformat()}, clock skew {skew_ms} ms"
        )

        if not client.api_key:
            logger.warning("No API key in keyring; skipping account check.")
            return 0

        try:
            account = await Account(client).get_account()
        except AuthError:
            logger.error("Credentials were rejected by the exchange.")
            return 2
        balances = account.get("balances", [])
        logger.success(f"Credentials accepted; {len(balances)} balances.")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")
    args = parser.parse_args()

    settings = Settings.get_instance()
    console_level = "DEBUG" if args.verbose else settings.general.log_level_console
    setup_logging(console_level=console_level)

    try:
        return asyncio.run(run(settings))
    except BinanceClientError as e:
        logger.error(f"Connectivity check failed: {type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
