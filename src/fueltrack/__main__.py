"""Command-line entry point: ``fueltrack`` / ``python -m fueltrack``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from fueltrack.app import FuelTrackApp
from fueltrack.client import FuelTrackClient
from fueltrack.config import FuelTrackConfig
from fueltrack.exceptions import FuelTrackConfigError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fueltrack", description="Track vehicle fuel-ups from the terminal")
    parser.add_argument("--base-url", help="API base URL (default: $FUELTRACK_BASE_URL)")
    parser.add_argument("--username", "-u", help="Prefill the login username (default: $FUELTRACK_USERNAME)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds (default: 15)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


async def run(config: FuelTrackConfig) -> int:
    async with FuelTrackClient(config) as client:
        app = FuelTrackApp(client, username=config.username, password=config.password)
        return await app.run()


def log_level(verbose: bool) -> int:
    """Root log level for the CLI: DEBUG with ``-v``, otherwise WARNING."""
    return logging.DEBUG if verbose else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=log_level(args.verbose),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = FuelTrackConfig.from_env(
            base_url=args.base_url,
            username=args.username,
            timeout=args.timeout,
        )
    except FuelTrackConfigError as exc:
        print(f"fueltrack: {exc}", file=sys.stderr)
        return 1

    try:
        return asyncio.run(run(config))
    except KeyboardInterrupt:
        print("\nAborted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
