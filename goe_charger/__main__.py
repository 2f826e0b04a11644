"""Example: print the latest status of a charger.

    python -m goe_charger 192.168.0.42
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .charger import GoECharger
from .connection.http import DirectHttpChargerConnection
from .exceptions import ChargerError


async def _run(host: str) -> int:
    async with GoECharger(DirectHttpChargerConnection(host)) as charger:
        try:
            status = await charger.latest_status()
        except ChargerError as err:
            print(f"error: {err}", file=sys.stderr)
            return 1
    print(status)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the status of a go-e charger")
    parser.add_argument("host", help="Charger hostname or IP")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (DEBUG) logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(logging.DEBUG if args.verbose else logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    return asyncio.run(_run(args.host))


if __name__ == "__main__":
    sys.exit(main())
