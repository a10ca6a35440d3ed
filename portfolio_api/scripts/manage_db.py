"""
Database maintenance commands

    python -m portfolio_api.scripts.manage_db reset
    python -m portfolio_api.scripts.manage_db clear-content
"""

import argparse
import asyncio
import logging
import sys

from portfolio_api.core.config import settings
from portfolio_api.core.database import Store
from portfolio_api.services.bootstrap import clear_content, reset_database

logger = logging.getLogger(__name__)

COMMANDS = {
    "reset": reset_database,
    "clear-content": clear_content,
}


async def run(command: str) -> None:
    store = Store(settings)
    await store.initialize()
    try:
        await COMMANDS[command](store)
    finally:
        await store.close()


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Portfolio database maintenance")
    p.add_argument(
        "command",
        choices=sorted(COMMANDS),
        help="reset: empty every table and reseed; clear-content: delete projects, posts and testimonials",
    )
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("Running %s on %s", args.command, settings.DB_PATH)
    asyncio.run(run(args.command))
    return 0


if __name__ == "__main__":
    sys.exit(main())
