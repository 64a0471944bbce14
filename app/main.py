"""Entry point: load profiles from the backend and print them."""

import asyncio
import sys

import structlog

from config.logging_config import setup_logging
from config.settings import settings
from services.profile_client import ProfileClient
from utils.formatting import format_profile, truncate
from workflow.profile_workflow import Notice, ProfileWorkflow

log = structlog.get_logger(__name__)


async def _decline(title: str, message: str) -> bool:
    # Listing never mutates, so nothing should ask for confirmation.
    return False


async def _print_notice(notice: Notice) -> None:
    print(f"{notice.title}: {notice.message}", file=sys.stderr)


async def run() -> int:
    """Fetch and print the profile list. Returns the process exit code."""
    setup_logging()
    log.info("starting_profile_desk", api_base_url=settings.api_base_url)

    client = ProfileClient()
    workflow = ProfileWorkflow(client, confirm=_decline, on_notice=_print_notice)
    try:
        if not await workflow.load():
            return 1
    finally:
        await client.close()

    if not workflow.profiles:
        print("No profiles yet.")
    for profile in workflow.profiles:
        print(truncate(format_profile(profile), 200))
    return 0


def main() -> None:
    """Run the console listing."""
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
