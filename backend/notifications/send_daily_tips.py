"""
CLI script for the daily health tips job.

Matches the tip catalog against every user, one page at a time, and sends
each eligible user at most one push notification. Meant to be triggered
once a day by an external scheduler (09:00 Africa/Cairo).

Usage:
    # Send today's tips
    uv run python -m notifications.send_daily_tips

    # Dry run (match and count, but don't contact FCM)
    uv run python -m notifications.send_daily_tips --dry-run

    # Smaller pages and sub-batches
    uv run python -m notifications.send_daily_tips --page-size 200 --batch-size 50
"""

import argparse
import asyncio
import sys
from typing import Any

from config.settings import (
    PUSH_BATCH_DELAY_SECONDS,
    PUSH_BATCH_SIZE,
    USER_PAGE_SIZE,
)
from models import RunSummary
from models.types import Cursor
from notifications.dispatcher import PushDispatcher
from notifications.error_logger import log_notification_error
from notifications.errors import FetchError
from notifications.push_sender import (
    DryRunPushTransport,
    FirebasePushTransport,
    PushTransport,
)
from notifications.tip_matcher import match_tips_to_users
from notifications.tip_source import fetch_tips
from notifications.user_pages import UserPageSource
from shared.db import get_supabase_client
from shared.utils import print_summary, run_date


class DailyTipRun:
    """
    One run of the daily tips job.

    The summary is only updated here, after a page's dispatch has fully
    settled, and stays readable on the instance if the run aborts.
    """

    def __init__(
        self,
        supabase: Any,
        transport: PushTransport,
        page_size: int = USER_PAGE_SIZE,
        batch_size: int = PUSH_BATCH_SIZE,
        batch_delay: float = PUSH_BATCH_DELAY_SECONDS,
    ):
        self.supabase = supabase
        self.pages = UserPageSource(supabase, page_size=page_size)
        self.dispatcher = PushDispatcher(
            transport, batch_size=batch_size, batch_delay=batch_delay
        )
        self.summary = RunSummary()

    async def run(self) -> RunSummary:
        """
        Process every page of users.

        Returns:
            Final run summary

        Raises:
            FetchError: If tips or a page of users could not be read
        """
        print(f"Executing daily health tips run for {run_date()}")
        cursor: Cursor | None = None

        try:
            tips = await asyncio.to_thread(fetch_tips, self.supabase)
            if not tips:
                print("No health tips found in the database.")
                return self.summary
            self.summary.tips_loaded = len(tips)
            print(f"Loaded {len(tips)} health tips")

            while True:
                users, next_cursor = await asyncio.to_thread(
                    self.pages.next_page, cursor
                )
                if next_cursor is None:
                    print(
                        "Finished processing all users. "
                        f"Total processed: {self.summary.users_processed}"
                    )
                    break

                notifications = list(match_tips_to_users(tips, users).values())
                if notifications:
                    print(
                        f"\nProcessing page {self.summary.pages_processed + 1}: "
                        f"{len(users)} users, {len(notifications)} notifications"
                    )
                outcomes = await self.dispatcher.dispatch(notifications)

                self.summary.record_page(len(users))
                self.summary.record_outcomes(outcomes)
                cursor = next_cursor

        except FetchError as e:
            print(f"✗ Daily health tips run failed: {e}")
            print_summary(self.summary, title="Daily Health Tips Aborted")
            error_file = log_notification_error(
                error_type="fetch",
                error_message=str(e),
                context={
                    "run_date": run_date(),
                    "last_cursor": cursor,
                    **self.summary.model_dump(),
                },
            )
            print(f"  Error details logged to: {error_file}")
            raise

        print_summary(self.summary)
        return self.summary


def send_daily_tips(
    dry_run: bool = False,
    page_size: int = USER_PAGE_SIZE,
    batch_size: int = PUSH_BATCH_SIZE,
    batch_delay: float = PUSH_BATCH_DELAY_SECONDS,
) -> RunSummary:
    """
    Run the daily tips job against the configured Supabase project.

    Args:
        dry_run: If True, don't actually send notifications
        page_size: Users fetched per page
        batch_size: Notifications sent concurrently per sub-batch
        batch_delay: Seconds to pause between sub-batches

    Returns:
        Final run summary
    """
    transport: PushTransport
    if dry_run:
        print("[DRY RUN] Notifications will not be sent")
        transport = DryRunPushTransport()
    else:
        transport = FirebasePushTransport()

    run = DailyTipRun(
        get_supabase_client(),
        transport,
        page_size=page_size,
        batch_size=batch_size,
        batch_delay=batch_delay,
    )
    return asyncio.run(run.run())


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Match health tips to users and send push notifications"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Dry run mode (don't actually send notifications)",
    )

    parser.add_argument(
        "--page-size",
        type=int,
        default=USER_PAGE_SIZE,
        help=f"Users fetched per page (default: {USER_PAGE_SIZE})",
    )

    parser.add_argument(
        "--batch-size",
        type=int,
        default=PUSH_BATCH_SIZE,
        help=f"Notifications sent concurrently per sub-batch (default: {PUSH_BATCH_SIZE})",
    )

    parser.add_argument(
        "--batch-delay",
        type=float,
        default=PUSH_BATCH_DELAY_SECONDS,
        help=f"Seconds to wait between sub-batches (default: {PUSH_BATCH_DELAY_SECONDS})",
    )

    args = parser.parse_args()

    if args.page_size <= 0:
        parser.error("--page-size must be positive")
    if args.batch_size <= 0:
        parser.error("--batch-size must be positive")
    if args.batch_delay < 0:
        parser.error("--batch-delay must not be negative")

    try:
        send_daily_tips(
            dry_run=args.dry_run,
            page_size=args.page_size,
            batch_size=args.batch_size,
            batch_delay=args.batch_delay,
        )
    except FetchError:
        sys.exit(1)


if __name__ == "__main__":
    main()
