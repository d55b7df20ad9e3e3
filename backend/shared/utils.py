from datetime import datetime
from typing import Iterator, Sequence, TypeVar
from zoneinfo import ZoneInfo

from config.settings import RUN_TIMEZONE
from models import RunSummary

T = TypeVar("T")


def run_date(tz_name: str = RUN_TIMEZONE) -> str:
    """Today's date (YYYY-MM-DD) in the timezone the job is scheduled in."""
    return datetime.now(ZoneInfo(tz_name)).date().isoformat()


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of at most `size` items."""
    if size <= 0:
        raise ValueError("size must be positive")
    for start in range(0, len(items), size):
        yield items[start : start + size]


def print_summary(summary: RunSummary, title: str = "Daily Health Tips Complete") -> None:
    """Print run summary."""
    print(f"\n{'=' * 60}")
    print(f"[{datetime.now()}] {title}")
    print(f"{'=' * 60}")
    print(f"Tips loaded:         {summary.tips_loaded}")
    print(f"Pages processed:     {summary.pages_processed}")
    print(f"Users processed:     {summary.users_processed}")
    print(f"✓ Notifications sent:   {summary.notifications_sent}")
    print(f"✗ Notifications failed: {summary.notifications_failed}")
    print(f"{'=' * 60}\n")
