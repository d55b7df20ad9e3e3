"""
Cursor-based pagination over the users table.

Pages are ordered by user ID and each request starts after the last ID of
the previous page, so no user is skipped or repeated as long as IDs are
stable while the run is in progress.
"""

from typing import Any

from pydantic import ValidationError

from config.settings import USER_PAGE_SIZE, USERS_TABLE
from models import User
from models.types import Cursor
from notifications.errors import FetchError

USER_COLUMNS = "id, fitness_goal, age, fcm_token"


class UserPageSource:
    """Reads users one bounded page at a time."""

    def __init__(
        self,
        supabase: Any,
        page_size: int = USER_PAGE_SIZE,
        table: str = USERS_TABLE,
    ):
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self.supabase = supabase
        self.page_size = page_size
        self.table = table

    def next_page(self, cursor: Cursor | None = None) -> tuple[list[User], Cursor | None]:
        """
        Fetch the page of users that follows `cursor`.

        Args:
            cursor: ID of the last user already read, or None for the first page

        Returns:
            (users, next_cursor). next_cursor is None once a page comes back empty.

        Rows that fail validation are kept as ID-only users, which are never
        eligible, so they still count as processed and the cursor moves past
        them.

        Raises:
            FetchError: If the query fails or the last row has no ID to resume from
        """
        try:
            query = (
                self.supabase.table(self.table)
                .select(USER_COLUMNS)
                .order("id", desc=False)
            )
            if cursor is not None:
                query = query.gt("id", cursor)
            response = query.limit(self.page_size).execute()
        except Exception as e:
            raise FetchError(
                f"Could not fetch users after cursor {cursor!r}: {e}"
            ) from e

        rows = response.data or []
        if not rows:
            return [], None

        next_cursor = rows[-1].get("id")
        if next_cursor is None:
            raise FetchError(f"User row after cursor {cursor!r} has no id")

        users = []
        for row in rows:
            user = _parse_user(row)
            if user is not None:
                users.append(user)

        return users, next_cursor


def _parse_user(row: dict[str, Any]) -> User | None:
    """Validate one row, falling back to an ineligible ID-only user."""
    try:
        return User.model_validate(row)
    except ValidationError as e:
        print(
            f"  ⚠️  Excluding malformed user {row.get('id')!r}: "
            f"{e.error_count()} invalid field(s)"
        )

    # Only rows without a usable id are dropped outright
    try:
        return User(id=row.get("id"))
    except ValidationError:
        return None

