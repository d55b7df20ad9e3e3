"""
Loading the health tip catalog.

The catalog is small, so it is read in one request at the start of a run.
"""

from typing import Any

from pydantic import ValidationError

from config.settings import TIPS_TABLE
from models import Tip
from notifications.errors import FetchError


def fetch_tips(supabase: Any, table: str = TIPS_TABLE) -> list[Tip]:
    """
    Fetch every health tip, in table order.

    Args:
        supabase: Supabase client
        table: Name of the tips table

    Returns:
        List of validated tips (empty if the table has no rows)

    Raises:
        FetchError: If the query fails or a row is malformed
    """
    try:
        response = (
            supabase.table(table)
            .select("*")
            .order("id", desc=False)
            .execute()
        )
    except Exception as e:
        raise FetchError(f"Could not fetch tips from '{table}': {e}") from e

    try:
        return [Tip.model_validate(row) for row in response.data or []]
    except ValidationError as e:
        raise FetchError(f"Malformed tip row in '{table}': {e}") from e
