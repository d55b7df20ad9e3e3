"""
Daily health tips notifications.

This module handles:
- Loading the health tip catalog
- Paging through users with a keyset cursor
- Matching tips to users grouped by fitness goal and age
- Sending push notifications via FCM in throttled sub-batches
"""

from .tip_matcher import match_tips_to_users
from .dispatcher import PushDispatcher
from .errors import FetchError

__all__ = [
    'match_tips_to_users',
    'PushDispatcher',
    'FetchError',
]
