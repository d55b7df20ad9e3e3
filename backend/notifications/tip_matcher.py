"""
Tip matching logic for the daily health tips job.

Matches the tip catalog against one page of users. Users are bucketed by
(fitness goal, age) first so each tip is compared against group keys rather
than against every user.
"""

from typing import Iterable, Sequence

from config.settings import TIP_CLICK_ACTION
from models import GroupKey, NotificationData, PushNotification, Tip, User
from models.types import UserID


def group_eligible_users(users: Iterable[User]) -> dict[GroupKey, list[User]]:
    """
    Bucket eligible users by (fitness_goal, age).

    Users missing a goal, age or push token are left out. Groups and the
    users inside them keep the order in which they were first seen.

    Args:
        users: One page of users

    Returns:
        Dictionary mapping group key to the group's users
    """
    groups: dict[GroupKey, list[User]] = {}
    for user in users:
        if not user.is_eligible:
            continue
        groups.setdefault(user.group_key, []).append(user)
    return groups


def tip_matches_group(tip: Tip, key: GroupKey) -> bool:
    """Check if a group's goal equals the tip's target goal and its age is in range."""
    return key.fitness_goal == tip.target_goal and tip.covers_age(key.age)


def build_tip_notification(
    tip: Tip, user: User, click_action: str = TIP_CLICK_ACTION
) -> PushNotification:
    """Build the push message delivering `tip` to `user`."""
    return PushNotification(
        token=user.fcm_token,
        title=f"Your Daily {tip.target_goal} Tip!",
        body=tip.body,
        data=NotificationData(tip_id=tip.id, click_action=click_action),
    )


def match_tips_to_users(
    tips: Sequence[Tip], users: Sequence[User]
) -> dict[UserID, PushNotification]:
    """
    Assign at most one tip to each eligible user of a page.

    Tips are processed in catalog order. For every group a tip matches, the
    tip goes to the first user in that group without an assignment yet, so a
    tip reaches at most one user per group. A user keeps the first tip
    assigned to them; later tips never replace it.

    Args:
        tips: Tip catalog
        users: One page of users

    Returns:
        Dictionary mapping user ID to that user's notification, in assignment order
    """
    assignments: dict[UserID, PushNotification] = {}
    if not tips or not users:
        return assignments

    groups = group_eligible_users(users)

    for tip in tips:
        for key, members in groups.items():
            if not tip_matches_group(tip, key):
                continue

            for user in members:
                if user.id not in assignments:
                    assignments[user.id] = build_tip_notification(tip, user)
                    break  # One user per group per tip

    return assignments
