"""Pydantic models for data validation and type checking."""

from models.notification import (
    DispatchOutcome,
    NotificationData,
    PushNotification,
    RunSummary,
)
from models.tip import GroupKey, Tip, User

__all__ = [
    "Tip",
    "User",
    "GroupKey",
    "NotificationData",
    "PushNotification",
    "DispatchOutcome",
    "RunSummary",
]
