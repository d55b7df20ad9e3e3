"""Pydantic models for push notifications and run accounting."""

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from models.types import PushToken, TipID


class NotificationData(BaseModel):
    """Data payload delivered alongside the visible notification."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    tip_id: TipID
    click_action: str

    def as_fcm_data(self) -> dict[str, str]:
        """FCM data payloads only accept string values."""
        return {"tipId": str(self.tip_id), "click_action": self.click_action}


class PushNotification(BaseModel):
    """One push message addressed to a single device token."""

    model_config = ConfigDict(frozen=True)

    token: PushToken = Field(..., min_length=1)
    title: str
    body: str
    data: NotificationData


class DispatchOutcome(BaseModel):
    """Result of a single send attempt."""

    success: bool
    token: PushToken
    message_id: str | None = None
    error: str | None = None


class RunSummary(BaseModel):
    """Counters for one daily tips run."""

    tips_loaded: int = 0
    pages_processed: int = 0
    users_processed: int = 0
    notifications_sent: int = 0
    notifications_failed: int = 0

    @property
    def notifications_attempted(self) -> int:
        return self.notifications_sent + self.notifications_failed

    def record_page(self, user_count: int) -> None:
        self.pages_processed += 1
        self.users_processed += user_count

    def record_outcomes(self, outcomes: Iterable[DispatchOutcome]) -> None:
        for outcome in outcomes:
            if outcome.success:
                self.notifications_sent += 1
            else:
                self.notifications_failed += 1
