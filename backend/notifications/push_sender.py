"""
Push notification sending via Firebase Cloud Messaging.

Every send returns a DispatchOutcome; delivery errors are captured as
failed outcomes instead of being raised, so one bad token never affects
the other messages of a batch.
"""

from abc import ABC, abstractmethod
from typing import Any

from firebase_admin import messaging

from models import DispatchOutcome, PushNotification
from shared.firebase import get_firebase_app


class PushTransport(ABC):
    """Delivers a single push notification."""

    @abstractmethod
    def send(self, notification: PushNotification) -> DispatchOutcome:
        """Send one notification. Must not raise on delivery failure."""


def build_fcm_message(notification: PushNotification) -> messaging.Message:
    """Convert a PushNotification into an FCM message."""
    return messaging.Message(
        token=notification.token,
        notification=messaging.Notification(
            title=notification.title,
            body=notification.body,
        ),
        data=notification.data.as_fcm_data(),
    )


class FirebasePushTransport(PushTransport):
    """Sends notifications through firebase-admin."""

    def __init__(self, app: Any = None):
        self._app = app

    @property
    def app(self) -> Any:
        if self._app is None:
            self._app = get_firebase_app()
        return self._app

    def send(self, notification: PushNotification) -> DispatchOutcome:
        try:
            message_id = messaging.send(build_fcm_message(notification), app=self.app)
            return DispatchOutcome(
                success=True, token=notification.token, message_id=message_id
            )
        except Exception as e:
            # FirebaseError for rejected/unregistered tokens, ValueError for malformed ones
            return DispatchOutcome(
                success=False, token=notification.token, error=str(e)
            )


class DryRunPushTransport(PushTransport):
    """Records notifications instead of sending them."""

    def __init__(self):
        self.sent: list[PushNotification] = []

    def send(self, notification: PushNotification) -> DispatchOutcome:
        self.sent.append(notification)
        return DispatchOutcome(
            success=True, token=notification.token, message_id="dry-run"
        )
