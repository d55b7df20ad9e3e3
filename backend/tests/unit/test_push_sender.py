"""
Unit tests for notifications/push_sender.py

Tests FCM message construction and that delivery errors come back as
failed outcomes rather than exceptions.
"""

import unittest
from unittest.mock import Mock, patch

from firebase_admin import exceptions as firebase_exceptions

from notifications.push_sender import (
    DryRunPushTransport,
    FirebasePushTransport,
    build_fcm_message,
)
from tests.fixtures.tip_factory import create_test_push_notification


class TestBuildFcmMessage(unittest.TestCase):
    """Tests for build_fcm_message()"""

    def test_message_fields(self):
        notification = create_test_push_notification(token="tok-1", tip_id="t9")

        message = build_fcm_message(notification)

        self.assertEqual(message.token, "tok-1")
        self.assertEqual(message.notification.title, "Your Daily weight_loss Tip!")
        self.assertEqual(
            message.notification.body, "Drink a glass of water before every meal."
        )
        self.assertEqual(
            message.data,
            {"tipId": "t9", "click_action": "FLUTTER_NOTIFICATION_CLICK"},
        )


class TestFirebasePushTransport(unittest.TestCase):
    """Tests for FirebasePushTransport.send()"""

    def setUp(self):
        self.app = Mock()
        self.transport = FirebasePushTransport(app=self.app)

    @patch("notifications.push_sender.messaging.send")
    def test_success(self, mock_send):
        mock_send.return_value = "projects/demo/messages/1"

        outcome = self.transport.send(create_test_push_notification(token="tok-1"))

        self.assertTrue(outcome.success)
        self.assertEqual(outcome.token, "tok-1")
        self.assertEqual(outcome.message_id, "projects/demo/messages/1")
        self.assertIsNone(outcome.error)
        self.assertIs(mock_send.call_args.kwargs["app"], self.app)

    @patch("notifications.push_sender.messaging.send")
    def test_firebase_error_captured(self, mock_send):
        mock_send.side_effect = firebase_exceptions.NotFoundError(
            "Requested entity was not found."
        )

        outcome = self.transport.send(create_test_push_notification(token="stale"))

        self.assertFalse(outcome.success)
        self.assertEqual(outcome.token, "stale")
        self.assertIn("not found", outcome.error)

    @patch("notifications.push_sender.messaging.send")
    def test_value_error_captured(self, mock_send):
        """Malformed tokens raise ValueError inside firebase-admin"""
        mock_send.side_effect = ValueError("Invalid registration token")

        outcome = self.transport.send(create_test_push_notification())

        self.assertFalse(outcome.success)
        self.assertEqual(outcome.error, "Invalid registration token")

    @patch("notifications.push_sender.get_firebase_app")
    def test_app_initialized_lazily(self, mock_get_app):
        transport = FirebasePushTransport()

        mock_get_app.assert_not_called()
        self.assertIs(transport.app, mock_get_app.return_value)
        transport.app
        mock_get_app.assert_called_once()


class TestDryRunPushTransport(unittest.TestCase):
    """Tests for DryRunPushTransport"""

    @patch("notifications.push_sender.messaging.send")
    def test_records_without_sending(self, mock_send):
        transport = DryRunPushTransport()
        notification = create_test_push_notification()

        outcome = transport.send(notification)

        self.assertTrue(outcome.success)
        self.assertEqual(transport.sent, [notification])
        mock_send.assert_not_called()


if __name__ == "__main__":
    unittest.main()
