"""
Throttled fan-out of push notifications.

Notifications are sent in fixed-size sub-batches. All sends of a sub-batch
run concurrently and are awaited together before the next sub-batch starts,
with a short pause in between to stay under FCM rate limits.
"""

import asyncio
from typing import Awaitable, Callable, Sequence

from config.settings import PUSH_BATCH_DELAY_SECONDS, PUSH_BATCH_SIZE
from models import DispatchOutcome, PushNotification
from notifications.error_logger import log_notification_error
from notifications.push_sender import PushTransport
from shared.utils import chunked


class PushDispatcher:
    """
    Sends notifications through a transport in throttled sub-batches.

    Each send runs in a worker thread via asyncio.to_thread, so the number of
    sends actually in flight is capped by the event loop's default executor
    (min(32, cpu_count + 4) threads) as well as by batch_size.
    """

    def __init__(
        self,
        transport: PushTransport,
        batch_size: int = PUSH_BATCH_SIZE,
        batch_delay: float = PUSH_BATCH_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.transport = transport
        self.batch_size = batch_size
        self.batch_delay = batch_delay
        self._sleep = sleep

    async def _send_one(self, notification: PushNotification) -> DispatchOutcome:
        try:
            return await asyncio.to_thread(self.transport.send, notification)
        except Exception as e:
            # Transports should not raise, but a raise must still count as a failure
            return DispatchOutcome(
                success=False, token=notification.token, error=str(e)
            )

    async def dispatch(
        self, notifications: Sequence[PushNotification]
    ) -> list[DispatchOutcome]:
        """
        Send every notification exactly once.

        Args:
            notifications: Notifications for one page of users

        Returns:
            One outcome per notification, in input order
        """
        outcomes: list[DispatchOutcome] = []
        batches = list(chunked(notifications, self.batch_size))

        for index, batch in enumerate(batches):
            results = await asyncio.gather(*(self._send_one(n) for n in batch))
            outcomes.extend(results)

            failures = [r for r in results if not r.success]
            for failure in failures:
                print(f"  ✗ Failed to send message to token {failure.token}: {failure.error}")
            if failures:
                error_file = log_notification_error(
                    error_type="sending",
                    error_message=f"Failed to send {len(failures)} of {len(batch)} notification(s)",
                    context={
                        "sub_batch": f"{index + 1}/{len(batches)}",
                        "failures": [
                            {"token": f.token, "error": f.error} for f in failures
                        ],
                    },
                )
                print(f"    Error details logged to: {error_file}")

            # Rate limiting between sub-batches
            if index + 1 < len(batches):
                await self._sleep(self.batch_delay)

        return outcomes
