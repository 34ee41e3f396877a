"""Notification dispatcher: best-effort delivery on a detached worker pool.

Jobs run on a process-owned thread pool, so a request that has already
returned (or whose client disconnected) cannot cancel them. Each job makes a
single delivery attempt; failures are logged as NotificationError and never
reach the operation that triggered them.
"""

from concurrent.futures import Future, ThreadPoolExecutor

import structlog

from storefront.exceptions import NotificationError
from storefront.notification.channel import NotificationChannel, get_channel
from storefront.notification.templates import OrderConfirmationTemplate
from storefront.utils import settings

logger = structlog.get_logger(__name__)


def _deliver(channel: str, send, payload: dict) -> dict:
    try:
        result = send(**payload)
    except Exception as exc:
        raise NotificationError(str(exc), channel=channel) from exc

    if result.get("status") != "sent":
        raise NotificationError(result.get("error") or "Unknown dispatch error", channel=channel)
    return result


class NotificationDispatcher:
    def __init__(self, max_workers: int | None = None, sms=None, email=None):
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers or settings.notification_workers(),
            thread_name_prefix="notification",
        )
        self._sms = sms
        self._email = email

    @property
    def sms(self):
        return self._sms or get_channel(NotificationChannel.SMS.value)

    @property
    def email(self):
        return self._email or get_channel(NotificationChannel.EMAIL.value)

    def submit(self, channel: str, send, **payload) -> Future:
        """Queue one delivery attempt and return immediately."""
        future = self._executor.submit(_deliver, channel, send, payload)
        future.add_done_callback(_log_outcome)
        return future

    def notify_order_placed(self, order, email: str | None = None, phone: str | None = None) -> list[Future]:
        """Queue the SMS and email confirmations for a committed order."""
        content = OrderConfirmationTemplate.render({"order_id": str(order.id), "total_amount": order.total_amount})

        futures = []
        if phone:
            futures.append(self.submit(NotificationChannel.SMS.value, self.sms.send, to=phone, body=content["sms_body"]))
        else:
            logger.info("No phone number for order confirmation, SMS skipped", order_id=str(order.id))

        if email:
            futures.append(
                self.submit(
                    NotificationChannel.EMAIL.value,
                    self.email.send,
                    to=email,
                    subject=content["subject"],
                    body=content["email_body"],
                )
            )
        else:
            logger.info("No email address for order confirmation, email skipped", order_id=str(order.id))

        return futures

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)


def _log_outcome(future: Future) -> None:
    if future.cancelled():
        logger.warning("Notification delivery cancelled")
        return

    error = future.exception()
    if error is not None:
        logger.error(
            "Notification delivery failed",
            channel=getattr(error, "channel", None),
            error=str(error),
        )
        return

    logger.info("Notification delivered", message_id=future.result().get("message_id"))


_dispatcher: NotificationDispatcher | None = None


def get_dispatcher() -> NotificationDispatcher:
    """Return the process-wide dispatcher, creating it on first use."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = NotificationDispatcher()
    return _dispatcher


def shutdown_dispatcher(wait: bool = True) -> None:
    """Drain and discard the process-wide dispatcher."""
    global _dispatcher
    if _dispatcher is not None:
        _dispatcher.shutdown(wait=wait)
        _dispatcher = None
