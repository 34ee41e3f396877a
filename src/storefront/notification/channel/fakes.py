"""In-memory channel adapters.

They record what would have been delivered and can be switched into a
failing mode, which is how tests and local runs exercise the dispatcher.
"""

from uuid import uuid4

from storefront.notification.channel.ports import EmailPort, SMSPort


class RecordingAdapter:
    prefix = "msg"
    default_failure = "delivery failed"

    def __init__(self):
        self.sent: list[dict] = []
        self.reset()

    def configure(self, should_succeed: bool = True, failure_reason: str | None = None):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason or self.default_failure

    def reset(self):
        self.sent.clear()
        self.configure()

    def _record(self, **message) -> dict:
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"{self.prefix}-{uuid4().hex[:12]}"
        self.sent.append({"message_id": message_id, **message})
        return {"message_id": message_id, "status": "sent"}


class FakeSMSAdapter(RecordingAdapter, SMSPort):
    prefix = "sms"
    default_failure = "SMS delivery failed"

    def send(self, to: str, body: str) -> dict:
        return self._record(to=to, body=body)


class FakeEmailAdapter(RecordingAdapter, EmailPort):
    prefix = "email"
    default_failure = "Email delivery failed"

    def send(self, to: str, subject: str, body: str) -> dict:
        return self._record(to=to, subject=subject, body=body)
