"""Tests for channel adapters and the channel registry."""

import pytest
from storefront.notification.channel import NotificationChannel, get_channel, reset_channels, set_channel
from storefront.notification.channel.fakes import FakeEmailAdapter, FakeSMSAdapter
from storefront.notification.channel.ports import EmailPort, SMSPort


class TestFakeEmailAdapter:
    def setup_method(self):
        self.adapter = FakeEmailAdapter()

    def test_send_records_email(self):
        result = self.adapter.send(to="test@example.com", subject="Hi", body="Hello!")
        assert result["status"] == "sent"
        assert result["message_id"].startswith("email-")
        assert self.adapter.sent[0]["to"] == "test@example.com"

    def test_send_failure(self):
        self.adapter.configure(should_succeed=False, failure_reason="SMTP error")
        result = self.adapter.send(to="a@b.com", subject="Hi", body="Hello")
        assert result["status"] == "failed"
        assert result["error"] == "SMTP error"
        assert self.adapter.sent == []

    def test_reset(self):
        self.adapter.send(to="a@b.com", subject="Hi", body="Hello")
        self.adapter.configure(should_succeed=False)
        self.adapter.reset()
        assert self.adapter.sent == []
        assert self.adapter.should_succeed is True


class TestFakeSMSAdapter:
    def setup_method(self):
        self.adapter = FakeSMSAdapter()

    def test_send_records_message(self):
        result = self.adapter.send(to="+15551234567", body="Your order was placed")
        assert result["status"] == "sent"
        assert self.adapter.sent[0]["to"] == "+15551234567"

    def test_send_failure(self):
        self.adapter.configure(should_succeed=False)
        result = self.adapter.send(to="+15551234567", body="Hello")
        assert result["status"] == "failed"
        assert result["error"] == "SMS delivery failed"

    def test_reset(self):
        self.adapter.send(to="+1555", body="Hi")
        self.adapter.reset()
        assert self.adapter.sent == []


class TestChannelRegistry:
    def test_fakes_implement_ports(self):
        assert isinstance(get_channel(NotificationChannel.SMS.value), SMSPort)
        assert isinstance(get_channel(NotificationChannel.EMAIL.value), EmailPort)

    def test_channels_are_singletons(self):
        assert get_channel("SMS") is get_channel("SMS")

    def test_reset_channels(self):
        first = get_channel("Email")
        reset_channels()
        assert get_channel("Email") is not first

    def test_unknown_channel(self):
        with pytest.raises(ValueError, match="Unknown channel type"):
            get_channel("Pigeon")

    def test_set_channel_replaces_adapter(self):
        adapter = FakeSMSAdapter()
        set_channel("SMS", adapter)
        assert get_channel("SMS") is adapter

    def test_set_channel_rejects_unknown_type(self):
        with pytest.raises(ValueError):
            set_channel("Pigeon", FakeSMSAdapter())
