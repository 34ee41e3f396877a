"""Process-wide notification channels, keyed by NotificationChannel value.

In-memory adapters are installed on first use; a deployment with real
gateways registers its own adapters with ``set_channel`` at startup.
"""

from enum import Enum


class NotificationChannel(Enum):
    EMAIL = "Email"
    SMS = "SMS"


_channels: dict[str, object] = {}


def _default_adapter(channel_type: str):
    from storefront.notification.channel.fakes import FakeEmailAdapter, FakeSMSAdapter

    defaults = {
        NotificationChannel.EMAIL.value: FakeEmailAdapter,
        NotificationChannel.SMS.value: FakeSMSAdapter,
    }
    if channel_type not in defaults:
        raise ValueError(f"Unknown channel type: {channel_type}")
    return defaults[channel_type]()


def get_channel(channel_type: str):
    if channel_type not in _channels:
        _channels[channel_type] = _default_adapter(channel_type)
    return _channels[channel_type]


def set_channel(channel_type: str, adapter) -> None:
    NotificationChannel(channel_type)
    _channels[channel_type] = adapter


def reset_channels():
    _channels.clear()
