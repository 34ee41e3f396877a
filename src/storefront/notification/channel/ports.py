"""Outbound ports for order confirmations.

An adapter's ``send`` returns a delivery receipt: a dict whose ``status`` is
``"sent"`` (with a ``message_id``) or ``"failed"`` (with an ``error``).
Adapters may also raise; the dispatcher treats both as a failed delivery.
"""

from abc import ABC, abstractmethod


class SMSPort(ABC):
    @abstractmethod
    def send(self, to: str, body: str) -> dict: ...


class EmailPort(ABC):
    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> dict: ...
