"""Customer aggregate: purchaser contact details."""

from datetime import datetime

from protean.fields import DateTime, String, ValueObject

from storefront.customer.email import EmailAddress
from storefront.domain import storefront


@storefront.aggregate
class Customer:
    """A purchaser known to the store.

    Orders reference customers by id only; the record supplies the email
    address and phone number order confirmations are sent to.
    """

    name: String(required=True, max_length=150)
    email: ValueObject(EmailAddress)
    phone: String(max_length=20)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @property
    def contact_email(self) -> str | None:
        return self.email.address if self.email else None

    @classmethod
    def register(cls, name, email=None, phone=None):
        email_vo = EmailAddress(address=email) if email else None
        now = datetime.now()
        return cls(name=name, email=email_vo, phone=phone, created_at=now, updated_at=now)
