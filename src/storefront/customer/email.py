"""EmailAddress value object for customer contact details."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from storefront.domain import storefront

_FORBIDDEN = set(" \t\n;,()\"<>[]\\:")


@storefront.value_object
class EmailAddress:
    """An address confirmations can be sent to: ``local@domain.tld``."""

    address: String(required=True, max_length=254)

    @invariant.post
    def address_is_deliverable(self):
        address = self.address
        local, _, domain = address.partition("@")
        labels = domain.split(".")

        if (
            address.count("@") != 1
            or not local
            or _FORBIDDEN & set(address)
            or ".." in address
            or local.startswith(".")
            or local.endswith(".")
            or len(labels) < 2
            or any(not label or label.startswith("-") or label.endswith("-") for label in labels)
        ):
            raise ValidationError({"email": [f"'{address}' is not a valid email address"]})
