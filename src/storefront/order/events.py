"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A customer order and its items were committed."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    total_amount = Float(required=True)
    created_at = DateTime(required=True)
