"""Order aggregate and its line items.

An order is written once, together with all of its items, and is immutable
afterwards. Each item carries the unit price captured when the order was
placed, independent of later catalogue price changes.
"""

from datetime import datetime
from enum import Enum

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.domain import storefront


class OrderStatus(Enum):
    CREATED = "Created"


@storefront.entity(part_of="Order")
class OrderItem:
    """A product, quantity and price snapshot within an order.

    ``sequence`` is the item's position in the order as placed; reads return
    items in that order.
    """

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    sequence = Integer(default=0, min_value=0)

    @property
    def line_total(self):
        return self.unit_price * self.quantity


@storefront.aggregate
class Order:
    customer_id = Identifier(required=True)
    total_amount = Float(default=0.0, min_value=0.0)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.CREATED.value,
    )
    items = HasMany(OrderItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, customer_id, total_amount):
        """Start a new order for ``customer_id``.

        ``total_amount`` is computed by the placement workflow from the priced
        line items; the order itself never recalculates it.
        """
        from storefront.order.events import OrderPlaced

        now = datetime.now()
        order = cls(
            customer_id=str(customer_id),
            total_amount=total_amount,
            status=OrderStatus.CREATED.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                total_amount=total_amount,
                created_at=now,
            )
        )
        return order
