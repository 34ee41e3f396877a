"""Order placement workflow.

Flow:
    1. The principal must hold the ``customer`` role.
    2. The customer id and every product id must be UUIDs and every quantity a
       positive integer. Problems are reported together, before storage is read.
    3. Each line is priced from the catalogue's current product price; any
       price supplied by the caller is ignored.
    4. The order and its items are written in one unit of work.
    5. Once committed, SMS and email confirmations are queued on the
       notification dispatcher. Queueing and delivery failures are logged and
       never fail the order.

Prices are read without locking, so a concurrent price change can land
between pricing and commit; the item keeps the price that was read.

Placement is not idempotent: every successful call creates a new order.
"""

import uuid
from collections import defaultdict
from collections.abc import Mapping
from dataclasses import dataclass, field

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.customer.customer import Customer
from storefront.identity.principal import CUSTOMER, Principal, require_role
from storefront.order.order import Order, OrderItem
from storefront.product.product import Product

logger = structlog.get_logger(__name__)


@dataclass
class PlacedOrder:
    order: Order
    items: list[OrderItem] = field(default_factory=list)


def parse_identifier(value) -> str | None:
    """Canonical string form of a UUID, or None when ``value`` is not one."""
    try:
        return str(uuid.UUID(str(value)))
    except (TypeError, ValueError):
        return None


class OrderPlacement:
    def __init__(self, dispatcher=None):
        self._dispatcher = dispatcher

    @property
    def dispatcher(self):
        if self._dispatcher is None:
            from storefront.notification.dispatcher import get_dispatcher

            self._dispatcher = get_dispatcher()
        return self._dispatcher

    def place(self, principal: Principal, customer_id, items) -> PlacedOrder:
        require_role(principal, CUSTOMER)

        customer_id, lines = self._validate(customer_id, items)
        order_items = self._price(lines)
        total = sum(item.line_total for item in order_items)

        order = Order.create(customer_id=customer_id, total_amount=total)
        current_domain.repository_for(Order).create_order(order, order_items)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=customer_id,
            item_count=len(order_items),
            total_amount=total,
        )

        self._notify(principal, order)
        return PlacedOrder(order=order, items=order_items)

    def _validate(self, customer_id, items) -> tuple[str, list[tuple[str, int]]]:
        errors = defaultdict(list)

        parsed_customer_id = parse_identifier(customer_id)
        if parsed_customer_id is None:
            errors["customer_id"].append(f"invalid customer_id {customer_id!r}")

        if not items:
            errors["items"].append("an order needs at least one line item")

        lines = []
        for position, item in enumerate(items or []):
            if not isinstance(item, Mapping):
                errors["items"].append(f"line {position} must be an object with product_id and quantity")
                continue

            product_id = parse_identifier(item.get("product_id"))
            if product_id is None:
                errors["items"].append(f"invalid product_id {item.get('product_id')!r}")

            quantity = item.get("quantity")
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
                errors["items"].append(f"quantity of line {position} must be a positive integer")

            lines.append((product_id, quantity))

        if errors:
            raise ValidationError(dict(errors))
        return parsed_customer_id, lines

    def _price(self, lines) -> list[OrderItem]:
        """One item per line, at the product's current catalogue price."""
        repo = current_domain.repository_for(Product)
        return [
            OrderItem(
                product_id=product_id,
                quantity=quantity,
                unit_price=repo.get_by_id(product_id).price,
                sequence=position,
            )
            for position, (product_id, quantity) in enumerate(lines)
        ]

    def _contact(self, principal: Principal, customer_id) -> tuple[str | None, str | None]:
        try:
            customer = current_domain.repository_for(Customer).get_by_id(customer_id)
        except ObjectNotFoundError:
            return principal.email, None
        return customer.contact_email or principal.email, customer.phone

    def _notify(self, principal: Principal, order: Order) -> None:
        try:
            email, phone = self._contact(principal, order.customer_id)
            self.dispatcher.notify_order_placed(order, email=email, phone=phone)
        except Exception as exc:
            # The order is committed; a notification problem must not undo or fail it.
            logger.error("Could not queue order notifications", order_id=str(order.id), error=str(exc))
