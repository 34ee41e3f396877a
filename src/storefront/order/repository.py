"""Repository for the Order aggregate."""

import structlog
from protean import UnitOfWork

from storefront.domain import storefront
from storefront.exceptions import PersistenceError
from storefront.order.order import Order, OrderItem
from storefront.utils.query import fetch_all
from storefront.utils.storage import storage_errors

logger = structlog.get_logger(__name__)


@storefront.repository(part_of=Order)
class OrderRepository:
    """Order store. Persists exactly what it is given; never prices anything."""

    def create_order(self, order: Order, items: list[OrderItem]) -> Order:
        """Insert the order and all of its items as one unit of work.

        Any failure rolls every row back and is raised as PersistenceError.
        """
        try:
            with UnitOfWork():
                for item in items:
                    order.add_items(item)
                self.add(order)
        except Exception as exc:
            logger.error("Order write rolled back", order_id=str(order.id), error=str(exc))
            raise PersistenceError(f"could not persist order {order.id}: {exc}") from exc
        return order

    def get_order(self, order_id) -> tuple[Order, list[OrderItem]]:
        """The order and its items, oldest item first."""
        with storage_errors("read order", order_id=str(order_id)):
            order = self.get(str(order_id))
            items = sorted(order.items, key=lambda item: item.sequence)
        return order, items

    def list_by_customer(self, customer_id) -> list[Order]:
        """A customer's orders, newest first."""
        with storage_errors("list orders", customer_id=str(customer_id)):
            orders = fetch_all(self._dao.query.filter(customer_id=str(customer_id)))
        return sorted(orders, key=lambda order: order.created_at, reverse=True)
