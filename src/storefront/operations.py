"""Storefront operations, independent of any transport.

Every operation takes the caller's Principal explicitly. Reads need an
authenticated principal; writes additionally require a role, checked before
anything is validated or stored.
"""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.category.management import CreateCategory
from storefront.customer.customer import Customer
from storefront.customer.registration import RegisterCustomer
from storefront.exceptions import AuthError
from storefront.identity.principal import ADMIN, Principal, require_role
from storefront.order.order import Order
from storefront.order.placement import OrderPlacement, PlacedOrder, parse_identifier
from storefront.product.creation import CreateProduct
from storefront.product.product import Product


def _authenticated(principal: Principal | None) -> Principal:
    if principal is None:
        raise AuthError("authorization header missing")
    return principal


def _identifier(field_name: str, value) -> str:
    parsed = parse_identifier(value)
    if parsed is None:
        raise ValidationError({field_name: [f"invalid {field_name} {value!r}"]})
    return parsed


# --- Catalogue reads ---


def list_root_or_child_categories(principal: Principal, parent_id=None) -> list[Category]:
    _authenticated(principal)
    if parent_id is not None:
        parent_id = _identifier("parent_id", parent_id)
    return current_domain.repository_for(Category).list_children(parent_id)


def list_products_in_subtree(principal: Principal, category_id) -> list[Product]:
    _authenticated(principal)
    return current_domain.repository_for(Product).list_by_category(_identifier("category_id", category_id))


def average_price_in_subtree(principal: Principal, category_id) -> float:
    _authenticated(principal)
    return current_domain.repository_for(Product).average_price_by_category(_identifier("category_id", category_id))


# --- Catalogue writes ---


def create_category(principal: Principal, name: str, parent_id=None) -> Category:
    require_role(_authenticated(principal), ADMIN)
    if parent_id is not None:
        parent_id = _identifier("parent_id", parent_id)

    category_id = current_domain.process(CreateCategory(name=name, parent_id=parent_id), asynchronous=False)
    return current_domain.repository_for(Category).get_by_id(category_id)


def create_product(principal: Principal, name: str, price: float, category_id, description: str | None = None) -> Product:
    require_role(_authenticated(principal), ADMIN)
    category_id = _identifier("category_id", category_id)

    product_id = current_domain.process(
        CreateProduct(name=name, description=description, price=price, category_id=category_id),
        asynchronous=False,
    )
    return current_domain.repository_for(Product).get_by_id(product_id)


# --- Orders ---


def place_order(principal: Principal, customer_id, items, placement: OrderPlacement | None = None) -> PlacedOrder:
    return (placement or OrderPlacement()).place(_authenticated(principal), customer_id, items)


def get_order(principal: Principal, order_id) -> PlacedOrder:
    _authenticated(principal)
    order, items = current_domain.repository_for(Order).get_order(_identifier("order_id", order_id))
    return PlacedOrder(order=order, items=items)


def list_customer_orders(principal: Principal, customer_id) -> list[Order]:
    _authenticated(principal)
    return current_domain.repository_for(Order).list_by_customer(_identifier("customer_id", customer_id))


# --- Customers ---


def register_customer(principal: Principal, name: str, email: str | None = None, phone: str | None = None) -> Customer:
    require_role(_authenticated(principal), ADMIN)
    customer_id = current_domain.process(RegisterCustomer(name=name, email=email, phone=phone), asynchronous=False)
    return current_domain.repository_for(Customer).get_by_id(customer_id)


def list_customers(principal: Principal, limit: int = 50, offset: int = 0) -> list[Customer]:
    require_role(_authenticated(principal), ADMIN)
    return current_domain.repository_for(Customer).list_all(limit=limit, offset=offset)
