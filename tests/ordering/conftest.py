import uuid

import pytest
from protean import current_domain
from storefront.category.category import Category
from storefront.customer.customer import Customer
from storefront.product.product import Product


@pytest.fixture()
def category():
    return current_domain.repository_for(Category).create(Category.create(name="Gadgets"))


@pytest.fixture()
def products(category):
    """Two products priced 5.00 and 10.00."""
    repo = current_domain.repository_for(Product)
    return [
        repo.create(Product.create(name="Widget", price=5.0, category_id=category.id)),
        repo.create(Product.create(name="Gizmo", price=10.0, category_id=category.id)),
    ]


@pytest.fixture()
def registered_customer():
    customer = Customer.register(name="Ada", email="ada@example.com", phone="+15551234567")
    current_domain.repository_for(Customer).create(customer)
    return customer


@pytest.fixture()
def customer_id():
    return str(uuid.uuid4())
