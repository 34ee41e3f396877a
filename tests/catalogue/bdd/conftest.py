"""Shared BDD fixtures for the catalogue."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers
from storefront.category.category import Category
from storefront.product.product import Product


@pytest.fixture()
def categories():
    """Category name -> persisted Category."""
    return {}


@pytest.fixture()
def result():
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a root category "{name}"'))
def root_category(categories, name):
    categories[name] = current_domain.repository_for(Category).create(Category.create(name=name))


@given(parsers.cfparse('a category "{name}" under "{parent}"'))
def child_category(categories, name, parent):
    category = Category.create(name=name, parent_id=categories[parent].id)
    categories[name] = current_domain.repository_for(Category).create(category)


@given(parsers.cfparse('a product "{name}" priced {price:f} in "{category}"'))
def product_in_category(categories, name, price, category):
    product = Product.create(name=name, price=price, category_id=categories[category].id)
    current_domain.repository_for(Product).create(product)
