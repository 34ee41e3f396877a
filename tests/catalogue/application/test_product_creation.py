"""Application tests for product creation via the domain command."""

import uuid

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from storefront.category.category import Category
from storefront.product.creation import CreateProduct
from storefront.product.product import Product


@pytest.fixture()
def category():
    category = Category.create(name="Phones")
    current_domain.repository_for(Category).create(category)
    return category


class TestCreateProduct:
    def test_create_product(self, category):
        product_id = current_domain.process(
            CreateProduct(name="Phone", description="Smart", price=199.0, category_id=category.id),
            asynchronous=False,
        )

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Phone"
        assert product.price == 199.0
        assert product.category_id == category.id

    def test_unknown_category_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                CreateProduct(name="Phone", price=199.0, category_id=str(uuid.uuid4())),
                asynchronous=False,
            )
        assert "category_id" in exc.value.messages

    def test_negative_price_is_rejected(self, category):
        with pytest.raises(ValidationError):
            current_domain.process(
                CreateProduct(name="Phone", price=-5.0, category_id=category.id),
                asynchronous=False,
            )
