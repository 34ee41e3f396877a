"""Product aggregate root."""

from datetime import datetime

from protean.fields import DateTime, Float, Identifier, String, Text

from storefront.domain import storefront


@storefront.aggregate
class Product:
    """An item for sale, owned by exactly one catalogue category.

    ``price`` is the current catalogue price. Orders snapshot it at placement
    time, so later changes never reach existing order items.
    """

    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    category_id: Identifier(required=True)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, price, category_id, description=None):
        from storefront.product.events import ProductCreated

        now = datetime.now()
        product = cls(
            name=name,
            description=description,
            price=price,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                price=product.price,
                category_id=category_id,
                created_at=now,
            )
        )
        return product
