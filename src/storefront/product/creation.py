"""Product creation: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.domain import storefront
from storefront.product.product import Product


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    category_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        try:
            current_domain.repository_for(Category).get_by_id(command.category_id)
        except ObjectNotFoundError:
            raise ValidationError({"category_id": [f"Category {command.category_id} does not exist"]}) from None

        product = Product.create(
            name=command.name,
            price=command.price,
            category_id=command.category_id,
            description=command.description,
        )
        current_domain.repository_for(Product).create(product)
        return str(product.id)
