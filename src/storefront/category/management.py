"""Category management: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.domain import storefront


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    parent_id: Identifier()


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)

        parent_id = command.parent_id
        if parent_id:
            try:
                repo.get_by_id(parent_id)
            except ObjectNotFoundError:
                raise ValidationError({"parent_id": [f"Parent category {parent_id} does not exist"]}) from None

        category = Category.create(name=command.name, parent_id=parent_id)
        repo.create(category)
        return str(category.id)
