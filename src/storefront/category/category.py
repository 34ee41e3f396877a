"""Category aggregate root for the hierarchical product catalogue."""

from datetime import datetime

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.aggregate
class Category:
    """A node in the catalogue forest.

    A category without a parent is a root. The parent relation is acyclic and
    categories are never updated or deleted, so a parent always predates its
    children.
    """

    name: String(required=True, max_length=100)
    parent_id: Identifier()
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, parent_id=None):
        from storefront.category.events import CategoryCreated

        now = datetime.now()
        category = cls(
            name=name,
            parent_id=parent_id,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                parent_id=parent_id,
            )
        )
        return category
