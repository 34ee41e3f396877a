"""Repository for the Category aggregate."""

from storefront.category.category import Category
from storefront.category.tree import category_closure, children_index
from storefront.domain import storefront
from storefront.utils.query import fetch_all
from storefront.utils.storage import storage_errors


@storefront.repository(part_of=Category)
class CategoryRepository:
    """Category store: inserts, lookups, single-level listing and subtree closure."""

    def create(self, category: Category) -> Category:
        """Insert a category row. Parent existence is checked by the caller."""
        with storage_errors("store category", category_id=str(category.id)):
            self.add(category)
        return category

    def get_by_id(self, category_id) -> Category:
        with storage_errors("read category", category_id=str(category_id)):
            return self.get(str(category_id))

    def list_children(self, parent_id=None) -> list[Category]:
        """Root categories when ``parent_id`` is None, else the immediate children."""
        with storage_errors("list categories", parent_id=parent_id):
            if parent_id is None:
                return [category for category in fetch_all(self._dao.query) if not category.parent_id]
            return fetch_all(self._dao.query.filter(parent_id=str(parent_id)))

    def subtree_ids(self, category_id) -> set[str]:
        """Ids of ``category_id`` and all of its descendants.

        The closure is computed in-process over the whole category set, which
        suits catalogues that fit comfortably in memory.
        """
        with storage_errors("read category tree", category_id=str(category_id)):
            categories = fetch_all(self._dao.query)
        return category_closure(str(category_id), children_index(categories))
