"""Repository for the Product aggregate."""

from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.domain import storefront
from storefront.product.product import Product
from storefront.utils.query import fetch_all
from storefront.utils.storage import storage_errors


@storefront.repository(part_of=Product)
class ProductRepository:
    """Product store with category-subtree queries."""

    def create(self, product: Product) -> Product:
        with storage_errors("store product", product_id=str(product.id)):
            self.add(product)
        return product

    def get_by_id(self, product_id) -> Product:
        with storage_errors("read product", product_id=str(product_id)):
            return self.get(str(product_id))

    def list_by_category(self, category_id) -> list[Product]:
        """Products owned by ``category_id`` or any of its descendants."""
        closure = current_domain.repository_for(Category).subtree_ids(category_id)
        with storage_errors("list products", category_id=str(category_id)):
            return fetch_all(self._dao.query.filter(category_id__in=sorted(closure)))

    def average_price_by_category(self, category_id) -> float:
        """Mean price over the subtree's products; 0 when there are none."""
        products = self.list_by_category(category_id)
        if not products:
            return 0.0
        return sum(product.price for product in products) / len(products)
