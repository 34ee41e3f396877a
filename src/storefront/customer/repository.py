"""Repository for the Customer aggregate."""

from storefront.customer.customer import Customer
from storefront.domain import storefront
from storefront.utils.storage import storage_errors


@storefront.repository(part_of=Customer)
class CustomerRepository:
    def create(self, customer: Customer) -> Customer:
        with storage_errors("store customer", customer_id=str(customer.id)):
            self.add(customer)
        return customer

    def get_by_id(self, customer_id) -> Customer:
        with storage_errors("read customer", customer_id=str(customer_id)):
            return self.get(str(customer_id))

    def list_all(self, limit: int = 50, offset: int = 0) -> list[Customer]:
        with storage_errors("list customers"):
            return self._dao.query.offset(offset).limit(limit).all().items
