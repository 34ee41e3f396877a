"""The storefront domain: catalogue, customers and orders in one bounded context."""

from protean.domain import Domain

from storefront.utils.logging import configure_logging

configure_logging()

storefront = Domain(name="storefront")
