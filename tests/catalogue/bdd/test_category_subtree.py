"""BDD tests for category subtree queries."""

from protean import current_domain
from pytest_bdd import parsers, scenarios, then, when
from storefront.product.product import Product

scenarios("features/category_subtree.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the products under "{category}" are listed'))
def list_products(categories, result, category):
    result["products"] = current_domain.repository_for(Product).list_by_category(categories[category].id)


@when(parsers.cfparse('the average price under "{category}" is requested'))
def average_price(categories, result, category):
    result["average"] = current_domain.repository_for(Product).average_price_by_category(categories[category].id)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the listed products are "{names}"'))
def listed_products_are(result, names):
    expected = {name.strip() for name in names.split(",")}
    assert {p.name for p in result["products"]} == expected


@then("no products are listed")
def no_products(result):
    assert result["products"] == []


@then(parsers.cfparse("the average price is {price:f}"))
def average_price_is(result, price):
    assert result["average"] == price
