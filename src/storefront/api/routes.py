"""FastAPI endpoints for the Storefront domain."""

from fastapi import APIRouter, Depends

from storefront import operations
from storefront.api.dependencies import get_order_placement, get_principal
from storefront.api.schemas import (
    AveragePriceResponse,
    CategoryResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    CustomerResponse,
    OrderItemResponse,
    OrderResponse,
    OrderSummaryResponse,
    PlaceOrderRequest,
    ProductResponse,
    RegisterCustomerRequest,
)
from storefront.identity.principal import Principal
from storefront.order.placement import OrderPlacement, PlacedOrder

category_router = APIRouter(prefix="/categories", tags=["categories"])
product_router = APIRouter(prefix="/products", tags=["products"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
customer_router = APIRouter(prefix="/customers", tags=["customers"])


def _category(category) -> CategoryResponse:
    return CategoryResponse(
        id=str(category.id),
        name=category.name,
        parent_id=str(category.parent_id) if category.parent_id else None,
    )


def _product(product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        category_id=str(product.category_id),
    )


def _order_summary(order) -> OrderSummaryResponse:
    return OrderSummaryResponse(
        id=str(order.id),
        customer_id=str(order.customer_id),
        status=order.status,
        total_amount=order.total_amount,
        created_at=order.created_at,
    )


def _order(placed: PlacedOrder) -> OrderResponse:
    order = placed.order
    return OrderResponse(
        id=str(order.id),
        customer_id=str(order.customer_id),
        status=order.status,
        total_amount=order.total_amount,
        created_at=order.created_at,
        items=[
            OrderItemResponse(
                id=str(item.id),
                product_id=str(item.product_id),
                quantity=item.quantity,
                unit_price=item.unit_price,
            )
            for item in placed.items
        ],
    )


def _customer(customer) -> CustomerResponse:
    return CustomerResponse(id=str(customer.id), name=customer.name, email=customer.contact_email, phone=customer.phone)


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories(
    parent_id: str | None = None,
    principal: Principal = Depends(get_principal),
) -> list[CategoryResponse]:
    return [_category(c) for c in operations.list_root_or_child_categories(principal, parent_id)]


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(
    body: CreateCategoryRequest,
    principal: Principal = Depends(get_principal),
) -> CategoryResponse:
    return _category(operations.create_category(principal, body.name, parent_id=body.parent_id))


@category_router.get("/{category_id}/products", response_model=list[ProductResponse])
async def list_products_in_subtree(
    category_id: str,
    principal: Principal = Depends(get_principal),
) -> list[ProductResponse]:
    return [_product(p) for p in operations.list_products_in_subtree(principal, category_id)]


@category_router.get("/{category_id}/average-price", response_model=AveragePriceResponse)
async def average_price_in_subtree(
    category_id: str,
    principal: Principal = Depends(get_principal),
) -> AveragePriceResponse:
    average = operations.average_price_in_subtree(principal, category_id)
    return AveragePriceResponse(category_id=category_id, average_price=average)


# --- Product endpoints ---


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(
    body: CreateProductRequest,
    principal: Principal = Depends(get_principal),
) -> ProductResponse:
    product = operations.create_product(
        principal,
        name=body.name,
        price=body.price,
        category_id=body.category_id,
        description=body.description,
    )
    return _product(product)


# --- Order endpoints ---


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(
    body: PlaceOrderRequest,
    principal: Principal = Depends(get_principal),
    placement: OrderPlacement = Depends(get_order_placement),
) -> OrderResponse:
    items = [line.model_dump() for line in body.items]
    placed = operations.place_order(principal, body.customer_id, items, placement=placement)
    return _order(placed)


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, principal: Principal = Depends(get_principal)) -> OrderResponse:
    return _order(operations.get_order(principal, order_id))


# --- Customer endpoints ---


@customer_router.post("", status_code=201, response_model=CustomerResponse)
async def register_customer(
    body: RegisterCustomerRequest,
    principal: Principal = Depends(get_principal),
) -> CustomerResponse:
    customer = operations.register_customer(principal, body.name, email=body.email, phone=body.phone)
    return _customer(customer)


@customer_router.get("", response_model=list[CustomerResponse])
async def list_customers(
    limit: int = 50,
    offset: int = 0,
    principal: Principal = Depends(get_principal),
) -> list[CustomerResponse]:
    return [_customer(c) for c in operations.list_customers(principal, limit=limit, offset=offset)]


@customer_router.get("/{customer_id}/orders", response_model=list[OrderSummaryResponse])
async def list_customer_orders(
    customer_id: str,
    principal: Principal = Depends(get_principal),
) -> list[OrderSummaryResponse]:
    return [_order_summary(o) for o in operations.list_customer_orders(principal, customer_id)]
