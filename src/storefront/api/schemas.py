"""Pydantic request/response schemas for the Storefront API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Phones", "parent_id": None}]}}

    name: str = Field(..., max_length=100)
    parent_id: str | None = None


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Classic Black T-Shirt",
                    "description": "Premium cotton crew-neck tee in black.",
                    "price": 29.99,
                    "category_id": "0b8e3d9e-3f0c-4f57-9d1e-6a2f1c7c9b10",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str | None = None
    price: float
    category_id: str


class OrderLineRequest(BaseModel):
    product_id: str
    quantity: int


class PlaceOrderRequest(BaseModel):
    """An order request. Lines carry no price; prices come from the catalogue."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "5d1f6a52-8f0e-4b52-9a66-2b1e0c1f7f21",
                    "items": [
                        {"product_id": "0c4e2a47-1e8b-4c1f-8f6e-5a3b9d2c7e18", "quantity": 2},
                    ],
                }
            ]
        }
    }

    customer_id: str
    items: list[OrderLineRequest]


class RegisterCustomerRequest(BaseModel):
    name: str = Field(..., max_length=150)
    email: str | None = Field(None, max_length=254)
    phone: str | None = Field(None, max_length=20)


# --- Response Schemas ---


class CategoryResponse(BaseModel):
    id: str
    name: str
    parent_id: str | None = None


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    category_id: str


class AveragePriceResponse(BaseModel):
    category_id: str
    average_price: float


class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    quantity: int
    unit_price: float


class OrderSummaryResponse(BaseModel):
    id: str
    customer_id: str
    status: str
    total_amount: float
    created_at: datetime | None = None


class OrderResponse(OrderSummaryResponse):
    items: list[OrderItemResponse] = []


class CustomerResponse(BaseModel):
    id: str
    name: str
    email: str | None = None
    phone: str | None = None
