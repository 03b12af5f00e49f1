"""Pydantic request/response schemas for the catalogue API."""

from datetime import datetime
from decimal import Decimal
from typing import Generic, TypeVar

from pydantic import Field

from myecom.api.schemas import Amount, ApiModel, NonBlankStr

T = TypeVar("T")


class CategoryRequest(ApiModel):
    name: NonBlankStr = Field(max_length=100)
    description: str | None = None
    active: bool = True


class CategoryResponse(ApiModel):
    id: str
    name: str
    description: str | None = None
    active: bool


class ProductRequest(ApiModel):
    name: NonBlankStr = Field(max_length=200)
    description: str | None = None
    price: Decimal = Field(ge=Decimal("0.01"), decimal_places=2)
    stock_quantity: int = Field(ge=0)
    image_url: str | None = None
    brand: str | None = None
    category_id: str
    active: bool = True

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Smartphone X",
                    "description": "6.1 inch display",
                    "price": 699.99,
                    "stockQuantity": 25,
                    "brand": "Acme",
                    "categoryId": "cat-001",
                }
            ]
        }
    }


class ProductResponse(ApiModel):
    id: str
    name: str
    description: str | None = None
    price: Amount
    stock_quantity: int
    image_url: str | None = None
    brand: str | None = None
    active: bool
    in_stock: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    category: CategoryResponse | None = None


class PageResponse(ApiModel, Generic[T]):
    content: list[T]
    current_page: int
    total_pages: int
    total_elements: int
    has_next: bool
    has_previous: bool

    @classmethod
    def build(cls, content: list, page: int, size: int, total: int) -> "PageResponse":
        total_pages = (total + size - 1) // size if size else 0
        return cls(
            content=content,
            current_page=page,
            total_pages=total_pages,
            total_elements=total,
            has_next=page + 1 < total_pages,
            has_previous=page > 0,
        )
