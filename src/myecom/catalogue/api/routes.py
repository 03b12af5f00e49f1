"""FastAPI routes for the catalogue — products and categories."""

from fastapi import APIRouter, Query
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from myecom.catalogue.api.schemas import (
    CategoryRequest,
    CategoryResponse,
    PageResponse,
    ProductRequest,
    ProductResponse,
)
from myecom.catalogue.category.category import Category
from myecom.catalogue.category.management import CreateCategory
from myecom.catalogue.product.creation import CreateProduct
from myecom.catalogue.product.product import Product
from myecom.exceptions import NotFoundError


def _category_response(category_id) -> CategoryResponse | None:
    try:
        category = current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        return None
    return CategoryResponse.model_validate(category)


def product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        stock_quantity=product.stock,
        image_url=product.image_url,
        brand=product.brand,
        active=product.active,
        in_stock=product.in_stock,
        created_at=product.created_at,
        updated_at=product.updated_at,
        category=_category_response(product.category_id),
    )


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/api/products", tags=["products"])


@product_router.get("", response_model=PageResponse[ProductResponse])
async def list_products(
    page: int = Query(default=0, ge=0),
    size: int = Query(default=20, ge=1, le=100),
) -> PageResponse[ProductResponse]:
    products, total = current_domain.repository_for(Product).active_page(page, size)
    return PageResponse[ProductResponse].build([product_response(p) for p in products], page, size, total)


@product_router.get("/search", response_model=PageResponse[ProductResponse])
async def search_products(
    q: str = Query(min_length=1),
    page: int = Query(default=0, ge=0),
    size: int = Query(default=20, ge=1, le=100),
) -> PageResponse[ProductResponse]:
    products, total = current_domain.repository_for(Product).search_page(q, page, size)
    return PageResponse[ProductResponse].build([product_response(p) for p in products], page, size, total)


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    try:
        product = current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        product = None

    if product is None or not product.active:
        raise NotFoundError("Prodotto non trovato")
    return product_response(product)


@product_router.post("", response_model=ProductResponse)
async def create_product(body: ProductRequest) -> ProductResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=str(body.price),
        stock=body.stock_quantity,
        image_url=body.image_url,
        brand=body.brand,
        category_id=body.category_id,
        active=body.active,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return product_response(current_domain.repository_for(Product).get(product_id))


# ---------------------------------------------------------------------------
# Category Router
# ---------------------------------------------------------------------------
category_router = APIRouter(prefix="/api/categories", tags=["categories"])


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).find_active()
    return [CategoryResponse.model_validate(c) for c in categories]


@category_router.post("", response_model=CategoryResponse)
async def create_category(body: CategoryRequest) -> CategoryResponse:
    command = CreateCategory(name=body.name, description=body.description, active=body.active)
    category_id = current_domain.process(command, asynchronous=False)
    return CategoryResponse.model_validate(current_domain.repository_for(Category).get(category_id))
