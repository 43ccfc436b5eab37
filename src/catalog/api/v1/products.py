from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog.api.dependencies import get_catalog_service
from catalog.domain.errors import ProductNotFoundError, ProductValidationError
from catalog.domain.models import CatalogSummary, Category, Product, ProductPage
from catalog.services.catalog_service import CatalogService
from catalog.services.product_form import ProductForm

router = APIRouter(prefix="/products", tags=["Products"])

ServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found.")


def _invalid(e: ProductValidationError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"errors": e.errors},
    )


@router.get("/", response_model=ProductPage)
async def list_products(
    service: ServiceDep,
    q: str = "",
    category: str | None = None,
    min_price: str = "",
    max_price: str = "",
    page: int = 1,
    page_size: int | None = Query(default=None, ge=1),
) -> ProductPage:
    """
    Filtered and paginated product list.
    Price bounds that are not numbers are ignored; the page is clamped to the valid range.
    """
    category_enum: Category | None = None
    if category:
        category_enum = Category.parse(category)
        if category_enum is None:
            available = ", ".join(c.value for c in Category)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid category '{category}'. Available: {available}",
            )

    return service.list_products(
        search_text=q,
        category=category_enum,
        min_price=min_price,
        max_price=max_price,
        page_number=page,
        page_size=page_size,
    )


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: int, service: ServiceDep) -> Product:
    try:
        return service.get_product(product_id)
    except ProductNotFoundError:
        raise _not_found()


@router.post("/", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductForm, service: ServiceDep) -> Product:
    try:
        return service.create_product(payload)
    except ProductValidationError as e:
        raise _invalid(e)


@router.put("/{product_id}", response_model=Product)
async def update_product(product_id: int, payload: ProductForm, service: ServiceDep) -> Product:
    try:
        return service.update_product(product_id, payload)
    except ProductNotFoundError:
        raise _not_found()
    except ProductValidationError as e:
        raise _invalid(e)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, service: ServiceDep) -> None:
    service.delete_product(product_id)


@router.put("/", response_model=CatalogSummary)
async def replace_products(payload: list[Product], service: ServiceDep) -> CatalogSummary:
    """Replaces the whole catalog (import). Ids are taken as given."""
    return CatalogSummary.from_state(service.replace_products(payload))


@router.post("/reset", response_model=CatalogSummary)
async def reset_products(service: ServiceDep) -> CatalogSummary:
    """Restores the ten sample products."""
    return CatalogSummary.from_state(service.reset())
