from typing import Annotated

from fastapi import APIRouter, Depends

from catalog.api.dependencies import get_catalog_service
from catalog.domain.models import Category
from catalog.services.catalog_service import CatalogService

router = APIRouter(prefix="/categories", tags=["Categories"])

ServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]


@router.get("/", response_model=list[Category])
async def list_categories(service: ServiceDep) -> list[Category]:
    """Categories in display order, as offered by the filter and the product form."""
    return service.categories()
