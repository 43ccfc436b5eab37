# src/catalog/api/dependencies.py
from fastapi import Depends, Request

from catalog.core.config import Settings, get_settings
from catalog.repositories.catalog_store import CatalogStore
from catalog.services.catalog_service import CatalogService


# The store is created per app instance in the lifespan, not as a module singleton
def get_catalog_store(request: Request) -> CatalogStore:
    store: CatalogStore = request.app.state.catalog_store
    return store


def get_catalog_service(
    store: CatalogStore = Depends(get_catalog_store),
    settings: Settings = Depends(get_settings),
) -> CatalogService:
    return CatalogService(
        store=store,
        page_size=settings.page_size,
        max_page_size=settings.max_page_size,
    )
