# src/catalog/services/catalog_service.py
from __future__ import annotations

import logging
from collections.abc import Sequence

from catalog.domain.errors import ProductNotFoundError, ProductValidationError
from catalog.domain.models import (
    AddProduct,
    CatalogState,
    Category,
    DeleteProduct,
    Product,
    ProductFields,
    ProductPage,
    SetProducts,
    UpdateProduct,
    ViewParams,
)
from catalog.domain.sample_data import SAMPLE_PRODUCTS
from catalog.repositories.catalog_store import CatalogStore
from catalog.services.product_form import ProductForm
from catalog.services.view_query import compute_view

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Use cases of the catalog pages: list, detail, add, edit, delete, import/reset.
    Reads go through compute_view() on the latest state, writes are dispatched
    as actions to the store.
    """

    def __init__(self, store: CatalogStore, page_size: int = 6, max_page_size: int = 50) -> None:
        self._store = store
        self._page_size = page_size
        self._max_page_size = max_page_size

    def list_products(
        self,
        search_text: str = "",
        category: Category | None = None,
        min_price: str = "",
        max_price: str = "",
        page_number: int = 1,
        page_size: int | None = None,
    ) -> ProductPage:
        size = min(page_size or self._page_size, self._max_page_size)
        params = ViewParams(
            search_text=search_text,
            category=category,
            min_price=min_price,
            max_price=max_price,
            page_size=size,
            page_number=page_number,
        )
        return compute_view(self._store.state.products, params)

    def get_product(self, product_id: int) -> Product:
        """
        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = self._store.find_by_id(product_id)
        if product is None:
            logger.info("Product %d not found", product_id)
            raise ProductNotFoundError(product_id)
        return product

    def create_product(self, form: ProductForm) -> Product:
        fields = self._validated(form)
        state = self._store.dispatch(AddProduct(payload=fields))
        created = state.products[0]
        logger.info("Created product %d '%s'", created.id, created.name)
        return created

    def update_product(self, product_id: int, form: ProductForm) -> Product:
        """
        Replaces an existing product with the form's values.

        Raises:
            ProductNotFoundError: If no product has this id (checked before validation).
            ProductValidationError: If the form is invalid.
        """
        self.get_product(product_id)
        product = Product.from_fields(product_id, self._validated(form))
        self._store.dispatch(UpdateProduct(payload=product))
        return product

    def delete_product(self, product_id: int) -> None:
        """Removes the product; an unknown id is ignored."""
        self._store.dispatch(DeleteProduct(product_id=product_id))

    def replace_products(self, products: Sequence[Product]) -> CatalogState:
        state = self._store.dispatch(SetProducts(payload=tuple(products)))
        logger.info("Catalog replaced with %d products", len(state.products))
        return state

    def reset(self) -> CatalogState:
        return self.replace_products(SAMPLE_PRODUCTS)

    def categories(self) -> list[Category]:
        return list(Category)

    def _validated(self, form: ProductForm) -> ProductFields:
        try:
            return form.to_fields()
        except ProductValidationError as e:
            logger.info("Rejected product form: %s", e)
            raise
