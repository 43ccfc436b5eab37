# src/catalog/domain/models.py
from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, computed_field

from catalog.core.formatting import format_currency

# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------


class Category(StrEnum):
    """Closed set of catalog categories. Values are the catalog's display labels."""

    ELECTRONICS = "Điện tử"
    CLOTHING = "Quần áo"
    FOOD = "Đồ ăn"
    BOOKS = "Sách"
    OTHER = "Khác"

    @classmethod
    def parse(cls, raw: str | None) -> Category | None:
        """Resolves a display label or an English member name ("books"); None if unknown."""
        if raw is None:
            return None
        value = raw.strip().casefold()
        for category in cls:
            if value in (category.value.casefold(), category.name.casefold()):
                return category
        return None


# ---------------------------------------------------------------------------
# Aggregate: Product
# Name/price/quantity rules are enforced by the product form before an action
# is dispatched, not by the model itself.
# ---------------------------------------------------------------------------


class ProductFields(BaseModel):
    """A product without its identifier, i.e. the payload of an "add" action."""

    name: str
    category: Category
    price: Decimal
    quantity: int
    description: str = ""

    model_config = {"frozen": True}


class Product(BaseModel):
    id: int = Field(description="Assigned by the store, never reused after deletion")
    name: str
    category: Category
    price: Decimal
    quantity: int
    description: str = ""

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def price_display(self) -> str:
        return format_currency(self.price)

    @classmethod
    def from_fields(cls, product_id: int, fields: ProductFields) -> Product:
        return cls(id=product_id, **fields.model_dump())


# ---------------------------------------------------------------------------
# Store state & actions
# ---------------------------------------------------------------------------


class CatalogState(BaseModel):
    """
    Snapshot of the catalog. Products are ordered newest first; next_id is
    always greater than every id handed out by an "add".
    """

    products: tuple[Product, ...] = ()
    next_id: int = 1

    model_config = {"frozen": True}


class AddProduct(BaseModel):
    type: Literal["add"] = "add"
    payload: ProductFields

    model_config = {"frozen": True}


class UpdateProduct(BaseModel):
    type: Literal["update"] = "update"
    payload: Product

    model_config = {"frozen": True}


class DeleteProduct(BaseModel):
    type: Literal["delete"] = "delete"
    product_id: int

    model_config = {"frozen": True}


class SetProducts(BaseModel):
    type: Literal["set"] = "set"
    payload: tuple[Product, ...]

    model_config = {"frozen": True}


CatalogAction = Annotated[
    AddProduct | UpdateProduct | DeleteProduct | SetProducts,
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# View query
# ---------------------------------------------------------------------------


class ViewParams(BaseModel):
    search_text: str = ""
    category: Category | None = None
    # Raw user input; anything that does not start with a number means "no bound"
    min_price: str = ""
    max_price: str = ""
    page_size: int = Field(default=6, gt=0)
    page_number: int = 1


class ProductPage(BaseModel):
    items: list[Product]
    total_count: int
    total_pages: int
    page_number: int = Field(description="Requested page clamped to [1, total_pages]")
    page_size: int


# ---------------------------------------------------------------------------
# API Request/Response Schemas
# ---------------------------------------------------------------------------


class CatalogSummary(BaseModel):
    total_count: int
    next_id: int

    @classmethod
    def from_state(cls, state: CatalogState) -> CatalogSummary:
        return cls(total_count=len(state.products), next_id=state.next_id)
