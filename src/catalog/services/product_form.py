from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from catalog.core.parsing import parse_leading_int, parse_leading_number
from catalog.domain.errors import ProductValidationError
from catalog.domain.models import Category, ProductFields

MIN_NAME_LENGTH = 3
# Prices need at most this many integer digits
MAX_PRICE_DIGITS = 15

PRICE_ERROR = "Price must be a positive number."
QUANTITY_ERROR = "Quantity must be a non-negative integer."


class ProductForm(BaseModel):
    """
    Raw add/edit input as typed by the user.

    Numbers may arrive as JSON numbers or as text; both are kept as text and
    only interpreted by validate_fields()/to_fields().
    """

    name: str = ""
    category: str | None = None
    price: str = ""
    quantity: str = ""
    description: str = ""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    def validate_fields(self) -> dict[str, str]:
        """Returns field -> message for every rule that fails; empty if the form is valid."""
        errors: dict[str, str] = {}

        name = self.name.strip()
        if not name:
            errors["name"] = "Product name is required."
        elif len(name) < MIN_NAME_LENGTH:
            errors["name"] = f"Product name must be at least {MIN_NAME_LENGTH} characters."

        if self._price() is None:
            errors["price"] = PRICE_ERROR

        if self._quantity() is None:
            errors["quantity"] = QUANTITY_ERROR

        if self.category is None or not self.category.strip():
            errors["category"] = "Category is required."
        elif Category.parse(self.category) is None:
            errors["category"] = f"Unknown category '{self.category.strip()}'."

        return errors

    def to_fields(self) -> ProductFields:
        """
        Converts the form into a product payload with trimmed text.

        Raises:
            ProductValidationError: If any field is invalid.
        """
        errors = self.validate_fields()
        if errors:
            raise ProductValidationError(errors)

        price = self._price()
        quantity = self._quantity()
        category = Category.parse(self.category)
        if price is None or quantity is None or category is None:
            raise ProductValidationError(self.validate_fields())

        return ProductFields(
            name=self.name.strip(),
            category=category,
            price=price,
            quantity=quantity,
            description=self.description.strip(),
        )

    def _price(self) -> Decimal | None:
        """The parsed price if it is a positive number of sensible magnitude, else None."""
        price = parse_leading_number(self.price)
        if price is None or not price.is_finite() or price <= 0:
            return None
        if price.adjusted() >= MAX_PRICE_DIGITS:
            return None
        return price

    def _quantity(self) -> int | None:
        quantity = parse_leading_int(self.quantity)
        if quantity is None or quantity < 0:
            return None
        return quantity
