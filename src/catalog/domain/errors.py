# ---------------------------------------------------------------------------
# Custom Domain Exceptions
# ---------------------------------------------------------------------------


class ProductNotFoundError(Exception):
    def __init__(self, product_id: int):
        super().__init__(f"Product '{product_id}' not found")
        self.product_id = product_id


class ProductValidationError(Exception):
    """Raised when a product form is rejected; carries every field error at once."""

    def __init__(self, errors: dict[str, str]):
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = errors
