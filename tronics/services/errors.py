"""Errors raised by the product registry."""


class ProductNotFoundError(LookupError):
    """Raised when no entry carries the requested key."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"product {product_id} not found")
        self.product_id = product_id


class ProductValidationError(ValueError):
    """Raised when a product name is rejected by the validator."""
