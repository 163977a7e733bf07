"""Validator abstractions applied to product names."""

from __future__ import annotations

from abc import ABC, abstractmethod

from tronics.services.errors import ProductValidationError

DEFAULT_MIN_NAME_LENGTH = 4


class ProductValidator(ABC):
    """Abstract validator interface for product names."""

    @abstractmethod
    def validate(self, name: str) -> None:
        """Raise ProductValidationError when the name is not acceptable."""


class MinLengthValidator(ProductValidator):
    """Rejects empty names and names shorter than ``min_length``."""

    def __init__(self, min_length: int = DEFAULT_MIN_NAME_LENGTH) -> None:
        if min_length < 1:
            raise ValueError("min_length must be at least 1")
        self._min_length = min_length

    @property
    def min_length(self) -> int:
        return self._min_length

    def validate(self, name: str) -> None:
        if not name:
            raise ProductValidationError("product_name is required")
        if len(name) < self._min_length:
            raise ProductValidationError(
                f"product_name must be at least {self._min_length} characters"
            )
