"""In-memory registry holding the product catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from threading import RLock
from typing import Annotated

from fastapi import Depends, Request

from tronics.models.product import Product
from tronics.services.errors import ProductNotFoundError
from tronics.services.validation import MinLengthValidator, ProductValidator

logger = logging.getLogger(__name__)


class KeyPolicy(str, Enum):
    """How the key of a newly created product is chosen."""

    # Highest key ever handed out plus one; keys are never reused.
    MONOTONIC = "monotonic"
    # Number of live entries plus one; can collide after a delete.
    COUNT = "count"


class ProductRegistry:
    """Ordered in-memory product registry.

    Entries are kept as single-entry ``{key: name}`` mappings in insertion
    order. Every operation runs under one re-entrant lock so the registry can
    be shared between concurrent requests.
    """

    def __init__(
        self,
        *,
        validator: ProductValidator | None = None,
        key_policy: KeyPolicy | str = KeyPolicy.MONOTONIC,
    ) -> None:
        self._lock = RLock()
        self._entries: list[Product] = []
        self._last_key = 0
        self._validator = validator or MinLengthValidator()
        self._key_policy = KeyPolicy(key_policy)

    @property
    def key_policy(self) -> KeyPolicy:
        return self._key_policy

    @property
    def validator(self) -> ProductValidator:
        return self._validator

    def list(self) -> list[Product]:
        with self._lock:
            return [dict(entry) for entry in self._entries]

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, product_id: int) -> Product:
        with self._lock:
            index = self._index_of(product_id)
            return dict(self._entries[index])

    def create(self, name: str) -> Product:
        """Validate the name and append a new entry under a fresh key."""

        self._validator.validate(name)
        with self._lock:
            entry = self._append(name)

        logger.info("Created product %s", next(iter(entry)))
        return dict(entry)

    def update(self, product_id: int, name: str) -> Product:
        """Rename an existing entry in place."""

        with self._lock:
            index = self._index_of(product_id)
            self._validator.validate(name)
            self._entries[index][product_id] = name
            updated = dict(self._entries[index])

        logger.info("Updated product %s", product_id)
        return updated

    def delete(self, product_id: int) -> Product:
        """Remove an entry and return it; later entries keep their keys."""

        with self._lock:
            index = self._index_of(product_id)
            removed = self._entries.pop(index)

        logger.info("Deleted product %s", product_id)
        return removed

    def seed(self, names: Iterable[str]) -> None:
        """Append initial entries without running the validator."""

        with self._lock:
            for name in names:
                self._append(name)
            total = len(self._entries)

        logger.info("Seeded registry, %d products", total)

    def _append(self, name: str) -> Product:
        if self._key_policy is KeyPolicy.COUNT:
            key = len(self._entries) + 1
        else:
            key = self._last_key + 1
        self._last_key = max(self._last_key, key)

        entry = {key: name}
        self._entries.append(entry)
        return entry

    def _index_of(self, product_id: int) -> int:
        # The count policy can produce duplicate keys; the newest entry wins.
        for index in range(len(self._entries) - 1, -1, -1):
            if product_id in self._entries[index]:
                return index
        raise ProductNotFoundError(product_id)


def get_registry(request: Request) -> ProductRegistry:
    """FastAPI dependency returning the registry owned by the application."""

    return request.app.state.registry


RegistryDependency = Annotated[ProductRegistry, Depends(get_registry)]
