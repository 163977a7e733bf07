"""Product domain models and API schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

# A product is a single-entry mapping of its key to its name.
Product = dict[int, str]


class ProductBody(BaseModel):
    """Request body accepted when creating or updating a product."""

    name: str = Field(
        ...,
        alias="product_name",
        description="Display name of the product",
    )
