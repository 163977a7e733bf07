"""Routes for managing products in the catalog."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from tronics.models.product import Product, ProductBody
from tronics.services.product_registry import RegistryDependency

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


async def _read_body(request: Request) -> ProductBody:
    """Decode the request body once the target product is known to exist."""

    raw = await request.body()
    try:
        return ProductBody.model_validate_json(raw)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False), body=raw) from exc


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    summary="List all products in insertion order",
)
async def list_products(registry: RegistryDependency) -> list[Product]:
    return registry.list()


@router.get(
    "/{product_id}",
    status_code=status.HTTP_200_OK,
    summary="Fetch a single product",
)
async def get_product(product_id: int, registry: RegistryDependency) -> Product:
    return registry.get(product_id)


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    summary="Create a product under a newly assigned key",
)
async def create_product(payload: ProductBody, registry: RegistryDependency) -> Product:
    """Create a product; the name is checked by the registry's validator."""

    logger.debug("Received payload: %s", payload.model_dump_json(by_alias=True))
    return registry.create(payload.name)


@router.put(
    "/{product_id}",
    status_code=status.HTTP_200_OK,
    summary="Rename an existing product",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": ProductBody.model_json_schema()}
            },
        }
    },
)
async def update_product(
    product_id: int,
    request: Request,
    registry: RegistryDependency,
) -> Product:
    """Rename a product; an unknown id is a 404 whatever the body holds."""

    registry.get(product_id)
    payload = await _read_body(request)
    return registry.update(product_id, payload.name)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete a product and return it",
)
async def delete_product(product_id: int, registry: RegistryDependency) -> Product:
    return registry.delete(product_id)
