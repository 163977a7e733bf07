"""System-level routes such as health checks."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from tronics.config import Settings
from tronics.services.product_registry import RegistryDependency

router = APIRouter(tags=["system"])


def _get_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""

    return request.app.state.settings


SettingsDependency = Annotated[Settings, Depends(_get_settings)]


@router.get("/health")
async def health_check(
    registry: RegistryDependency,
    settings: SettingsDependency,
) -> dict[str, str | int]:
    """Health check endpoint reporting the registry size."""

    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "products": registry.count(),
    }
