"""Health and readiness check routes."""

from fastapi import APIRouter, Depends

from config import settings
from services.product_list import ProductListService, get_product_list_service

router = APIRouter()


@router.get("/ready")
async def ready() -> dict:
    """Lightweight readiness check."""
    return {"status": "ok", "service": "productlist-api", "commit": settings.git_sha}


@router.get("/health")
def health(service: ProductListService = Depends(get_product_list_service)) -> dict:
    """Health check that also reports whether the product list is cached."""
    return {
        "status": "ok",
        "service": "productlist-api",
        "commit": settings.git_sha,
        "cache": "warm" if service.is_cached() else "cold",
    }
