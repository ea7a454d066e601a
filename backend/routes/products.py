"""Product list route — the cached catalog read."""

from fastapi import APIRouter, Depends

from responses import DecimalJSONResponse
from services.product_list import ProductListService, get_product_list_service

router = APIRouter()


@router.get("/api/productlist", response_class=DecimalJSONResponse)
def product_list(
    service: ProductListService = Depends(get_product_list_service),
) -> DecimalJSONResponse:
    """Return every product. Field names are PascalCase, prices exact decimals."""
    products = service.get_product_list()
    return DecimalJSONResponse([p.model_dump(by_alias=True) for p in products])
