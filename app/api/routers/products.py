# app/api/routers/products.py
from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import Services, get_services
from app.domain.enums import ProductCategory
from app.domain.errors import NotFoundError
from app.domain.schemas import ApiListResponse, ApiResponse, AvailabilityOut, Product
from app.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/products", tags=["products"])


def get_service(services: Services = Depends(get_services)) -> CatalogService:
    return services.catalog


@router.get("", response_model=ApiListResponse[Product])
def list_products(
    search: str | None = Query(None),
    category: ProductCategory | None = Query(None),
    tags: str | None = Query(None, description="Lista tagow oddzielona przecinkami"),
    svc: CatalogService = Depends(get_service),
):
    tag_list = [t.strip() for t in tags.split(",") if t.strip()] if tags else None
    products = svc.list_products(category=category, search=search, tags=tag_list)
    return ApiListResponse[Product](data=products, count=len(products))


@router.get("/{product_id}", response_model=ApiResponse[Product])
def get_product(product_id: str, svc: CatalogService = Depends(get_service)):
    try:
        return ApiResponse[Product](data=svc.get_product(product_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{product_id}/availability", response_model=ApiResponse[AvailabilityOut])
def check_availability(
    product_id: str,
    quantity: int = Query(1, ge=1),
    svc: CatalogService = Depends(get_service),
):
    try:
        product = svc.get_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ApiResponse[AvailabilityOut](
        data=AvailabilityOut(
            product_id=product_id,
            available=svc.check_availability(product_id, quantity),
            in_stock=product.in_stock,
            stock_quantity=product.stock_quantity,
            requested_quantity=quantity,
        )
    )
