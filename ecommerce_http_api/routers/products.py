# ecommerce_http_api/routers/products.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ecommerce_http_api.db.session import get_session
from ecommerce_http_api.logging import get_logger
from ecommerce_http_api.mappers import product_to_read
from ecommerce_http_api.repositories.products import ProductsRepository
from ecommerce_http_api.routers.params import EntityId
from ecommerce_http_api.schemas.common import SuccessResponse
from ecommerce_http_api.schemas.products import ProductCreate, ProductRead, ProductUpdate
from ecommerce_http_api.services.products_service import ProductsService

router = APIRouter(prefix="/products", tags=["products"])
logger = get_logger(__name__)


def get_products_service(session: Session = Depends(get_session)) -> ProductsService:
    return ProductsService(ProductsRepository(session))


@router.get(
    "",
    response_model=SuccessResponse[List[ProductRead]],
    summary="Retrieve all products",
    description="Fetch all products, by default only the active ones.",
)
def list_products(
    *,
    service: ProductsService = Depends(get_products_service),
    active_only: bool = Query(
        True,
        alias="activeOnly",
        description="Only return products whose active flag is true.",
    ),
) -> SuccessResponse[List[ProductRead]]:
    logger.info("request_list_products", active_only=active_only)
    products = (
        service.list_active_products() if active_only else service.list_products()
    )
    message = (
        f"Retrieved {len(products)} active products successfully"
        if active_only
        else f"Retrieved {len(products)} products successfully"
    )
    return SuccessResponse.of(
        status.HTTP_200_OK,
        message,
        [product_to_read(p) for p in products],
    )


@router.get(
    "/{product_id}",
    response_model=SuccessResponse[ProductRead],
    summary="Retrieve a product by ID",
)
def get_product(
    *,
    product_id: EntityId,
    service: ProductsService = Depends(get_products_service),
) -> SuccessResponse[ProductRead]:
    logger.info("request_get_product", product_id=product_id)
    product = service.get_product(product_id)
    return SuccessResponse.of(
        status.HTTP_200_OK,
        f"Product {product_id} retrieved successfully",
        product_to_read(product),
    )


@router.post(
    "",
    response_model=SuccessResponse[ProductRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
)
def create_product(
    *,
    payload: ProductCreate,
    service: ProductsService = Depends(get_products_service),
) -> SuccessResponse[ProductRead]:
    logger.info("request_create_product", name=payload.name)
    product = service.create_product(payload)
    return SuccessResponse.of(
        status.HTTP_201_CREATED,
        f"Product '{product.name}' created successfully with ID: {product.id}",
        product_to_read(product),
    )


@router.put(
    "/{product_id}",
    response_model=SuccessResponse[ProductRead],
    summary="Update an existing product",
)
def update_product(
    *,
    product_id: EntityId,
    payload: ProductUpdate,
    service: ProductsService = Depends(get_products_service),
) -> SuccessResponse[ProductRead]:
    logger.info("request_update_product", product_id=product_id)
    product = service.update_product(product_id, payload)
    return SuccessResponse.of(
        status.HTTP_200_OK,
        f"Product {product_id} updated successfully",
        product_to_read(product),
    )


@router.delete(
    "/{product_id}",
    response_model=SuccessResponse[None],
    response_model_exclude_none=True,
    summary="Delete a product",
    description="Soft-delete (deactivate) a product. Existing orders are unaffected.",
)
def delete_product(
    *,
    product_id: EntityId,
    service: ProductsService = Depends(get_products_service),
) -> SuccessResponse[None]:
    logger.info("request_delete_product", product_id=product_id)
    service.delete_product(product_id)
    return SuccessResponse.of(
        status.HTTP_200_OK,
        f"Product {product_id} has been successfully deactivated",
    )
