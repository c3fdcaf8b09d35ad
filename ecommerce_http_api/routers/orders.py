# ecommerce_http_api/routers/orders.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from ecommerce_http_api.db.session import get_session
from ecommerce_http_api.exceptions import ResourceNotFoundError
from ecommerce_http_api.logging import get_logger
from ecommerce_http_api.mappers import order_to_response, orders_to_response
from ecommerce_http_api.repositories.orders import OrdersRepository
from ecommerce_http_api.repositories.products import ProductsRepository
from ecommerce_http_api.repositories.users import UsersRepository
from ecommerce_http_api.routers.params import EntityId
from ecommerce_http_api.schemas.common import SuccessResponse
from ecommerce_http_api.schemas.orders import OrderLineRequest, OrderResponse
from ecommerce_http_api.services.orders_service import OrdersService

router = APIRouter(prefix="/orders", tags=["orders"])
logger = get_logger(__name__)


def get_orders_service(session: Session = Depends(get_session)) -> OrdersService:
    """
    Dependency-injected factory for OrdersService.

    All three repositories share the request session, so an order and its
    lines are written in a single transaction.
    """
    return OrdersService(
        orders=OrdersRepository(session),
        products=ProductsRepository(session),
        users=UsersRepository(session),
    )


@router.post(
    "/{user_id}",
    response_model=SuccessResponse[OrderResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new order",
    description=(
        "Place an order for a user. The body is a list of "
        "{productId, quantity} entries; prices are taken from the products."
    ),
)
def create_order(
    *,
    user_id: EntityId,
    lines: List[OrderLineRequest] = Body(...),
    service: OrdersService = Depends(get_orders_service),
) -> SuccessResponse[OrderResponse]:
    logger.info("request_create_order", user_id=user_id, lines=len(lines))
    order = service.create_order(user_id, lines)
    return SuccessResponse.of(
        status.HTTP_201_CREATED,
        f"Order created successfully with ID: {order.id}",
        order_to_response(order),
    )


@router.get(
    "",
    response_model=SuccessResponse[List[OrderResponse]],
    summary="Get all orders",
    description="Retrieve all orders, by default only the active ones.",
)
def list_orders(
    *,
    service: OrdersService = Depends(get_orders_service),
    active_only: bool = Query(
        True,
        alias="activeOnly",
        description="Only return orders whose active flag is true.",
    ),
) -> SuccessResponse[List[OrderResponse]]:
    logger.info("request_list_orders", active_only=active_only)
    orders = service.list_active_orders() if active_only else service.list_orders()
    message = (
        f"Retrieved {len(orders)} active orders successfully"
        if active_only
        else f"Retrieved {len(orders)} orders successfully"
    )
    return SuccessResponse.of(status.HTTP_200_OK, message, orders_to_response(orders))


@router.get(
    "/user/{user_id}",
    response_model=SuccessResponse[List[OrderResponse]],
    summary="Get orders by user",
    description="Retrieve the orders belonging to one user.",
)
def list_orders_by_user(
    *,
    user_id: EntityId,
    service: OrdersService = Depends(get_orders_service),
    active_only: bool = Query(
        True,
        alias="activeOnly",
        description="Only return orders whose active flag is true.",
    ),
) -> SuccessResponse[List[OrderResponse]]:
    logger.info("request_list_user_orders", user_id=user_id, active_only=active_only)
    orders = (
        service.list_active_orders_by_user(user_id)
        if active_only
        else service.list_orders_by_user(user_id)
    )
    return SuccessResponse.of(
        status.HTTP_200_OK,
        f"Retrieved {len(orders)} orders for user {user_id} successfully",
        orders_to_response(orders),
    )


@router.get(
    "/{order_id}",
    response_model=SuccessResponse[OrderResponse],
    summary="Get order by ID",
)
def get_order(
    *,
    order_id: EntityId,
    service: OrdersService = Depends(get_orders_service),
) -> SuccessResponse[OrderResponse]:
    logger.info("request_get_order", order_id=order_id)
    order = service.get_order(order_id)
    if order is None:
        raise ResourceNotFoundError("Order", "id", order_id)
    return SuccessResponse.of(
        status.HTTP_200_OK,
        f"Order {order_id} retrieved successfully",
        order_to_response(order),
    )


@router.put(
    "/{order_id}",
    response_model=SuccessResponse[OrderResponse],
    summary="Update an order",
    description=(
        "Replace every line of an active order and recompute its total. "
        "Inactive orders are rejected with 400."
    ),
)
def update_order(
    *,
    order_id: EntityId,
    lines: List[OrderLineRequest] = Body(...),
    service: OrdersService = Depends(get_orders_service),
) -> SuccessResponse[OrderResponse]:
    logger.info("request_update_order", order_id=order_id, lines=len(lines))
    updated = service.update_order(order_id, lines)
    return SuccessResponse.of(
        status.HTTP_200_OK,
        f"Order {order_id} updated successfully",
        updated,
    )


@router.delete(
    "/{order_id}",
    response_model=SuccessResponse[None],
    response_model_exclude_none=True,
    summary="Delete an order",
    description="Soft-delete (deactivate) an order. Repeating the call is harmless.",
)
def delete_order(
    *,
    order_id: EntityId,
    service: OrdersService = Depends(get_orders_service),
) -> SuccessResponse[None]:
    logger.info("request_delete_order", order_id=order_id)
    service.delete_order(order_id)
    return SuccessResponse.of(
        status.HTTP_200_OK,
        f"Order {order_id} has been successfully deactivated",
    )
