# ecommerce_http_api/services/orders_service.py

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ecommerce_http_api.db import models
from ecommerce_http_api.exceptions import InactiveResourceError, ResourceNotFoundError
from ecommerce_http_api.logging import get_logger
from ecommerce_http_api.mappers import order_to_response
from ecommerce_http_api.repositories.orders import OrdersRepository
from ecommerce_http_api.repositories.products import ProductsRepository
from ecommerce_http_api.repositories.users import UsersRepository
from ecommerce_http_api.schemas.orders import OrderLineRequest, OrderResponse

logger = get_logger(__name__)


class OrdersService:
    """
    Order placement and maintenance.

    Responsibilities:
    - Validate the owning user and every referenced product.
    - Snapshot product name, description and price into each line.
    - Recompute the order total from scratch whenever lines change.
    - Reject updates on inactive orders; soft-delete otherwise.

    There is no version check: two concurrent updates of the same order
    are last-writer-wins.
    """

    def __init__(
        self,
        orders: OrdersRepository,
        products: ProductsRepository,
        users: UsersRepository,
    ) -> None:
        self._orders = orders
        self._products = products
        self._users = users

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def validate_user_id(self, user_id: int) -> models.User:
        """
        Return the user with ``user_id`` or raise ResourceNotFoundError.
        """
        logger.info("user_validating", user_id=user_id)
        user = self._users.get_by_id(user_id)
        if user is None:
            logger.error("user_not_found", user_id=user_id)
            raise ResourceNotFoundError("User", "id", user_id)
        return user

    def _build_lines(
        self,
        requested: Sequence[OrderLineRequest],
    ) -> Tuple[List[models.OrderLine], float]:
        """
        Resolve every requested product and build snapshot lines.

        All products are resolved before anything is attached to an order,
        so an unknown product id leaves the session untouched.
        """
        lines: List[models.OrderLine] = []

        for item in requested:
            product = self._products.get_by_id(item.product_id)
            if product is None:
                logger.error("product_not_found", product_id=item.product_id)
                raise ResourceNotFoundError("Product", "id", item.product_id)

            lines.append(
                models.OrderLine(
                    product_id=product.id,
                    product_name=product.name,
                    description_snap=product.description,
                    quantity=item.quantity,
                    unit_price=product.price,
                )
            )

        total = sum((line.extension for line in lines), 0.0)
        return lines, total

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def create_order(
        self,
        user_id: int,
        lines: Sequence[OrderLineRequest],
    ) -> models.Order:
        """
        Place an order for ``user_id``. An empty line list is accepted and
        yields an order with total 0.
        """
        logger.info("order_creating", user_id=user_id, lines=len(lines))

        user = self.validate_user_id(user_id)
        order_lines, total = self._build_lines(lines)

        order = models.Order(user=user, lines=order_lines, total=total, active=True)
        self._orders.save(order)
        self._orders.session.commit()

        logger.info("order_created", order_id=order.id, total=order.total)
        return order

    def update_order(
        self,
        order_id: int,
        lines: Sequence[OrderLineRequest],
    ) -> OrderResponse:
        """
        Replace the whole line set of an active order and recompute its
        total. Old lines are deleted as orphans.
        """
        logger.info("order_updating", order_id=order_id)

        order = self._orders.get_by_id(order_id)
        if order is None:
            logger.error("order_update_not_found", order_id=order_id)
            raise ResourceNotFoundError("Order", "id", order_id)

        if not order.active:
            logger.error("order_update_inactive", order_id=order_id)
            raise InactiveResourceError("Order", order_id)

        order_lines, total = self._build_lines(lines)

        order.lines = order_lines
        order.total = total
        self._orders.save(order)
        self._orders.session.commit()

        logger.info("order_updated", order_id=order_id, total=order.total)
        return order_to_response(order)

    def delete_order(self, order_id: int) -> None:
        """
        Soft-delete an order. Repeating the call on an inactive order
        succeeds without changes.
        """
        logger.info("order_deleting", order_id=order_id)

        order = self._orders.get_by_id(order_id)
        if order is None:
            logger.error("order_delete_not_found", order_id=order_id)
            raise ResourceNotFoundError("Order", "id", order_id)

        order.active = False
        self._orders.save(order)
        self._orders.session.commit()
        logger.info("order_deactivated", order_id=order_id)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_order(self, order_id: int) -> Optional[models.Order]:
        """
        Return the order or None; the caller decides how to report absence.
        """
        logger.info("order_fetching", order_id=order_id)
        order = self._orders.get_by_id(order_id)
        if order is None:
            logger.warning("order_not_found", order_id=order_id)
        return order

    def list_orders(self) -> List[models.Order]:
        logger.info("orders_listing")
        orders = list(self._orders.list_all())
        logger.info("orders_listed", count=len(orders))
        return orders

    def list_active_orders(self) -> List[models.Order]:
        logger.info("active_orders_listing")
        orders = list(self._orders.list_active())
        logger.info("active_orders_listed", count=len(orders))
        return orders

    def list_orders_by_user(self, user_id: int) -> List[models.Order]:
        logger.info("user_orders_listing", user_id=user_id)
        self.validate_user_id(user_id)
        orders = list(self._orders.list_by_user(user_id))
        if not orders:
            logger.warning("user_orders_empty", user_id=user_id)
        logger.info("user_orders_listed", user_id=user_id, count=len(orders))
        return orders

    def list_active_orders_by_user(self, user_id: int) -> List[models.Order]:
        logger.info("user_active_orders_listing", user_id=user_id)
        user = self.validate_user_id(user_id)
        orders = list(self._orders.list_by_user(user.id, active_only=True))
        if not orders:
            logger.warning("user_active_orders_empty", user_id=user_id)
        logger.info("user_active_orders_listed", user_id=user_id, count=len(orders))
        return orders
