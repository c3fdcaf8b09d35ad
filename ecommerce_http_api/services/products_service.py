# ecommerce_http_api/services/products_service.py

from __future__ import annotations

from typing import List

from ecommerce_http_api.db import models
from ecommerce_http_api.exceptions import ResourceNotFoundError
from ecommerce_http_api.logging import get_logger
from ecommerce_http_api.repositories.products import ProductsRepository
from ecommerce_http_api.schemas.products import ProductCreate, ProductUpdate

logger = get_logger(__name__)


class ProductsService:
    """
    Business operations on the product catalogue.

    Mirrors UsersService: existence checks, full-field updates and soft
    deletion. No stock or uniqueness rules apply.
    """

    def __init__(self, repo: ProductsRepository) -> None:
        self._repo = repo

    def list_products(self) -> List[models.Product]:
        logger.info("products_listing")
        products = list(self._repo.list_all())
        logger.info("products_listed", count=len(products))
        return products

    def list_active_products(self) -> List[models.Product]:
        logger.info("active_products_listing")
        products = list(self._repo.list_active())
        logger.info("active_products_listed", count=len(products))
        return products

    def get_product(self, product_id: int) -> models.Product:
        logger.info("product_fetching", product_id=product_id)
        product = self._repo.get_by_id(product_id)
        if product is None:
            logger.error("product_not_found", product_id=product_id)
            raise ResourceNotFoundError("Product", "id", product_id)
        return product

    def create_product(self, payload: ProductCreate) -> models.Product:
        logger.info("product_creating", name=payload.name)
        product = models.Product(
            name=payload.name,
            description=payload.description,
            price=payload.price,
            active=payload.active,
        )
        self._repo.save(product)
        self._repo.session.commit()
        logger.info("product_created", product_id=product.id)
        return product

    def update_product(self, product_id: int, payload: ProductUpdate) -> models.Product:
        """
        Overwrite name, price, description and active flag.

        Orders placed earlier keep their own snapshot of these values.
        """
        logger.info("product_updating", product_id=product_id)
        product = self._repo.get_by_id(product_id)
        if product is None:
            logger.error("product_update_not_found", product_id=product_id)
            raise ResourceNotFoundError("Product", "id", product_id)

        product.name = payload.name
        product.price = payload.price
        product.description = payload.description
        product.active = payload.active

        self._repo.save(product)
        self._repo.session.commit()
        logger.info("product_updated", product_id=product_id)
        return product

    def delete_product(self, product_id: int) -> None:
        logger.info("product_deleting", product_id=product_id)
        product = self._repo.get_by_id(product_id)
        if product is None:
            logger.error("product_delete_not_found", product_id=product_id)
            raise ResourceNotFoundError("Product", "id", product_id)

        product.active = False
        self._repo.save(product)
        self._repo.session.commit()
        logger.info("product_deactivated", product_id=product_id)
