# tests/conftest.py
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from ecommerce_http_api.config import AppEnv, Settings
from ecommerce_http_api.db.models import Base
from ecommerce_http_api.db.session import build_engine, build_session_factory
from ecommerce_http_api.main import create_app
from ecommerce_http_api.repositories import (
    OrdersRepository,
    ProductsRepository,
    UsersRepository,
)
from ecommerce_http_api.services import OrdersService, ProductsService, UsersService


@pytest.fixture(scope="function")
def settings() -> Settings:
    """In-memory database, no demo rows, quiet logs."""
    return Settings(
        app_env=AppEnv.TESTING,
        database_url="sqlite://",
        seed_data=False,
        log_level="WARNING",
        log_format="console",
    )


@pytest.fixture(scope="function")
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture(scope="function")
def client(app: FastAPI) -> Iterator[TestClient]:
    """
    Entering the client runs the lifespan, which creates the tables.
    """
    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# Service-level fixtures (no HTTP)
# ---------------------------------------------------------------------------


@pytest.fixture(scope="function")
def db() -> Iterator[Session]:
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    factory = build_session_factory(engine)
    session = factory()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture(scope="function")
def users_service(db: Session) -> UsersService:
    return UsersService(UsersRepository(db))


@pytest.fixture(scope="function")
def products_service(db: Session) -> ProductsService:
    return ProductsService(ProductsRepository(db))


@pytest.fixture(scope="function")
def orders_service(db: Session) -> OrdersService:
    return OrdersService(
        orders=OrdersRepository(db),
        products=ProductsRepository(db),
        users=UsersRepository(db),
    )
