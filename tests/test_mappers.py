# tests/test_mappers.py
import datetime

from ecommerce_http_api.db.models import Order, OrderLine, Product, User
from ecommerce_http_api.mappers import (
    order_to_response,
    orders_to_response,
    product_to_read,
    user_to_read,
)


def _order() -> Order:
    product = Product(id=1, name="Laptop Pro", description="Renamed", price=1500.0)
    line = OrderLine(
        product_id=1,
        product=product,
        product_name="Laptop",
        description_snap="Gaming laptop",
        unit_price=1000.0,
        quantity=2,
    )
    return Order(
        id=7,
        user_id=1,
        created_at=datetime.datetime(2025, 1, 2, 3, 4, 5),
        total=2000.0,
        active=True,
        lines=[line],
    )


def test_order_response_reads_snapshot_not_live_product() -> None:
    response = order_to_response(_order())

    assert response.id == 7
    assert response.user_id == 1
    assert response.total == 2000.0
    assert response.active is True
    assert len(response.details) == 1
    line = response.details[0]
    assert line.product_name == "Laptop"
    assert line.description_snap == "Gaming laptop"
    assert line.unit_price == 1000.0


def test_order_response_serializes_camel_case() -> None:
    dumped = order_to_response(_order()).model_dump(by_alias=True)

    assert set(dumped) == {"id", "userId", "createdAt", "total", "active", "details"}
    assert set(dumped["details"][0]) == {
        "productId",
        "productName",
        "descriptionSnap",
        "quantity",
        "unitPrice",
    }


def test_orders_to_response_keeps_order() -> None:
    first, second = _order(), _order()
    second.id = 8

    assert [o.id for o in orders_to_response([first, second])] == [7, 8]


def test_user_and_product_mapping() -> None:
    user = User(
        id=3,
        name="Jose",
        last_name="Perez",
        email="jose@example.com",
        create_date=datetime.date(2025, 5, 1),
        active=False,
    )
    product = Product(
        id=4,
        name="Mouse",
        description=None,
        price=None,
        active=True,
        created_at=datetime.datetime(2025, 5, 1, 12, 0, 0),
    )

    assert user_to_read(user).model_dump(by_alias=True) == {
        "name": "Jose",
        "lastName": "Perez",
        "email": "jose@example.com",
        "active": False,
        "id": 3,
        "createDate": datetime.date(2025, 5, 1),
    }
    read = product_to_read(product)
    assert read.price is None
    assert read.description is None
