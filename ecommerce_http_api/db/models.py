# ecommerce_http_api/db/models.py

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    TypeDecorator,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _today() -> date:
    return datetime.now(timezone.utc).date()


class UTCDateTime(TypeDecorator):
    """
    Timestamp that always comes back timezone-aware in UTC.

    SQLite drops the offset on storage, so naive values read back are
    tagged as UTC; aware values are converted before binding.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(Base):
    """
    A customer account.

    Users are never removed from the table; "deleting" one flips `active`
    to False so its orders keep a valid owner.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # Set once on insert; update paths never touch it.
    create_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        default=_today,
    )

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    orders: Mapped[List["Order"]] = relationship(
        "Order",
        back_populates="user",
    )

    def __repr__(self) -> str:
        return f"<User id={self.id!r} email={self.email!r} active={self.active!r}>"


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


class Product(Base):
    """
    A catalogue item. `price` is nullable and unconstrained.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id!r} name={self.name!r} active={self.active!r}>"


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


class Order(Base):
    """
    A purchase made by a user.

    `total` is derived from the lines and recomputed in full by the order
    service whenever the line set changes. Replacing `lines` deletes the
    orphaned rows.
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=_utcnow,
    )

    total: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        index=True,
    )

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="orders")

    lines: Mapped[List["OrderLine"]] = relationship(
        "OrderLine",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderLine.id",
    )

    def __repr__(self) -> str:
        return (
            f"<Order id={self.id!r} user_id={self.user_id!r} "
            f"total={self.total!r} active={self.active!r}>"
        )


class OrderLine(Base):
    """
    One product entry of an order.

    Name, description and unit price are copied from the product when the
    line is built and are never re-synchronized afterwards.
    """

    __tablename__ = "order_lines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    order_id: Mapped[int] = mapped_column(
        ForeignKey("orders.id"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[int] = mapped_column(
        ForeignKey("products.id"),
        nullable=False,
        index=True,
    )

    # Snapshot columns
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description_snap: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    unit_price: Mapped[float] = mapped_column(Float, nullable=False)

    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    order: Mapped[Order] = relationship("Order", back_populates="lines")
    product: Mapped[Product] = relationship("Product")

    @property
    def extension(self) -> float:
        return self.unit_price * self.quantity

    def __repr__(self) -> str:
        return (
            f"<OrderLine id={self.id!r} order_id={self.order_id!r} "
            f"product_id={self.product_id!r} quantity={self.quantity!r}>"
        )
