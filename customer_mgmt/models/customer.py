from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from customer_mgmt.db.base import Base
from customer_mgmt.models.enums import CustomerType

if TYPE_CHECKING:
    from customer_mgmt.models.address import Address
    from customer_mgmt.models.customer_order import CustomerOrder
    from customer_mgmt.models.order import Order


class Customer(Base):
    """
    A customer record.

    Customers are never hard-deleted: soft delete flips is_active and the row
    stays retrievable by id and email. Addresses are owned exclusively;
    orders are shared through CustomerOrder rows.
    """
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)

    # Case-sensitive exact match; uniqueness spans active and inactive rows.
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(30), nullable=False, default="")

    customer_type: Mapped[str | None] = mapped_column(String(50), nullable=True, default="Individual")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    last_updated: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    addresses: Mapped[list["Address"]] = relationship(
        "Address",
        back_populates="customer",
        cascade="all, delete-orphan",
    )
    customer_orders: Mapped[list["CustomerOrder"]] = relationship(
        "CustomerOrder",
        back_populates="customer",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}"

    @property
    def customer_type_tag(self) -> CustomerType:
        return CustomerType.parse(self.customer_type)

    @property
    def order_count(self) -> int:
        return len(self.customer_orders)

    @property
    def orders(self) -> list["Order"]:
        seen = set()
        result = []
        for link in self.customer_orders:
            if link.order is not None and link.order_id not in seen:
                seen.add(link.order_id)
                result.append(link.order)
        return result

    @property
    def primary_address(self) -> "Address | None":
        for address in self.addresses:
            if address.is_primary:
                return address
        return None

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, email='{self.email}', active={self.is_active})>"
