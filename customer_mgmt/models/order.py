from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from customer_mgmt.db.base import Base
from customer_mgmt.models.enums import OrderStatus

if TYPE_CHECKING:
    from customer_mgmt.models.customer import Customer
    from customer_mgmt.models.customer_order import CustomerOrder


class Order(Base):
    """
    Shared between customers through CustomerOrder rows; no single owner.
    """
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Caller-supplied; expected to be unique but not enforced.
    order_number: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    order_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=Decimal("0.00"))
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="Pending")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    customer_orders: Mapped[list["CustomerOrder"]] = relationship(
        "CustomerOrder",
        back_populates="order",
        cascade="all, delete-orphan",
    )

    @property
    def status_tag(self) -> OrderStatus:
        return OrderStatus.parse(self.status)

    @property
    def customers(self) -> list["Customer"]:
        return [link.customer for link in self.customer_orders if link.customer is not None]

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, number='{self.order_number}', status='{self.status}')>"
