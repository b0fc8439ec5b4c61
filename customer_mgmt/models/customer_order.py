from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from customer_mgmt.db.base import Base
from customer_mgmt.models.enums import OrderRole

if TYPE_CHECKING:
    from customer_mgmt.models.customer import Customer
    from customer_mgmt.models.order import Order


class CustomerOrder(Base):
    """
    Attributed customer <-> order link. Carries the customer's role on the order.

    No unique constraint on (customer_id, order_id): repeated pairs are allowed
    so a role history can be recorded as separate rows.
    """
    __tablename__ = "customer_orders"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    customer_id: Mapped[int] = mapped_column(
        ForeignKey("customers.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    order_id: Mapped[int] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role: Mapped[str] = mapped_column(String(50), nullable=False, default="Primary")

    customer: Mapped["Customer"] = relationship("Customer", back_populates="customer_orders")
    order: Mapped["Order"] = relationship("Order", back_populates="customer_orders")

    @property
    def role_tag(self) -> OrderRole:
        return OrderRole.parse(self.role)

    def __repr__(self) -> str:
        return f"<CustomerOrder(customer_id={self.customer_id}, order_id={self.order_id}, role='{self.role}')>"
