from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from customer_mgmt.db.base import Base
from customer_mgmt.models.enums import AddressType

if TYPE_CHECKING:
    from customer_mgmt.models.customer import Customer


class Address(Base):
    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Owner never changes after creation.
    customer_id: Mapped[int] = mapped_column(
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    address_type: Mapped[str] = mapped_column(String(50), nullable=False, default="Home")
    street: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    state: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    country: Mapped[str] = mapped_column(String(100), nullable=False, default="USA")

    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    customer: Mapped["Customer"] = relationship("Customer", back_populates="addresses")

    @property
    def address_type_tag(self) -> AddressType:
        return AddressType.parse(self.address_type)

    @property
    def full_address(self) -> str:
        return f"{self.street or ''}, {self.city or ''}, {self.state or ''} {self.zip_code or ''}"

    def __repr__(self) -> str:
        return f"<Address(id={self.id}, customer_id={self.customer_id}, primary={self.is_primary})>"
