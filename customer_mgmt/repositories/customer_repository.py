from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import exists, or_, select
from sqlalchemy.orm import selectinload

from customer_mgmt.core.exceptions import ConstraintViolationError, NotFoundError
from customer_mgmt.core.flow_logging import flow_info
from customer_mgmt.db.unit_of_work import UnitOfWork
from customer_mgmt.models.customer import Customer
from customer_mgmt.models.customer_order import CustomerOrder

logger = logging.getLogger(__name__)

# Fields copied by update(); created_date and id are never overwritten.
_UPDATABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "customer_type",
    "notes",
    "is_active",
)


class CustomerRepository:
    """
    Reads and staged writes over Customer.

    Writes are only staged on the unit of work; nothing is persisted until
    `commit()` (or the shared UnitOfWork's commit) runs.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @property
    def db(self):
        return self.uow.session

    @staticmethod
    def _with_summary():
        return (
            selectinload(Customer.addresses),
            selectinload(Customer.customer_orders),
        )

    def list_active(self) -> list[Customer]:
        # Store-default ordering; callers that need determinism sort afterwards.
        self.uow.flush()
        stmt = (
            select(Customer)
            .options(*self._with_summary())
            .where(Customer.is_active.is_(True))
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_by_id(self, customer_id: int) -> Customer | None:
        return self.db.get(Customer, customer_id)

    def get_by_id_with_associations(self, customer_id: int) -> Customer | None:
        stmt = (
            select(Customer)
            .options(
                selectinload(Customer.addresses),
                selectinload(Customer.customer_orders).selectinload(CustomerOrder.order),
            )
            .where(Customer.id == customer_id)
        )
        return self.db.execute(stmt).scalars().first()

    def search(self, text: str | None) -> list[Customer]:
        if not text:
            return []
        self.uow.flush()
        stmt = (
            select(Customer)
            .options(*self._with_summary())
            .where(Customer.is_active.is_(True))
            .where(
                or_(
                    Customer.first_name.contains(text, autoescape=True),
                    Customer.last_name.contains(text, autoescape=True),
                    Customer.email.contains(text, autoescape=True),
                )
            )
        )
        return list(self.db.execute(stmt).scalars().all())

    def filter_by_type(self, customer_type: str) -> list[Customer]:
        self.uow.flush()
        stmt = (
            select(Customer)
            .options(*self._with_summary())
            .where(Customer.is_active.is_(True))
            .where(Customer.customer_type == customer_type)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_by_email(self, email: str) -> Customer | None:
        stmt = select(Customer).where(Customer.email == email)
        return self.db.execute(stmt).scalars().first()

    def email_exists(self, email: str, exclude_id: int | None = None) -> bool:
        condition = Customer.email == email
        if exclude_id is not None:
            condition = condition & (Customer.id != exclude_id)
        return bool(self.db.execute(select(exists().where(condition))).scalar())

    def create(self, customer: Customer) -> Customer:
        """
        Stage a new customer together with any addresses attached to it.

        The email is checked against committed rows here; a duplicate staged
        in the same unit of work is caught by the unique constraint on commit.
        """
        if self.email_exists(customer.email):
            raise ConstraintViolationError(
                message=f"A customer with email '{customer.email}' already exists."
            )

        now = datetime.utcnow()
        customer.created_date = now
        customer.last_updated = now
        if customer.is_active is None:
            customer.is_active = True

        # At most one attached address may be primary.
        primaries = [a for a in customer.addresses if a.is_primary]
        for extra in primaries[1:]:
            extra.is_primary = False

        self.db.add(customer)
        flow_info(
            logger,
            "customer_create_staged email=%s addresses=%s",
            customer.email,
            len(customer.addresses),
            category="repository",
        )
        return customer

    def update(self, customer: Customer) -> Customer:
        existing = self.get_by_id(customer.id) if customer.id is not None else None
        if existing is None:
            raise NotFoundError.for_entity("Customer", customer.id)

        if self.email_exists(customer.email, exclude_id=existing.id):
            raise ConstraintViolationError(
                message=f"A customer with email '{customer.email}' already exists."
            )

        if customer is not existing:
            for field in _UPDATABLE_FIELDS:
                setattr(existing, field, getattr(customer, field))
        if existing.is_active is None:
            existing.is_active = True
        existing.last_updated = datetime.utcnow()

        flow_info(logger, "customer_update_staged id=%s", existing.id, category="repository")
        return existing

    def soft_delete(self, customer_id: int) -> Customer:
        customer = self.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError.for_entity("Customer", customer_id)

        customer.is_active = False
        customer.last_updated = datetime.utcnow()
        flow_info(logger, "customer_soft_delete_staged id=%s", customer_id, category="repository")
        return customer

    def commit(self) -> None:
        self.uow.commit()
