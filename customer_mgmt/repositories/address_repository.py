from __future__ import annotations

import logging

from sqlalchemy import select

from customer_mgmt.core.exceptions import InvalidInputError, NotFoundError
from customer_mgmt.core.flow_logging import flow_info
from customer_mgmt.db.unit_of_work import UnitOfWork
from customer_mgmt.models.address import Address

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = (
    "address_type",
    "street",
    "city",
    "state",
    "zip_code",
    "country",
    "is_primary",
)


class AddressRepository:
    """Staged CRUD over Address, always scoped to the owning customer."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @property
    def db(self):
        return self.uow.session

    def list_by_customer(self, customer_id: int) -> list[Address]:
        stmt = (
            select(Address)
            .where(Address.customer_id == customer_id)
            .order_by(Address.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_by_id(self, address_id: int) -> Address | None:
        return self.db.get(Address, address_id)

    def _clear_siblings(self, customer_id: int, keep: Address | None = None) -> None:
        # Staged siblings must be visible to the query below.
        self.uow.flush()
        for sibling in self.list_by_customer(customer_id):
            if sibling is not keep and sibling.is_primary:
                sibling.is_primary = False

    def create(self, address: Address) -> Address:
        if address.customer_id is None:
            raise InvalidInputError(message="Address requires an owning customer_id.")
        if address.is_primary:
            self._clear_siblings(address.customer_id, keep=address)
        self.db.add(address)
        # Assigns the id so set_primary() can target it before commit.
        self.uow.flush()
        flow_info(
            logger,
            "address_create_staged customer_id=%s primary=%s",
            address.customer_id,
            bool(address.is_primary),
            category="repository",
        )
        return address

    def update(self, address: Address) -> Address:
        existing = self.get_by_id(address.id) if address.id is not None else None
        if existing is None:
            raise NotFoundError.for_entity("Address", address.id)
        if address.customer_id is not None and address.customer_id != existing.customer_id:
            raise InvalidInputError(
                message="An address cannot be moved to a different customer."
            )

        if address is not existing:
            for field in _UPDATABLE_FIELDS:
                setattr(existing, field, getattr(address, field))
        if existing.is_primary:
            self._clear_siblings(existing.customer_id, keep=existing)
        return existing

    def delete(self, address_id: int) -> None:
        address = self.get_by_id(address_id)
        if address is None:
            raise NotFoundError.for_entity("Address", address_id)
        self.db.delete(address)
        flow_info(logger, "address_delete_staged id=%s", address_id, category="repository")

    def set_primary(self, customer_id: int, address_id: int) -> list[Address]:
        """
        Mark one address primary and clear the flag on all of its siblings.

        The whole set is rewritten in the caller's unit of work, so after commit
        exactly one of the customer's addresses is primary.
        """
        self.uow.flush()
        addresses = self.list_by_customer(customer_id)
        if not any(a.id == address_id for a in addresses):
            raise NotFoundError(
                message=f"Address {address_id} does not belong to customer {customer_id}.",
                entity="Address",
                entity_id=address_id,
            )
        for address in addresses:
            address.is_primary = address.id == address_id

        flow_info(
            logger,
            "address_set_primary_staged customer_id=%s address_id=%s siblings=%s",
            customer_id,
            address_id,
            len(addresses) - 1,
            category="repository",
        )
        return addresses

    def commit(self) -> None:
        self.uow.commit()
