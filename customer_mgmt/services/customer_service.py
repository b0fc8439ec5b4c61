from __future__ import annotations

import logging

from customer_mgmt.core.config import settings
from customer_mgmt.core.exceptions import InvalidInputError, NotFoundError
from customer_mgmt.db.unit_of_work import UnitOfWork
from customer_mgmt.models.address import Address
from customer_mgmt.models.customer import Customer
from customer_mgmt.models.validation import customer_validation_errors
from customer_mgmt.repositories.address_repository import AddressRepository
from customer_mgmt.repositories.customer_repository import CustomerRepository
from customer_mgmt.schemas.address import AddressCreate, AddressUpdate
from customer_mgmt.schemas.customer import CustomerCreate, CustomerUpdate

logger = logging.getLogger(__name__)


def _address_from_payload(payload: AddressCreate | AddressUpdate, **extra) -> Address:
    data = payload.model_dump()
    data.update(extra)
    return Address(**data)


class CustomerService:
    @staticmethod
    def _validate(first_name: str, last_name: str, email: str) -> None:
        errors = customer_validation_errors(first_name, last_name, email)
        if errors:
            raise InvalidInputError(message="Customer data is invalid.", errors=errors)

    @staticmethod
    def register_customer(uow: UnitOfWork, payload: CustomerCreate) -> Customer:
        """Create a customer and, when given, its primary address in one commit."""
        CustomerService._validate(payload.first_name, payload.last_name, payload.email)

        customer = Customer(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            phone=payload.phone or "",
            customer_type=payload.customer_type or settings.DEFAULT_CUSTOMER_TYPE,
            notes=payload.notes,
            is_active=True,
        )
        if payload.primary_address is not None:
            customer.addresses.append(
                _address_from_payload(payload.primary_address, is_primary=True)
            )

        repo = CustomerRepository(uow)
        repo.create(customer)
        repo.commit()
        logger.info("customer_registered id=%s", customer.id)
        return customer

    @staticmethod
    def update_customer(uow: UnitOfWork, customer_id: int, payload: CustomerUpdate) -> Customer:
        CustomerService._validate(payload.first_name, payload.last_name, payload.email)

        repo = CustomerRepository(uow)
        customer = repo.update(
            Customer(
                id=customer_id,
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email,
                phone=payload.phone or "",
                customer_type=payload.customer_type or settings.DEFAULT_CUSTOMER_TYPE,
                notes=payload.notes,
                is_active=payload.is_active,
            )
        )
        repo.commit()
        return customer

    @staticmethod
    def deactivate_customer(uow: UnitOfWork, customer_id: int) -> Customer:
        repo = CustomerRepository(uow)
        customer = repo.soft_delete(customer_id)
        repo.commit()
        logger.info("customer_deactivated id=%s", customer_id)
        return customer

    @staticmethod
    def add_address(uow: UnitOfWork, customer_id: int, payload: AddressCreate) -> Address:
        if CustomerRepository(uow).get_by_id(customer_id) is None:
            raise NotFoundError.for_entity("Customer", customer_id)

        repo = AddressRepository(uow)
        address = _address_from_payload(payload, customer_id=customer_id)
        repo.create(address)
        repo.commit()
        return address

    @staticmethod
    def update_address(
        uow: UnitOfWork, customer_id: int, address_id: int, payload: AddressUpdate
    ) -> Address:
        repo = AddressRepository(uow)
        existing = repo.get_by_id(address_id)
        if existing is None or existing.customer_id != customer_id:
            raise NotFoundError.for_entity("Address", address_id)

        address = repo.update(
            _address_from_payload(payload, id=address_id, customer_id=customer_id)
        )
        repo.commit()
        return address

    @staticmethod
    def remove_address(uow: UnitOfWork, customer_id: int, address_id: int) -> None:
        repo = AddressRepository(uow)
        existing = repo.get_by_id(address_id)
        if existing is None or existing.customer_id != customer_id:
            raise NotFoundError.for_entity("Address", address_id)
        repo.delete(address_id)
        repo.commit()

    @staticmethod
    def make_primary(uow: UnitOfWork, customer_id: int, address_id: int) -> list[Address]:
        repo = AddressRepository(uow)
        addresses = repo.set_primary(customer_id, address_id)
        repo.commit()
        return addresses
