"""
Pure projections from entity graphs to flat, transport-ready DTOs.

No I/O happens here. Missing optional values become "" or 0.
"""

from __future__ import annotations

from decimal import Decimal

from customer_mgmt.models.address import Address
from customer_mgmt.models.customer import Customer
from customer_mgmt.models.customer_order import CustomerOrder
from customer_mgmt.models.order import Order
from customer_mgmt.schemas.address import AddressOut
from customer_mgmt.schemas.customer import CustomerOut, CustomerSummaryOut
from customer_mgmt.schemas.order import OrderOut


def format_full_name(first_name: str | None, last_name: str | None) -> str:
    return f"{first_name or ''} {last_name or ''}"


def format_full_address(
    street: str | None,
    city: str | None,
    state: str | None,
    zip_code: str | None,
) -> str:
    return f"{street or ''}, {city or ''}, {state or ''} {zip_code or ''}"


def split_full_name(full_name: str) -> tuple[str, str]:
    # Multi-word first names cannot be told apart from multi-word last names;
    # everything after the first space is treated as the last name.
    first, _, last = (full_name or "").partition(" ")
    return first, last


def split_full_address(full_address: str) -> tuple[str, str, str, str]:
    """Inverse of format_full_address: (street, city, state, zip_code)."""
    parts = (full_address or "").rsplit(", ", 2)
    if len(parts) < 3:
        return full_address or "", "", "", ""
    street, city, state_zip = parts
    state, _, zip_code = state_zip.rpartition(" ")
    return street, city, state, zip_code


def to_address_dto(address: Address) -> AddressOut:
    return AddressOut(
        address_id=address.id or 0,
        address_type=address.address_type or "",
        full_address=format_full_address(
            address.street, address.city, address.state, address.zip_code
        ),
        is_primary=bool(address.is_primary),
    )


def to_customer_dto(customer: Customer, order_count: int | None = None) -> CustomerOut:
    if order_count is None:
        order_count = len(customer.customer_orders or [])
    return CustomerOut(
        customer_id=customer.id or 0,
        full_name=format_full_name(customer.first_name, customer.last_name),
        email=customer.email or "",
        phone=customer.phone or "",
        created_date=customer.created_date,
        is_active=True if customer.is_active is None else bool(customer.is_active),
        customer_type=customer.customer_type or "",
        addresses=[to_address_dto(a) for a in customer.addresses or []],
        total_orders=order_count,
    )


def to_customer_summary(link: CustomerOrder) -> CustomerSummaryOut:
    customer = link.customer
    return CustomerSummaryOut(
        customer_id=link.customer_id or 0,
        full_name=format_full_name(customer.first_name, customer.last_name) if customer else "",
        email=(customer.email or "") if customer else "",
        role=link.role or "",
    )


def to_order_dto(order: Order) -> OrderOut:
    return OrderOut(
        order_id=order.id or 0,
        order_number=order.order_number or "",
        order_date=order.order_date,
        total_amount=order.total_amount if order.total_amount is not None else Decimal("0"),
        status=order.status or "",
        description=order.description,
        customers=[to_customer_summary(link) for link in order.customer_orders or []],
    )


def customer_from_dto(dto: CustomerOut) -> Customer:
    """
    Rebuild a transient Customer (with addresses) from its flat projection.

    The result is never attached to a session.
    """
    first_name, last_name = split_full_name(dto.full_name)
    addresses = []
    for item in dto.addresses:
        street, city, state, zip_code = split_full_address(item.full_address)
        addresses.append(
            Address(
                id=item.address_id or None,
                address_type=item.address_type,
                street=street,
                city=city,
                state=state,
                zip_code=zip_code,
                is_primary=item.is_primary,
            )
        )
    return Customer(
        id=dto.customer_id or None,
        first_name=first_name,
        last_name=last_name,
        email=dto.email,
        phone=dto.phone,
        customer_type=dto.customer_type or None,
        is_active=dto.is_active,
        created_date=dto.created_date,
        addresses=addresses,
    )
