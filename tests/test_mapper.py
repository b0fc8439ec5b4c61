from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from customer_mgmt.models.address import Address
from customer_mgmt.models.customer import Customer
from customer_mgmt.models.customer_order import CustomerOrder
from customer_mgmt.models.order import Order
from customer_mgmt.services.mapper import (
    customer_from_dto,
    format_full_address,
    split_full_address,
    split_full_name,
    to_customer_dto,
    to_order_dto,
)


def _customer_with_two_addresses() -> Customer:
    return Customer(
        id=7,
        first_name="Jane",
        last_name="Smith",
        email="jane@y.org",
        phone="(555) 987-6543",
        customer_type="Premium",
        is_active=True,
        created_date=datetime(2024, 1, 2, 3, 4, 5),
        addresses=[
            Address(
                id=1, address_type="Home", street="123 Main St", city="Anytown",
                state="CA", zip_code="12345", is_primary=True,
            ),
            Address(
                id=2, address_type="Work", street="456 Business Ave", city="Commerce City",
                state="NY", zip_code="67890", is_primary=False,
            ),
        ],
    )


def test_customer_projection_flattens_names_and_addresses():
    dto = to_customer_dto(_customer_with_two_addresses())

    assert dto.customer_id == 7
    assert dto.full_name == "Jane Smith"
    assert dto.customer_type == "Premium"
    assert [a.full_address for a in dto.addresses] == [
        "123 Main St, Anytown, CA 12345",
        "456 Business Ave, Commerce City, NY 67890",
    ]
    assert [a.is_primary for a in dto.addresses] == [True, False]
    assert dto.total_orders == 0


def test_customer_projection_counts_order_links():
    customer = _customer_with_two_addresses()
    customer.customer_orders = [
        CustomerOrder(order_id=1, role="Primary"),
        CustomerOrder(order_id=2, role="Secondary"),
    ]

    assert to_customer_dto(customer).total_orders == 2
    assert to_customer_dto(customer, order_count=5).total_orders == 5


def test_round_trip_preserves_names_and_address_text():
    original = _customer_with_two_addresses()

    rebuilt = customer_from_dto(to_customer_dto(original))

    assert rebuilt.first_name == original.first_name
    assert rebuilt.last_name == original.last_name
    assert [a.full_address for a in rebuilt.addresses] == [
        a.full_address for a in original.addresses
    ]
    assert [a.is_primary for a in rebuilt.addresses] == [True, False]
    assert rebuilt.email == original.email


def test_missing_optional_fields_default_to_empty_values():
    dto = to_customer_dto(Customer())

    assert dto.customer_id == 0
    assert dto.email == ""
    assert dto.phone == ""
    assert dto.customer_type == ""
    assert dto.addresses == []
    assert dto.total_orders == 0


def test_order_projection_lists_customers_with_roles():
    john = Customer(id=1, first_name="John", last_name="Doe", email="john@x.com")
    jane = Customer(id=2, first_name="Jane", last_name="Smith", email="jane@y.org")
    order = Order(
        id=10,
        order_number="ORD-002",
        total_amount=Decimal("149.50"),
        status="Pending",
        customer_orders=[
            CustomerOrder(customer_id=2, customer=jane, role="Primary"),
            CustomerOrder(customer_id=1, customer=john, role="Secondary"),
        ],
    )

    dto = to_order_dto(order)

    assert dto.order_id == 10
    assert dto.total_amount == Decimal("149.50")
    assert dto.description is None
    assert [(c.customer_id, c.full_name, c.role) for c in dto.customers] == [
        (2, "Jane Smith", "Primary"),
        (1, "John Doe", "Secondary"),
    ]


def test_order_projection_defaults():
    dto = to_order_dto(Order())

    assert dto.order_number == ""
    assert dto.total_amount == Decimal("0")
    assert dto.status == ""
    assert dto.customers == []


def test_split_helpers_invert_formatting():
    text = format_full_address("1 Elm St, Apt 4", "Springfield", "IL", "62704")

    assert split_full_address(text) == ("1 Elm St, Apt 4", "Springfield", "IL", "62704")
    assert split_full_name("John Doe") == ("John", "Doe")
    assert split_full_name("Acme Corporation Ltd") == ("Acme", "Corporation Ltd")
    assert split_full_address("nowhere") == ("nowhere", "", "", "")
