"""
Sample dataset: three customers, two addresses, two orders and three
customer/order links, one order being shared with Primary/Secondary roles.

Seeding is skipped when any customer already exists.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import func, select

from customer_mgmt.db.unit_of_work import UnitOfWork
from customer_mgmt.models.address import Address
from customer_mgmt.models.customer import Customer
from customer_mgmt.models.customer_order import CustomerOrder
from customer_mgmt.models.order import Order
from customer_mgmt.repositories.customer_repository import CustomerRepository
from customer_mgmt.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)

SAMPLE_CUSTOMERS = [
    {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@email.com",
        "phone": "(555) 123-4567",
        "customer_type": "Individual",
        "address": {
            "address_type": "Home",
            "street": "123 Main St",
            "city": "Anytown",
            "state": "CA",
            "zip_code": "12345",
        },
    },
    {
        "first_name": "Jane",
        "last_name": "Smith",
        "email": "jane.smith@email.com",
        "phone": "(555) 987-6543",
        "customer_type": "Premium",
        "address": {
            "address_type": "Work",
            "street": "456 Business Ave",
            "city": "Commerce City",
            "state": "NY",
            "zip_code": "67890",
        },
    },
    {
        "first_name": "Acme",
        "last_name": "Corporation",
        "email": "contact@acme.com",
        "phone": "(555) 555-0123",
        "customer_type": "Business",
        "address": None,
    },
]

SAMPLE_ORDERS = [
    {
        "order_number": "ORD-001",
        "total_amount": Decimal("299.99"),
        "status": "Completed",
        "description": "First sample order",
        # (customer index, role)
        "links": [(0, "Primary")],
    },
    {
        "order_number": "ORD-002",
        "total_amount": Decimal("149.50"),
        "status": "Pending",
        "description": "Second sample order",
        "links": [(1, "Primary"), (0, "Secondary")],
    },
]


def seed_sample_data(uow: UnitOfWork) -> bool:
    existing = uow.session.execute(select(func.count(Customer.id))).scalar()
    if existing:
        logger.info("seed_sample_data_skipped customers=%s", existing)
        return False

    customers_repo = CustomerRepository(uow)
    customers = []
    for row in SAMPLE_CUSTOMERS:
        data = dict(row)
        address = data.pop("address")
        customer = Customer(**data)
        if address:
            customer.addresses.append(Address(is_primary=True, **address))
        customers.append(customers_repo.create(customer))
    customers_repo.commit()

    orders_repo = OrderRepository(uow)
    for row in SAMPLE_ORDERS:
        data = dict(row)
        links = data.pop("links")
        order = Order(**data)
        for index, role in links:
            order.customer_orders.append(
                CustomerOrder(customer_id=customers[index].id, role=role)
            )
        orders_repo.create(order)
    orders_repo.commit()

    logger.info(
        "seed_sample_data_done customers=%s orders=%s",
        len(SAMPLE_CUSTOMERS),
        len(SAMPLE_ORDERS),
    )
    return True
