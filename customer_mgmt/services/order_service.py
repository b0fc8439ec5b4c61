from __future__ import annotations

import logging

from customer_mgmt.core.exceptions import InvalidInputError, NotFoundError
from customer_mgmt.db.unit_of_work import UnitOfWork
from customer_mgmt.models.customer_order import CustomerOrder
from customer_mgmt.models.enums import OrderRole
from customer_mgmt.models.order import Order
from customer_mgmt.models.validation import is_valid_amount
from customer_mgmt.repositories.customer_repository import CustomerRepository
from customer_mgmt.repositories.order_repository import OrderRepository
from customer_mgmt.schemas.order import CustomerOrderCreate, OrderCreate, OrderUpdate

logger = logging.getLogger(__name__)


class OrderService:
    @staticmethod
    def _validate(order_number: str, total_amount) -> None:
        errors = []
        if not (order_number or "").strip():
            errors.append("order_number is required.")
        if not is_valid_amount(total_amount):
            errors.append("total_amount must be a non-negative decimal.")
        if errors:
            raise InvalidInputError(message="Order data is invalid.", errors=errors)

    @staticmethod
    def place_order(uow: UnitOfWork, payload: OrderCreate) -> Order:
        """
        Create an order linked to the given customers in one commit.

        The first customer id is linked as Primary, every other one as Secondary.
        """
        OrderService._validate(payload.order_number, payload.total_amount)

        customers = CustomerRepository(uow)
        for customer_id in payload.customer_ids:
            if customers.get_by_id(customer_id) is None:
                raise NotFoundError.for_entity("Customer", customer_id)

        order = Order(
            order_number=payload.order_number,
            total_amount=payload.total_amount,
            status=payload.status or "Pending",
            description=payload.description,
        )
        for position, customer_id in enumerate(payload.customer_ids):
            role = OrderRole.PRIMARY if position == 0 else OrderRole.SECONDARY
            order.customer_orders.append(
                CustomerOrder(customer_id=customer_id, role=role.value)
            )

        repo = OrderRepository(uow)
        repo.create(order)
        repo.commit()
        logger.info(
            "order_placed id=%s customers=%s", order.id, len(payload.customer_ids)
        )
        return order

    @staticmethod
    def update_order(uow: UnitOfWork, order_id: int, payload: OrderUpdate) -> Order:
        OrderService._validate(payload.order_number, payload.total_amount)

        repo = OrderRepository(uow)
        order = repo.update(Order(id=order_id, **payload.model_dump()))
        repo.commit()
        return order

    @staticmethod
    def cancel_order(uow: UnitOfWork, order_id: int) -> None:
        repo = OrderRepository(uow)
        repo.delete(order_id)
        repo.commit()

    @staticmethod
    def link(uow: UnitOfWork, order_id: int, payload: CustomerOrderCreate) -> CustomerOrder:
        repo = OrderRepository(uow)
        if repo.get_by_id(order_id) is None:
            raise NotFoundError.for_entity("Order", order_id)
        if CustomerRepository(uow).get_by_id(payload.customer_id) is None:
            raise NotFoundError.for_entity("Customer", payload.customer_id)

        link = repo.link_customer(
            CustomerOrder(customer_id=payload.customer_id, order_id=order_id, role=payload.role)
        )
        repo.commit()
        return link

    @staticmethod
    def unlink(uow: UnitOfWork, order_id: int, customer_id: int) -> int:
        repo = OrderRepository(uow)
        removed = repo.unlink_customer(customer_id, order_id)
        repo.commit()
        return removed
