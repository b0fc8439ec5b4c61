from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from customer_mgmt.core.exceptions import NotFoundError
from customer_mgmt.core.flow_logging import flow_info
from customer_mgmt.db.unit_of_work import UnitOfWork
from customer_mgmt.models.customer_order import CustomerOrder
from customer_mgmt.models.order import Order

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("order_number", "total_amount", "status", "description")


class OrderRepository:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @property
    def db(self):
        return self.uow.session

    @staticmethod
    def _with_customers():
        return selectinload(Order.customer_orders).selectinload(CustomerOrder.customer)

    def list_all(self) -> list[Order]:
        stmt = select(Order).options(self._with_customers()).order_by(Order.id)
        return list(self.db.execute(stmt).scalars().all())

    def get_by_id(self, order_id: int) -> Order | None:
        stmt = select(Order).options(self._with_customers()).where(Order.id == order_id)
        return self.db.execute(stmt).scalars().first()

    def list_by_customer(self, customer_id: int) -> list[Order]:
        # EXISTS keeps each order once even when the pair is linked twice.
        stmt = (
            select(Order)
            .options(self._with_customers())
            .where(Order.customer_orders.any(CustomerOrder.customer_id == customer_id))
            .order_by(Order.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def create(self, order: Order) -> Order:
        """Stage an order and any CustomerOrder rows already attached to it."""
        self.db.add(order)
        flow_info(
            logger,
            "order_create_staged number=%s links=%s",
            order.order_number,
            len(order.customer_orders),
            category="repository",
        )
        return order

    def update(self, order: Order) -> Order:
        existing = self.db.get(Order, order.id) if order.id is not None else None
        if existing is None:
            raise NotFoundError.for_entity("Order", order.id)
        if order is not existing:
            for field in _UPDATABLE_FIELDS:
                setattr(existing, field, getattr(order, field))
        return existing

    def delete(self, order_id: int) -> None:
        order = self.db.get(Order, order_id)
        if order is None:
            raise NotFoundError.for_entity("Order", order_id)
        # Join rows go with the order (delete-orphan cascade).
        self.db.delete(order)
        flow_info(logger, "order_delete_staged id=%s", order_id, category="repository")

    def link_customer(self, customer_order: CustomerOrder) -> CustomerOrder:
        # Duplicate (customer_id, order_id) pairs are accepted as-is.
        self.db.add(customer_order)
        flow_info(
            logger,
            "order_link_staged customer_id=%s order_id=%s role=%s",
            customer_order.customer_id,
            customer_order.order_id,
            customer_order.role,
            category="repository",
        )
        return customer_order

    def unlink_customer(self, customer_id: int, order_id: int) -> int:
        stmt = select(CustomerOrder).where(
            CustomerOrder.customer_id == customer_id,
            CustomerOrder.order_id == order_id,
        )
        links = list(self.db.execute(stmt).scalars().all())
        if not links:
            raise NotFoundError(
                message=f"Customer {customer_id} is not linked to order {order_id}.",
                entity="CustomerOrder",
            )
        for link in links:
            self.db.delete(link)
        return len(links)

    def commit(self) -> None:
        self.uow.commit()
