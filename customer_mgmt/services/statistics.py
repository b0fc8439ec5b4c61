"""
Read-only rollups across customers and orders.

Every metric runs its own aggregate query against the store instead of going
through repository methods, so no per-row loading happens. Nothing is cached;
each call reads fresh.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import func, select

from customer_mgmt.core.config import settings
from customer_mgmt.core.flow_logging import flow_info
from customer_mgmt.db.unit_of_work import UnitOfWork
from customer_mgmt.models.customer import Customer
from customer_mgmt.models.order import Order
from customer_mgmt.schemas.statistics import CustomerStatsOut, CustomerTypeStatsOut

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


class StatisticsAggregator:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @property
    def db(self):
        return self.uow.session

    def _scalar(self, stmt, metric: str):
        value = self.db.execute(stmt).scalar()
        flow_info(logger, "statistics_metric name=%s value=%s", metric, value, category="statistics")
        return value

    def total_customers(self) -> int:
        return int(self._scalar(select(func.count(Customer.id)), "total_customers") or 0)

    def active_customers(self) -> int:
        stmt = select(func.count(Customer.id)).where(Customer.is_active.is_(True))
        return int(self._scalar(stmt, "active_customers") or 0)

    def inactive_customers(self) -> int:
        # Derived from one pair of reads so it always agrees with them.
        return self.total_customers() - self.active_customers()

    def total_orders(self) -> int:
        return int(self._scalar(select(func.count(Order.id)), "total_orders") or 0)

    def total_revenue(self) -> Decimal:
        stmt = select(func.coalesce(func.sum(Order.total_amount), 0))
        value = self._scalar(stmt, "total_revenue")
        if value is None:
            return Decimal("0.00")
        return Decimal(str(value)).quantize(_CENTS)

    def customer_type_breakdown(self) -> list[CustomerTypeStatsOut]:
        stmt = (
            select(Customer.customer_type, func.count(Customer.id))
            .where(Customer.is_active.is_(True))
            .group_by(Customer.customer_type)
        )
        rows = self.db.execute(stmt).all()
        flow_info(logger, "statistics_breakdown groups=%s", len(rows), category="statistics")

        # NULL types share the "Unknown" bucket with rows literally typed that way.
        buckets: dict[str, int] = {}
        for customer_type, count in rows:
            key = customer_type if customer_type is not None else settings.UNKNOWN_CUSTOMER_TYPE_LABEL
            buckets[key] = buckets.get(key, 0) + count
        return [
            CustomerTypeStatsOut(customer_type=key, count=buckets[key])
            for key in sorted(buckets)
        ]

    def full_statistics(self) -> CustomerStatsOut:
        """
        One snapshot of all metrics.

        The metrics are read independently, without snapshot isolation, so
        under concurrent writes they may describe slightly different moments.
        inactive is still computed from the same total/active pair reported.
        """
        total = self.total_customers()
        active = self.active_customers()
        return CustomerStatsOut(
            total_customers=total,
            active_customers=active,
            inactive_customers=total - active,
            total_orders=self.total_orders(),
            total_revenue=self.total_revenue(),
            customer_type_breakdown=self.customer_type_breakdown(),
        )
