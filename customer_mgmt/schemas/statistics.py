from decimal import Decimal
from typing import List

from .base import BaseSchema


class CustomerTypeStatsOut(BaseSchema):
    customer_type: str
    count: int


class CustomerStatsOut(BaseSchema):
    """
    Every metric is read by its own query, so under concurrent writes the
    fields may reflect slightly different points in time.
    """

    total_customers: int
    active_customers: int
    inactive_customers: int
    total_orders: int
    total_revenue: Decimal
    customer_type_breakdown: List[CustomerTypeStatsOut] = []
