from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from .base import BaseSchema
from .customer import CustomerSummaryOut


class OrderBase(BaseModel):
    order_number: str = Field(min_length=1, max_length=50)
    total_amount: Decimal = Field(ge=0, max_digits=18, decimal_places=2)
    status: str = Field(default="Pending", max_length=50)
    description: Optional[str] = None


class OrderCreate(OrderBase):
    # First id is linked as "Primary", the rest as "Secondary".
    customer_ids: List[int] = []


class OrderUpdate(OrderBase):
    pass


class CustomerOrderCreate(BaseModel):
    customer_id: int
    role: str = Field(default="Primary", min_length=1, max_length=50)


class OrderOut(BaseSchema):
    order_id: int = 0
    order_number: str = ""
    order_date: Optional[datetime] = None
    total_amount: Decimal = Decimal("0")
    status: str = ""
    description: Optional[str] = None
    customers: List[CustomerSummaryOut] = []
