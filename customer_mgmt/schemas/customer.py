from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .address import AddressCreate, AddressOut
from .base import BaseSchema

EMAIL_REGEX = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CustomerBase(BaseModel):
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    email: str = Field(max_length=255, pattern=EMAIL_REGEX)
    phone: str = Field(default="", max_length=30)
    customer_type: str = Field(default="Individual", max_length=50)
    notes: Optional[str] = None


class CustomerCreate(CustomerBase):
    # Persisted with the customer in one transaction, always as the primary address.
    primary_address: Optional[AddressCreate] = None


class CustomerUpdate(CustomerBase):
    is_active: bool = True


class CustomerOut(BaseSchema):
    customer_id: int = 0
    full_name: str = ""
    email: str = ""
    phone: str = ""
    created_date: Optional[datetime] = None
    is_active: bool = True
    customer_type: str = ""
    addresses: List[AddressOut] = []
    total_orders: int = 0


class CustomerSummaryOut(BaseSchema):
    customer_id: int = 0
    full_name: str = ""
    email: str = ""
    role: str = ""
