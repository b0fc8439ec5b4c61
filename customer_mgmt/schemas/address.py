from typing import Optional

from pydantic import BaseModel, Field

from .base import BaseSchema


class AddressBase(BaseModel):
    address_type: str = Field(default="Home", min_length=1, max_length=50)
    street: str = Field(min_length=1, max_length=200)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=1, max_length=100)
    zip_code: str = Field(min_length=1, max_length=20)
    country: str = Field(default="USA", max_length=100)
    is_primary: bool = False


class AddressCreate(AddressBase):
    pass


class AddressUpdate(AddressBase):
    pass


class AddressOut(BaseSchema):
    address_id: int = 0
    address_type: str = ""
    full_address: str = ""
    is_primary: bool = False


class AddressRecord(BaseSchema):
    id: int
    customer_id: int
    address_type: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: Optional[str] = None
    is_primary: bool = False
