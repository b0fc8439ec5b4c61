"""
Open string enumerations.

The store keeps these values as plain strings so callers may use labels the
code does not know about. `parse()` maps anything unrecognised to OTHER
instead of raising.
"""

import enum


class _OpenStrEnum(str, enum.Enum):
    @classmethod
    def parse(cls, value: str | None):
        if value is None:
            return cls.OTHER
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class CustomerType(_OpenStrEnum):
    INDIVIDUAL = "Individual"
    PREMIUM = "Premium"
    BUSINESS = "Business"
    OTHER = "Other"


class AddressType(_OpenStrEnum):
    HOME = "Home"
    WORK = "Work"
    OTHER = "Other"


class OrderStatus(_OpenStrEnum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    OTHER = "Other"


class OrderRole(_OpenStrEnum):
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    OTHER = "Other"
