from .address import AddressCreate, AddressOut, AddressRecord, AddressUpdate  # noqa: F401
from .customer import CustomerCreate, CustomerOut, CustomerSummaryOut, CustomerUpdate  # noqa: F401
from .order import CustomerOrderCreate, OrderCreate, OrderOut, OrderUpdate  # noqa: F401
from .statistics import CustomerStatsOut, CustomerTypeStatsOut  # noqa: F401
