from customer_mgmt.db.base import Base  # noqa: F401

# Import all models so they register themselves on Base.metadata
from customer_mgmt.models.customer import Customer  # noqa: F401
from customer_mgmt.models.address import Address  # noqa: F401
from customer_mgmt.models.order import Order  # noqa: F401
from customer_mgmt.models.customer_order import CustomerOrder  # noqa: F401
