from customer_mgmt.repositories.address_repository import AddressRepository  # noqa: F401
from customer_mgmt.repositories.customer_repository import CustomerRepository  # noqa: F401
from customer_mgmt.repositories.order_repository import OrderRepository  # noqa: F401
