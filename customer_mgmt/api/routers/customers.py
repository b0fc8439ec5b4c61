from fastapi import APIRouter, Depends, Query, status

from customer_mgmt.api.errors import to_http_exception
from customer_mgmt.core.exceptions import DataAccessError, NotFoundError
from customer_mgmt.db.session import get_uow
from customer_mgmt.db.unit_of_work import UnitOfWork
from customer_mgmt.repositories.address_repository import AddressRepository
from customer_mgmt.repositories.customer_repository import CustomerRepository
from customer_mgmt.repositories.order_repository import OrderRepository
from customer_mgmt.schemas.address import AddressCreate, AddressOut, AddressRecord, AddressUpdate
from customer_mgmt.schemas.customer import CustomerCreate, CustomerOut, CustomerUpdate
from customer_mgmt.schemas.order import OrderOut
from customer_mgmt.services.customer_service import CustomerService
from customer_mgmt.services.mapper import to_address_dto, to_customer_dto, to_order_dto

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=list[CustomerOut])
def list_customers_api(
    q: str | None = Query(None, description="Substring of first name, last name or email"),
    customer_type: str | None = Query(None),
    uow: UnitOfWork = Depends(get_uow),
):
    repo = CustomerRepository(uow)
    if q is not None:
        customers = repo.search(q)
    elif customer_type is not None:
        customers = repo.filter_by_type(customer_type)
    else:
        customers = repo.list_active()
    return [to_customer_dto(c) for c in sorted(customers, key=lambda c: c.id)]


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer_api(customer_id: int, uow: UnitOfWork = Depends(get_uow)):
    customer = CustomerRepository(uow).get_by_id_with_associations(customer_id)
    if not customer:
        raise to_http_exception(NotFoundError.for_entity("Customer", customer_id))
    return to_customer_dto(customer)


@router.post("", response_model=CustomerOut, status_code=status.HTTP_201_CREATED)
def create_customer_api(payload: CustomerCreate, uow: UnitOfWork = Depends(get_uow)):
    try:
        customer = CustomerService.register_customer(uow, payload)
    except DataAccessError as e:
        raise to_http_exception(e)
    return to_customer_dto(CustomerRepository(uow).get_by_id_with_associations(customer.id))


@router.put("/{customer_id}", response_model=CustomerOut)
def update_customer_api(
    customer_id: int,
    payload: CustomerUpdate,
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        CustomerService.update_customer(uow, customer_id, payload)
    except DataAccessError as e:
        raise to_http_exception(e)
    return to_customer_dto(CustomerRepository(uow).get_by_id_with_associations(customer_id))


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer_api(customer_id: int, uow: UnitOfWork = Depends(get_uow)):
    try:
        CustomerService.deactivate_customer(uow, customer_id)
    except DataAccessError as e:
        raise to_http_exception(e)
    return None


@router.get("/{customer_id}/addresses", response_model=list[AddressRecord])
def list_addresses_api(customer_id: int, uow: UnitOfWork = Depends(get_uow)):
    if CustomerRepository(uow).get_by_id(customer_id) is None:
        raise to_http_exception(NotFoundError.for_entity("Customer", customer_id))
    return AddressRepository(uow).list_by_customer(customer_id)


@router.post(
    "/{customer_id}/addresses",
    response_model=AddressOut,
    status_code=status.HTTP_201_CREATED,
)
def create_address_api(
    customer_id: int,
    payload: AddressCreate,
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        address = CustomerService.add_address(uow, customer_id, payload)
    except DataAccessError as e:
        raise to_http_exception(e)
    return to_address_dto(address)


@router.put("/{customer_id}/addresses/{address_id}", response_model=AddressOut)
def update_address_api(
    customer_id: int,
    address_id: int,
    payload: AddressUpdate,
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        address = CustomerService.update_address(uow, customer_id, address_id, payload)
    except DataAccessError as e:
        raise to_http_exception(e)
    return to_address_dto(address)


@router.delete("/{customer_id}/addresses/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_address_api(customer_id: int, address_id: int, uow: UnitOfWork = Depends(get_uow)):
    try:
        CustomerService.remove_address(uow, customer_id, address_id)
    except DataAccessError as e:
        raise to_http_exception(e)
    return None


@router.put("/{customer_id}/addresses/{address_id}/primary", response_model=list[AddressOut])
def set_primary_address_api(
    customer_id: int,
    address_id: int,
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        addresses = CustomerService.make_primary(uow, customer_id, address_id)
    except DataAccessError as e:
        raise to_http_exception(e)
    return [to_address_dto(a) for a in addresses]


@router.get("/{customer_id}/orders", response_model=list[OrderOut])
def list_customer_orders_api(customer_id: int, uow: UnitOfWork = Depends(get_uow)):
    if CustomerRepository(uow).get_by_id(customer_id) is None:
        raise to_http_exception(NotFoundError.for_entity("Customer", customer_id))
    return [to_order_dto(o) for o in OrderRepository(uow).list_by_customer(customer_id)]
