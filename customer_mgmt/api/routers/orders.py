from fastapi import APIRouter, Depends, status

from customer_mgmt.api.errors import to_http_exception
from customer_mgmt.core.exceptions import DataAccessError, NotFoundError
from customer_mgmt.db.session import get_uow
from customer_mgmt.db.unit_of_work import UnitOfWork
from customer_mgmt.repositories.order_repository import OrderRepository
from customer_mgmt.schemas.order import CustomerOrderCreate, OrderCreate, OrderOut, OrderUpdate
from customer_mgmt.services.mapper import to_order_dto
from customer_mgmt.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


def _order_out(uow: UnitOfWork, order_id: int) -> OrderOut:
    return to_order_dto(OrderRepository(uow).get_by_id(order_id))


@router.get("", response_model=list[OrderOut])
def list_orders_api(uow: UnitOfWork = Depends(get_uow)):
    return [to_order_dto(o) for o in OrderRepository(uow).list_all()]


@router.get("/{order_id}", response_model=OrderOut)
def get_order_api(order_id: int, uow: UnitOfWork = Depends(get_uow)):
    order = OrderRepository(uow).get_by_id(order_id)
    if not order:
        raise to_http_exception(NotFoundError.for_entity("Order", order_id))
    return to_order_dto(order)


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
def create_order_api(payload: OrderCreate, uow: UnitOfWork = Depends(get_uow)):
    try:
        order = OrderService.place_order(uow, payload)
    except DataAccessError as e:
        raise to_http_exception(e)
    return _order_out(uow, order.id)


@router.put("/{order_id}", response_model=OrderOut)
def update_order_api(order_id: int, payload: OrderUpdate, uow: UnitOfWork = Depends(get_uow)):
    try:
        OrderService.update_order(uow, order_id, payload)
    except DataAccessError as e:
        raise to_http_exception(e)
    return _order_out(uow, order_id)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order_api(order_id: int, uow: UnitOfWork = Depends(get_uow)):
    try:
        OrderService.cancel_order(uow, order_id)
    except DataAccessError as e:
        raise to_http_exception(e)
    return None


@router.post("/{order_id}/customers", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
def link_customer_api(
    order_id: int,
    payload: CustomerOrderCreate,
    uow: UnitOfWork = Depends(get_uow),
):
    try:
        OrderService.link(uow, order_id, payload)
    except DataAccessError as e:
        raise to_http_exception(e)
    return _order_out(uow, order_id)


@router.delete("/{order_id}/customers/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def unlink_customer_api(order_id: int, customer_id: int, uow: UnitOfWork = Depends(get_uow)):
    try:
        OrderService.unlink(uow, order_id, customer_id)
    except DataAccessError as e:
        raise to_http_exception(e)
    return None
