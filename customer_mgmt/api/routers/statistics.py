from fastapi import APIRouter, Depends

from customer_mgmt.db.session import get_uow
from customer_mgmt.db.unit_of_work import UnitOfWork
from customer_mgmt.schemas.statistics import CustomerStatsOut, CustomerTypeStatsOut
from customer_mgmt.services.statistics import StatisticsAggregator

router = APIRouter(prefix="/api/statistics", tags=["statistics"])


@router.get("", response_model=CustomerStatsOut)
def get_statistics_api(uow: UnitOfWork = Depends(get_uow)):
    return StatisticsAggregator(uow).full_statistics()


@router.get("/customer-types", response_model=list[CustomerTypeStatsOut])
def get_customer_type_breakdown_api(uow: UnitOfWork = Depends(get_uow)):
    return StatisticsAggregator(uow).customer_type_breakdown()
