from fastapi import FastAPI

from customer_mgmt.api.routers.customers import router as customers_router
from customer_mgmt.api.routers.orders import router as orders_router
from customer_mgmt.api.routers.statistics import router as statistics_router
from customer_mgmt.core.flow_logging import configure_logging

configure_logging()

app = FastAPI(title="Customer Management API")

app.include_router(customers_router)
app.include_router(orders_router)
app.include_router(statistics_router)


@app.get("/health")
def health():
    return {"status": "up"}
