from fastapi import APIRouter

from app.api.v1.endpoints import customers

api_router_v1 = APIRouter()

api_router_v1.include_router(customers.router, prefix="/customers", tags=["Customers"])
