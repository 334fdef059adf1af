"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1 import customers, projects, vehicles, vendors

api_router = APIRouter()

# Include routers
api_router.include_router(customers.router, prefix="/customers", tags=["Customers"])
api_router.include_router(vendors.router, prefix="/vendors", tags=["Vendors"])
api_router.include_router(vehicles.router, prefix="/vehicles", tags=["Vehicles"])
api_router.include_router(projects.router, prefix="/projects", tags=["Projects"])
