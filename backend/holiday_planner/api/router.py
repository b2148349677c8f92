from fastapi import APIRouter

from holiday_planner.api.employees import employees_router
from holiday_planner.api.holidays import holidays_router

api_router = APIRouter()
api_router.include_router(holidays_router)
api_router.include_router(employees_router)
