"""API v1 router aggregation."""

from fastapi import APIRouter

from taskviews.api.v1 import task_statuses, task_views

api_router = APIRouter()

# Include module routers
api_router.include_router(task_statuses.router, prefix="/task-statuses", tags=["task-statuses"])
api_router.include_router(task_views.router, prefix="/task-views", tags=["task-views"])
