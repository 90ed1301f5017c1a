from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from tasktracker.api import schemas
from tasktracker.api.deps import get_report_service, get_timer_service, get_user_service
from tasktracker.domain.models import Task, TaskWithTotalHours, User
from tasktracker.services import ReportService, TimerService, UserService

router = APIRouter(prefix="/user", tags=["user"])

ERRORS = {
    400: {"model": schemas.ErrorResponse},
    404: {"model": schemas.ErrorResponse},
    500: {"model": schemas.ErrorResponse},
}


@router.get("", response_model=List[User], responses=ERRORS)
@router.get("/", response_model=List[User], include_in_schema=False)
async def get_users(
    document_number: Optional[str] = Query(None, alias="documentNumber"),
    passport_number: Optional[str] = Query(None, alias="passportNumber"),
    page: int = Query(1, le=schemas.MAX_INT, description="Page number (1-based)"),
    page_size: Optional[int] = Query(None, alias="pageSize", le=schemas.MAX_INT, description="Page size"),
    service: UserService = Depends(get_user_service),
):
    """Retrieves users with filtering and pagination."""
    return await service.list_users(
        document_number=document_number or passport_number,
        page=page,
        page_size=page_size,
    )


@router.post("", response_model=User, responses=ERRORS)
@router.post("/", response_model=User, include_in_schema=False)
async def add_user(
    req: schemas.AddUserRequest,
    service: UserService = Depends(get_user_service),
):
    return await service.add_user(req.document_number)


@router.put("/{user_id}", response_model=User, responses=ERRORS)
async def update_user(
    req: schemas.UpdateUserRequest,
    user_id: int = Path(..., ge=schemas.MIN_INT, le=schemas.MAX_INT),
    service: UserService = Depends(get_user_service),
):
    return await service.update_user(user_id, req.document_number)


@router.delete("/{user_id}", response_model=schemas.MessageResponse, responses=ERRORS)
async def delete_user(
    user_id: int = Path(..., ge=schemas.MIN_INT, le=schemas.MAX_INT),
    service: UserService = Depends(get_user_service),
):
    await service.delete_user(user_id)
    return schemas.MessageResponse(message="User deleted")


@router.get("/{user_id}/tasks", response_model=List[TaskWithTotalHours], responses=ERRORS)
async def get_user_tasks(
    user_id: int = Path(..., ge=schemas.MIN_INT, le=schemas.MAX_INT),
    service: ReportService = Depends(get_report_service),
):
    """Tasks of a user with total working hours, longest first."""
    return await service.get_user_tasks(user_id)


@router.post("/{user_id}/tasks/start", response_model=Task, responses=ERRORS)
async def start_task(
    req: schemas.StartTaskRequest,
    user_id: int = Path(..., ge=schemas.MIN_INT, le=schemas.MAX_INT),
    service: TimerService = Depends(get_timer_service),
):
    return await service.start_task(user_id, req.name)


@router.post("/{user_id}/tasks/stop", response_model=Task, responses={**ERRORS, 409: {"model": schemas.ErrorResponse}})
async def stop_task(
    req: schemas.StopTaskRequest,
    user_id: int = Path(..., ge=schemas.MIN_INT, le=schemas.MAX_INT),
    service: TimerService = Depends(get_timer_service),
):
    # The task is looked up by its own id; user_id in the path is not checked.
    return await service.stop_task(req.id)
