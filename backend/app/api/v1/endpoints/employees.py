from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.config import settings
from app.core.dependencies import get_employee_service
from app.models.employee import Employee, EmployeeCreate, Feedback, FeedbackCreate
from app.models.listing import EmployeePage, FilterCriteria
from app.services.employee_form import validate_employee_form
from app.services.employee_service import EmployeeService
from app.services.listing_state import ListingState
from app.services.rating_seed import DEPARTMENTS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=EmployeePage)
async def list_employees(
    search: str = "",
    department: list[str] = Query(default=[]),  # noqa: B008
    rating: list[int] = Query(default=[]),  # noqa: B008
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1, le=200),
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    for value in rating:
        if value < 1 or value > 5:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Invalid rating filter: {value}. Allowed: 1-5",
            )

    employees = await service.get_employees()

    state = ListingState(page_size=page_size or settings.DEFAULT_PAGE_SIZE)
    state.update_criteria(
        FilterCriteria(search_text=search, departments=set(department), ratings=set(rating))
    )
    state.go_to_page(page)
    return state.apply(employees)


@router.get("/departments", response_model=list[str])
async def list_departments():
    return DEPARTMENTS


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    employee = await service.get_employee(employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{employee_id}' not found",
        )
    return employee


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    form: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    errors = validate_employee_form(form)
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Employee form is invalid", "errors": errors},
        )

    employee = await service.create_employee(form)
    logger.info("Employee %d created in %s", employee.id, employee.company.department)
    return employee


@router.post("/{employee_id}/feedback", response_model=Feedback, status_code=status.HTTP_201_CREATED)
async def submit_feedback(
    employee_id: int,
    payload: FeedbackCreate,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    feedback = await service.submit_feedback(employee_id, payload)
    if feedback is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{employee_id}' not found",
        )
    return feedback
