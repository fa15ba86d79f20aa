"""
User endpoints - registration and paginated listing (RESTful API).
Challenge: Validation, clear status codes, lenient pagination defaults.
Design: Thin controller; service layer holds business logic.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from joinapp.config import get_settings
from joinapp.core.dependencies import UserServiceDep, get_active_claims
from joinapp.core.exceptions import AppError
from joinapp.schemas.user import (
    CountUsersResponse,
    CreateUserRequest,
    GetUsersWithPaginationRequest,
    GetUsersWithPaginationResponse,
    MessageResponse,
)

router = APIRouter()
settings = get_settings()


def _positive_int(raw: str | None, default: int) -> int:
    """Lenient query int: missing, non-numeric or non-positive values fall back to default."""
    try:
        value = int(raw) if raw is not None else 0
    except ValueError:
        value = 0
    return value if value > 0 else default


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_users(svc: UserServiceDep, data: CreateUserRequest):
    """Register a user. An already registered email is accepted silently."""
    try:
        await svc.create_user(data)
    except AppError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    return MessageResponse(message="user created")


@router.get(
    "",
    response_model=GetUsersWithPaginationResponse,
    dependencies=[Depends(get_active_claims)],
)
async def get_users_with_pagination(
    svc: UserServiceDep,
    name: str = Query("", description="user fullname e.g John Doe"),
    limit: str | None = Query(None, description="page size; default 10"),
    page: str | None = Query(None, description="page number, 1-indexed; default 1"),
):
    """List users with their role. REST: GET /users?name=jo&limit=10&page=1."""
    req = GetUsersWithPaginationRequest(
        fullname=name.strip(),
        limit=_positive_int(limit, settings.default_page_size),
        page=_positive_int(page, 1),
    )
    return await svc.get_users_with_pagination(req)


@router.get("/count", response_model=CountUsersResponse, dependencies=[Depends(get_active_claims)])
async def count_users(svc: UserServiceDep, deleted: bool = Query(False)):
    """Number of users by soft-delete flag."""
    return CountUsersResponse(total=await svc.count_users(deleted))
