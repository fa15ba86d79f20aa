"""
Auth endpoints - login issues a token and opens a cached session; logout closes it.
"""

from fastapi import APIRouter, HTTPException, Response, status

from joinapp.core.dependencies import CurrentClaims, UserServiceDep
from joinapp.core.exceptions import AppError
from joinapp.schemas.user import LoginRequest, TokenResponse

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(svc: UserServiceDep, data: LoginRequest):
    """Authenticate and return JWT."""
    try:
        return await svc.login(data)
    except AppError as exc:
        raise HTTPException(
            status_code=exc.status_code,
            detail=exc.message,
            headers={"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None,
        )


@router.delete("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(svc: UserServiceDep, claims: CurrentClaims):
    """Drop the session marker. The token itself stays signed but no longer passes the session check."""
    await svc.logout(claims.user_uid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
