"""User request/response schemas - API contract and validation."""

from datetime import date, datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from joinapp.core.constants import DEFAULT_ROLE, RoleName

BCRYPT_MAX_BYTES = 72


class CreateUserRequest(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    birthdate: date
    username: str = Field(..., min_length=1, max_length=100)
    # bcrypt uses at most 72 bytes of input; anything longer would be silently truncated
    password: str = Field(..., min_length=1, max_length=BCRYPT_MAX_BYTES)
    role: RoleName = DEFAULT_ROLE

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes when UTF-8 encoded")
        return v


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class MessageResponse(BaseModel):
    message: str


class UserClaims(BaseModel):
    """Claims carried by an access token."""

    user_uid: str
    role_uid: str = ""


class UserSession(BaseModel):
    """Login lookup projection: who the user is, their role, and the stored hash."""

    user_uid: str = ""
    role_uid: str = ""
    password: str = ""


class UserWithRole(BaseModel):
    uid: str
    first_name: str
    last_name: str
    email: str
    birthdate: date | None = None
    username: str
    created_at: datetime | None = None
    role_name: str

    model_config = {"from_attributes": True}


class UsersPage(BaseModel):
    """One page of the listing. per_page is the sum of the per-row counts."""

    users: list[UserWithRole] = Field(default_factory=list)
    per_page: int = 0


class GetUsersWithPaginationRequest(BaseModel):
    fullname: str = ""
    limit: int = 10
    page: int = 1

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class GetUsersWithPaginationResponse(BaseModel):
    users: list[UserWithRole]
    page: int
    limit: int
    per_page: int
    total: int
    total_pages: int


class CountUsersResponse(BaseModel):
    total: int
