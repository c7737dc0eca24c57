from book_manager.domain import RoleType
from book_manager.schemas.base import CamelModel


class LoginResponse(CamelModel):
    id: int
    email: str
    name: str
    role_type: RoleType


class ErrorResponse(CamelModel):
    detail: str
    code: str | None = None
