"""认证/授权策略

按顺序匹配的 (URL 模式 → 访问要求) 规则表，第一条匹配的规则生效。
未登录访问受保护资源交给 entry point（401），角色不足交给 access-denied handler（403），
登录成功/失败分别由 success / failure handler 生成响应。
"""

from dataclasses import dataclass

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from book_manager.config import settings
from book_manager.domain import Principal, RoleType
from book_manager.errors import (
    AuthenticationError,
    AuthorizationError,
    BookManagerError,
    UnauthenticatedAccessError,
)
from book_manager.models.user import User
from book_manager.utils.security import create_session_token, decode_session_token


def path_matches(pattern: str, path: str) -> bool:
    """Ant 风格匹配：`/admin/**` 匹配 /admin 及其所有子路径，其余为精确匹配"""
    if pattern == "/**":
        return True
    if pattern.endswith("/**"):
        prefix = pattern[:-3]
        return path == prefix or path.startswith(prefix + "/")
    return path.rstrip("/") == pattern.rstrip("/")


@dataclass(frozen=True)
class AccessRule:
    pattern: str
    permit_all: bool = False
    roles: frozenset[RoleType] | None = None  # None 表示任意已登录用户

    @classmethod
    def public(cls, pattern: str) -> "AccessRule":
        return cls(pattern, permit_all=True)

    @classmethod
    def authenticated(cls, pattern: str) -> "AccessRule":
        return cls(pattern)

    @classmethod
    def has_role(cls, pattern: str, *roles: RoleType) -> "AccessRule":
        return cls(pattern, roles=frozenset(roles))

    def matches(self, path: str) -> bool:
        return path_matches(self.pattern, path)

    def check(self, principal: Principal | None) -> None:
        if self.permit_all:
            return
        if principal is None:
            raise UnauthenticatedAccessError()
        if self.roles is not None and principal.role not in self.roles:
            raise AuthorizationError()


ACCESS_RULES: list[AccessRule] = [
    AccessRule.public("/login"),
    AccessRule.public("/logout"),
    AccessRule.public("/health"),
    AccessRule.has_role("/admin/**", RoleType.ADMIN),
    AccessRule.authenticated("/**"),
]


def authorize(rules: list[AccessRule], path: str, principal: Principal | None) -> None:
    """按顺序匹配规则；没有规则匹配时要求登录"""
    for rule in rules:
        if rule.matches(path):
            rule.check(principal)
            return
    if principal is None:
        raise UnauthenticatedAccessError()


# ──────────── 处理器 ────────────

def _error_response(exc: BookManagerError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
    )


def authentication_entry_point(request: Request, exc: UnauthenticatedAccessError) -> JSONResponse:
    """未登录访问受保护资源 → 401"""
    return _error_response(exc)


def access_denied_handler(request: Request, exc: AuthorizationError) -> JSONResponse:
    """已登录但角色不足 → 403"""
    return _error_response(exc)


def authentication_failure_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """登录失败 → 401，不下发会话 Cookie"""
    return _error_response(exc)


def authentication_success_handler(user: User) -> JSONResponse:
    """登录成功 → 200 + 会话 Cookie"""
    response = JSONResponse(
        status_code=200,
        content={
            "id": user.id,
            "email": user.email,
            "name": user.name,
            "roleType": user.role_type.value,
        },
    )
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        create_session_token(user.id, user.role_type),
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return response


def resolve_principal(request: Request) -> Principal | None:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    return decode_session_token(token)


class SecurityMiddleware(BaseHTTPMiddleware):
    """解析会话主体并执行访问规则"""

    def __init__(self, app, rules: list[AccessRule] | None = None):
        super().__init__(app)
        self.rules = rules if rules is not None else ACCESS_RULES

    async def dispatch(self, request: Request, call_next):
        principal = resolve_principal(request)
        request.state.principal = principal
        try:
            authorize(self.rules, request.url.path, principal)
        except UnauthenticatedAccessError as e:
            return authentication_entry_point(request, e)
        except AuthorizationError as e:
            return access_denied_handler(request, e)
        return await call_next(request)
