from fastapi import APIRouter, Depends, Form
from fastapi.responses import JSONResponse

from book_manager.config import settings
from book_manager.repositories.user_repository import UserRepository
from book_manager.schemas.auth import LoginResponse, ErrorResponse
from book_manager.services.auth_service import authenticate_user
from book_manager.middleware.security import authentication_success_handler
from book_manager.utils.deps import get_user_repository

router = APIRouter(tags=["认证"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
    summary="登录",
)
async def login(
    email: str = Form(""),
    password: str = Form("", alias="pass"),
    users: UserRepository = Depends(get_user_repository),
):
    """表单字段 email + pass 登录，成功后下发会话 Cookie"""
    user = await authenticate_user(users, email, password)
    return authentication_success_handler(user)


@router.post("/logout", summary="登出")
async def logout():
    """清除会话 Cookie"""
    response = JSONResponse(status_code=200, content={"status": "ok"})
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response
