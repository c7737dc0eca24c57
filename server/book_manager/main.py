import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from book_manager.config import settings
from book_manager.database import init_db, AsyncSessionLocal
from book_manager.errors import (
    AuthenticationError,
    AuthorizationError,
    BookManagerError,
    UnauthenticatedAccessError,
)
from book_manager.middleware.cors import OriginCheckingCORSMiddleware
from book_manager.middleware.request_logging import RequestLoggingMiddleware
from book_manager.middleware.security import (
    SecurityMiddleware,
    access_denied_handler,
    authentication_entry_point,
    authentication_failure_handler,
)
from book_manager.routers import auth, books, rentals, admin
from book_manager.utils.seed import seed_initial_admin

# 导入所有 model 使 SQLAlchemy 注册表结构
import book_manager.models  # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期：启动时建表并创建初始管理员"""
    await init_db()
    async with AsyncSessionLocal() as db:
        await seed_initial_admin(db)
        await db.commit()
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="图书借阅管理后端 API",
    lifespan=lifespan,
)

# 中间件：后添加的在外层，请求依次经过 CORS → 请求日志 → 认证/授权
app.add_middleware(SecurityMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    OriginCheckingCORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 统一异常处理
@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request: Request, exc: AuthenticationError):
    return authentication_failure_handler(request, exc)


@app.exception_handler(UnauthenticatedAccessError)
async def unauthenticated_error_handler(request: Request, exc: UnauthenticatedAccessError):
    return authentication_entry_point(request, exc)


@app.exception_handler(AuthorizationError)
async def authorization_error_handler(request: Request, exc: AuthorizationError):
    return access_denied_handler(request, exc)


@app.exception_handler(BookManagerError)
async def book_manager_error_handler(request: Request, exc: BookManagerError):
    if exc.status_code >= 500:
        logger.error(f"[{exc.code}] {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail, "code": exc.code})


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    return JSONResponse(status_code=400, content={"detail": str(exc), "code": "VALIDATION_ERROR"})


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception(f"[INTERNAL_ERROR] {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "服务器内部错误", "code": "INTERNAL_ERROR"})


# 注册路由
app.include_router(auth.router)
app.include_router(books.router)
app.include_router(rentals.router)
app.include_router(admin.router)


@app.get("/health", tags=["系统"])
async def health_check():
    """健康检查接口"""
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }
