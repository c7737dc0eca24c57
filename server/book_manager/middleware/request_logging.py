import logging
import time

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """记录每个请求的开始/结束、调用用户及耗时

    未处理的异常在此转换为 500，位于 CORS 中间件内侧，响应仍带 CORS 头。
    """

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        logger.info(f"[请求开始] {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"[INTERNAL_ERROR] {request.method} {request.url.path}")
            response = JSONResponse(
                status_code=500, content={"detail": "服务器内部错误", "code": "INTERNAL_ERROR"}
            )

        principal = getattr(request.state, "principal", None)
        user = principal.user_id if principal is not None else "anonymous"
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"[请求结束] {request.method} {request.url.path} "
            f"user={user} status={response.status_code} {elapsed_ms:.1f}ms"
        )
        return response
