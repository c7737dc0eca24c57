from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import PlainTextResponse
from starlette.types import Receive, Scope, Send


class OriginCheckingCORSMiddleware(CORSMiddleware):
    """在 Starlette CORS 基础上，直接拒绝来自白名单之外的跨域请求（403）"""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            headers = Headers(scope=scope)
            origin = headers.get("origin")
            if origin and not self._is_same_origin(scope, headers, origin) \
                    and not self.is_allowed_origin(origin):
                response = PlainTextResponse("Invalid CORS request", status_code=403)
                await response(scope, receive, send)
                return
        await super().__call__(scope, receive, send)

    @staticmethod
    def _is_same_origin(scope: Scope, headers: Headers, origin: str) -> bool:
        host = headers.get("host")
        return host is not None and origin == f"{scope.get('scheme', 'http')}://{host}"
