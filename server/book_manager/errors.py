"""业务异常 —— 每个异常携带 HTTP 状态码与错误码，由 main.py 统一转换为 JSON"""


class BookManagerError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    default_detail: str = "服务器内部错误"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class DataIntegrityError(BookManagerError):
    """查询结果缺少必填字段"""

    code = "DATA_INTEGRITY_ERROR"
    default_detail = "数据完整性错误"


class StorageUnavailableError(BookManagerError):
    """数据库连接或查询失败，不做重试"""

    code = "STORAGE_UNAVAILABLE"
    default_detail = "数据存储暂不可用"


class AuthenticationError(BookManagerError):
    status_code = 401
    code = "AUTHENTICATION_FAILED"
    default_detail = "邮箱或密码错误"


class UnauthenticatedAccessError(BookManagerError):
    status_code = 401
    code = "UNAUTHENTICATED"
    default_detail = "未登录"


class AuthorizationError(BookManagerError):
    status_code = 403
    code = "ACCESS_DENIED"
    default_detail = "权限不足"


class BookNotFoundError(BookManagerError):
    status_code = 404
    code = "NOT_FOUND"
    default_detail = "书籍不存在"


class RentalNotFoundError(BookManagerError):
    status_code = 404
    code = "NOT_FOUND"
    default_detail = "该书籍未被借出"


class BookConflictError(BookManagerError):
    status_code = 409
    code = "CONFLICT"
    default_detail = "书籍状态冲突"


class RentalOwnershipError(BookManagerError):
    status_code = 400
    code = "VALIDATION_ERROR"
    default_detail = "该书籍由其他用户借阅中"
