import logging

from book_manager.errors import AuthenticationError
from book_manager.models.user import User
from book_manager.repositories.user_repository import UserRepository
from book_manager.utils.security import verify_password

logger = logging.getLogger(__name__)


async def authenticate_user(users: UserRepository, email: str, password: str) -> User:
    """验证邮箱+密码，返回 User。失败抛 AuthenticationError。"""
    user = await users.find_by_email(email) if email else None
    if not user or not password or not verify_password(password, user.password):
        logger.info(f"[登录] 认证失败: email={email}")
        raise AuthenticationError()
    logger.info(f"[登录] 认证成功: user_id={user.id}")
    return user
