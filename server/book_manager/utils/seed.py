"""初始管理员 - 应用启动时调用，按配置创建 ADMIN 用户"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from book_manager.config import settings
from book_manager.domain import RoleType
from book_manager.models.user import User
from book_manager.repositories.user_repository import UserRepository
from book_manager.utils.security import hash_password

logger = logging.getLogger(__name__)


async def seed_initial_admin(db: AsyncSession) -> User | None:
    """INITIAL_ADMIN_EMAIL / INITIAL_ADMIN_PASSWORD 均已配置且邮箱未被占用时创建管理员"""
    if not settings.INITIAL_ADMIN_EMAIL or not settings.INITIAL_ADMIN_PASSWORD:
        return None

    users = UserRepository(db)
    if await users.find_by_email(settings.INITIAL_ADMIN_EMAIL) is not None:
        return None

    user = await users.create(
        email=settings.INITIAL_ADMIN_EMAIL,
        password_hash=hash_password(settings.INITIAL_ADMIN_PASSWORD),
        name=settings.INITIAL_ADMIN_NAME,
        role_type=RoleType.ADMIN,
    )
    logger.info(f"[初始化] 已创建管理员: user_id={user.id}")
    return user
