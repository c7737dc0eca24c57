from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from book_manager.domain import RoleType
from book_manager.models.user import User


class UserRepository:

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def find_by_email(self, email: str) -> User | None:
        result = await self._db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: int) -> User | None:
        result = await self._db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def create(
        self, email: str, password_hash: str, name: str, role_type: RoleType = RoleType.USER
    ) -> User:
        user = User(email=email, password=password_hash, name=name, role_type=role_type)
        self._db.add(user)
        await self._db.flush()  # 获取自增 id，但不 commit（由 get_db 统一提交）
        await self._db.refresh(user)
        return user
