"""初始管理员创建测试"""

import pytest

from book_manager.config import settings
from book_manager.domain import RoleType
from book_manager.repositories.user_repository import UserRepository
from book_manager.utils.security import verify_password
from book_manager.utils.seed import seed_initial_admin

from tests.conftest import TestSessionLocal


class TestSeedInitialAdmin:

    @pytest.mark.asyncio
    async def test_not_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "INITIAL_ADMIN_EMAIL", None)
        async with TestSessionLocal() as db:
            assert await seed_initial_admin(db) is None

    @pytest.mark.asyncio
    async def test_creates_admin(self, monkeypatch):
        monkeypatch.setattr(settings, "INITIAL_ADMIN_EMAIL", "root@example.com")
        monkeypatch.setattr(settings, "INITIAL_ADMIN_PASSWORD", "s3cret-pass")
        async with TestSessionLocal() as db:
            user = await seed_initial_admin(db)
            await db.commit()

        assert user.role_type == RoleType.ADMIN
        assert user.password != "s3cret-pass"
        assert verify_password("s3cret-pass", user.password)

    @pytest.mark.asyncio
    async def test_existing_email_is_kept(self, monkeypatch, admin_user):
        monkeypatch.setattr(settings, "INITIAL_ADMIN_EMAIL", admin_user.email)
        monkeypatch.setattr(settings, "INITIAL_ADMIN_PASSWORD", "other-pass")
        async with TestSessionLocal() as db:
            assert await seed_initial_admin(db) is None
            user = await UserRepository(db).find_by_email(admin_user.email)
        assert verify_password("password123", user.password)
