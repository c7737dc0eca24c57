"""测试公共 Fixtures —— 内存 SQLite + 独立 TestClient"""

import os
import tempfile
from datetime import date, datetime, timedelta

# 必须在导入 book_manager 之前设置
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_DIR", tempfile.mkdtemp(prefix="book_manager_test_"))

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from book_manager.config import settings
from book_manager.database import Base, get_db
from book_manager.domain import RoleType
from book_manager.models.user import User
from book_manager.models.book import Book
from book_manager.models.rental import Rental
from book_manager.utils.security import hash_password, create_session_token


# ──────────── 内存数据库引擎 ────────────

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

test_engine = create_async_engine(TEST_DB_URL, echo=False)
TestSessionLocal = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """每个测试前建表，测试后清表"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def _override_get_db():
    async with TestSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# ──────────── FastAPI TestClient ────────────

@pytest_asyncio.fixture
async def client():
    from book_manager.main import app

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ──────────── 测试用户 ────────────

async def _create_user(email: str, name: str, role_type: RoleType) -> User:
    async with TestSessionLocal() as db:
        user = User(
            email=email,
            password=hash_password("password123"),
            name=name,
            role_type=role_type,
        )
        db.add(user)
        await db.commit()
        await db.refresh(user)
        return user


def session_headers(user: User) -> dict:
    token = create_session_token(user.id, user.role_type)
    return {"Cookie": f"{settings.SESSION_COOKIE_NAME}={token}"}


@pytest_asyncio.fixture
async def test_user() -> User:
    return await _create_user("user@example.com", "测试用户", RoleType.USER)


@pytest_asyncio.fixture
async def admin_user() -> User:
    return await _create_user("admin@example.com", "管理员", RoleType.ADMIN)


@pytest_asyncio.fixture
async def user_headers(test_user: User) -> dict:
    return session_headers(test_user)


@pytest_asyncio.fixture
async def admin_headers(admin_user: User) -> dict:
    return session_headers(admin_user)


# ──────────── 测试书籍 + 借阅 ────────────

RENTAL_START = datetime(2025, 3, 1, 10, 30, 0)


@pytest_asyncio.fixture
async def sample_books(test_user: User) -> list[Book]:
    """三本书，其中 id=2 已被 test_user 借出"""
    async with TestSessionLocal() as db:
        books = [
            Book(id=1, title="Kotlin入門", author="山田太郎", release_date=date(2020, 1, 15)),
            Book(id=2, title="Python实践", author="李四", release_date=date(2021, 6, 1)),
            Book(id=3, title="Rust in Action", author="Tim McNamara", release_date=date(2021, 8, 10)),
        ]
        db.add_all(books)
        await db.flush()
        db.add(Rental(
            book_id=2,
            user_id=test_user.id,
            rental_datetime=RENTAL_START,
            return_deadline=RENTAL_START + timedelta(days=14),
        ))
        await db.commit()
        return books
