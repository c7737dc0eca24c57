"""书籍查询接口测试

覆盖端点：
- GET /book/list
- GET /book/detail/{book_id}
"""

import pytest
from httpx import AsyncClient

from book_manager.errors import StorageUnavailableError
from book_manager.utils.deps import get_book_service


class TestListBooks:

    @pytest.mark.asyncio
    async def test_list_books(self, client: AsyncClient, user_headers, sample_books, test_user):
        """返回所有书籍，借阅中的书带 rental 信息"""
        resp = await client.get("/book/list", headers=user_headers)
        assert resp.status_code == 200
        data = {b["id"]: b for b in resp.json()}
        assert set(data) == {1, 2, 3}

        assert data[1] == {
            "id": 1,
            "title": "Kotlin入門",
            "author": "山田太郎",
            "releaseDate": "2020-01-15",
            "rental": None,
        }
        assert data[2]["rental"] == {
            "userId": test_user.id,
            "rentalDatetime": "2025-03-01T10:30:00",
            "returnDeadline": "2025-03-15T10:30:00",
        }
        assert data[3]["rental"] is None

    @pytest.mark.asyncio
    async def test_list_books_empty(self, client: AsyncClient, user_headers):
        resp = await client.get("/book/list", headers=user_headers)
        assert resp.status_code == 200
        assert resp.json() == []

    @pytest.mark.asyncio
    async def test_list_books_no_session(self, client: AsyncClient, sample_books):
        """无会话 → 401"""
        resp = await client.get("/book/list")
        assert resp.status_code == 401
        assert resp.json()["code"] == "UNAUTHENTICATED"

    @pytest.mark.asyncio
    async def test_list_books_storage_unavailable(self, client: AsyncClient, user_headers):
        """存储不可用 → 500"""
        from book_manager.main import app

        class BrokenService:
            async def get_list(self):
                raise StorageUnavailableError()

        app.dependency_overrides[get_book_service] = lambda: BrokenService()
        resp = await client.get("/book/list", headers=user_headers)
        assert resp.status_code == 500
        assert resp.json()["code"] == "STORAGE_UNAVAILABLE"


class TestBookDetail:

    @pytest.mark.asyncio
    async def test_detail_rented(self, client: AsyncClient, user_headers, sample_books, test_user):
        resp = await client.get("/book/detail/2", headers=user_headers)
        assert resp.status_code == 200
        data = resp.json()
        assert data["title"] == "Python实践"
        assert data["rental"]["userId"] == test_user.id

    @pytest.mark.asyncio
    async def test_detail_not_rented(self, client: AsyncClient, user_headers, sample_books):
        resp = await client.get("/book/detail/3", headers=user_headers)
        assert resp.status_code == 200
        assert resp.json()["rental"] is None

    @pytest.mark.asyncio
    async def test_detail_not_found(self, client: AsyncClient, user_headers, sample_books):
        """不存在的书籍 → 404"""
        resp = await client.get("/book/detail/999", headers=user_headers)
        assert resp.status_code == 404
        assert resp.json()["code"] == "NOT_FOUND"
