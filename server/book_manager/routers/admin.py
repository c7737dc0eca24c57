from fastapi import APIRouter, Depends

from book_manager.schemas.book import RegisterBookRequest, UpdateBookRequest, BookResponse
from book_manager.services.admin_book_service import AdminBookService
from book_manager.utils.deps import get_admin_book_service

# /admin/** 的角色校验由 SecurityMiddleware 完成
router = APIRouter(prefix="/admin/book", tags=["管理"])


@router.post("/register", response_model=BookResponse, status_code=201, summary="登记书籍")
async def register(
    body: RegisterBookRequest,
    service: AdminBookService = Depends(get_admin_book_service),
):
    book = await service.register(body.to_domain())
    return BookResponse.model_validate(book)


@router.put("/update", response_model=BookResponse, summary="更新书籍")
async def update(
    body: UpdateBookRequest,
    service: AdminBookService = Depends(get_admin_book_service),
):
    """只更新请求中给出的字段"""
    book = await service.update(
        body.id,
        title=body.title,
        author=body.author,
        release_date=body.release_date,
    )
    return BookResponse.model_validate(book)


@router.delete("/delete/{book_id}", status_code=204, summary="删除书籍")
async def delete(
    book_id: int,
    service: AdminBookService = Depends(get_admin_book_service),
):
    await service.delete(book_id)
