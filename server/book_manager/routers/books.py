from fastapi import APIRouter, Depends

from book_manager.schemas.book import BookWithRentalResponse
from book_manager.services.book_service import BookService
from book_manager.utils.deps import get_book_service

router = APIRouter(prefix="/book", tags=["书籍"])


@router.get("/list", response_model=list[BookWithRentalResponse], summary="书籍列表")
async def list_books(service: BookService = Depends(get_book_service)):
    """所有书籍及其当前借阅状态"""
    books = await service.get_list()
    return [BookWithRentalResponse.from_domain(b) for b in books]


@router.get("/detail/{book_id}", response_model=BookWithRentalResponse, summary="书籍详情")
async def get_detail(book_id: int, service: BookService = Depends(get_book_service)):
    book = await service.get_detail(book_id)
    return BookWithRentalResponse.from_domain(book)
