"""Photo listing use cases: all photos, search and by owner."""

import logfire
from pydantic import BaseModel, Field

from photoshare.config import PaginationSettings
from photoshare.domain.service import PhotoService
from photoshare.domain.value import PhotoSortOrder, SearchTerms

from .common import PhotoPageResponse, page_offset, parse_user_id


class ListPhotosRequest(BaseModel):
    """List photos request."""

    page: int = Field(default=1, ge=1)
    order_by: str | None = None  # "votes" or anything else for newest first


class SearchPhotosRequest(BaseModel):
    """Search photos request."""

    page: int = Field(default=1, ge=1)
    query: str = ""


class ListOwnerPhotosRequest(BaseModel):
    """List a user's photos request."""

    owner_id: str  # Raw path parameter
    page: int = Field(default=1, ge=1)


class ListPhotosUseCase:
    """Use case for paging through all photos."""

    def __init__(
        self, photo_service: PhotoService, pagination: PaginationSettings
    ) -> None:
        """Initialize list photos use case.

        Args:
            photo_service: Photo domain service
            pagination: Pagination settings (page size)
        """
        self.photo_service = photo_service
        self.page_size = pagination.page_size

    async def execute(self, request: ListPhotosRequest) -> PhotoPageResponse:
        """Execute list photos flow.

        Args:
            request: List photos request

        Returns:
            Requested page of photos
        """
        sort = PhotoSortOrder.parse(request.order_by)

        with logfire.span("list_photos.execute", page=request.page, sort=sort.value):
            photos, total = await self.photo_service.list_photos(
                sort=sort,
                limit=self.page_size,
                offset=page_offset(request.page, self.page_size),
            )
            return PhotoPageResponse.build(photos, total, request.page, self.page_size)


class SearchPhotosUseCase:
    """Use case for free-text photo search."""

    def __init__(
        self, photo_service: PhotoService, pagination: PaginationSettings
    ) -> None:
        self.photo_service = photo_service
        self.page_size = pagination.page_size

    async def execute(self, request: SearchPhotosRequest) -> PhotoPageResponse:
        """Execute search flow.

        Every whitespace-separated term must match. '#tag' terms match tags
        exactly; other terms match the title or a tag.

        Args:
            request: Search request

        Returns:
            Requested page of matching photos, empty for an empty query
        """
        terms = SearchTerms.parse(request.query)

        with logfire.span(
            "search_photos.execute", page=request.page, query=request.query
        ):
            photos, total = await self.photo_service.search_photos(
                terms,
                limit=self.page_size,
                offset=page_offset(request.page, self.page_size),
            )
            return PhotoPageResponse.build(photos, total, request.page, self.page_size)


class ListOwnerPhotosUseCase:
    """Use case for paging through one user's photos."""

    def __init__(
        self, photo_service: PhotoService, pagination: PaginationSettings
    ) -> None:
        self.photo_service = photo_service
        self.page_size = pagination.page_size

    async def execute(self, request: ListOwnerPhotosRequest) -> PhotoPageResponse:
        """Execute list owner photos flow.

        An unknown but well-formed owner ID yields an empty page.

        Args:
            request: List owner photos request

        Returns:
            Requested page of the owner's photos

        Raises:
            NotFoundError: If the owner ID is malformed
        """
        owner_id = parse_user_id(request.owner_id)

        with logfire.span(
            "list_owner_photos.execute", owner_id=str(owner_id), page=request.page
        ):
            photos, total = await self.photo_service.list_photos_by_owner(
                owner_id,
                limit=self.page_size,
                offset=page_offset(request.page, self.page_size),
            )
            return PhotoPageResponse.build(photos, total, request.page, self.page_size)
