"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from photoshare.application.usecase.tag import ListTagsUseCase, TagItem
from photoshare.interface.error import to_http_exception

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=list[TagItem])
async def list_tags(list_tags_use_case: FromDishka[ListTagsUseCase]) -> list[TagItem]:
    """List tags in use with their photo counts, most used first."""
    try:
        return await list_tags_use_case.execute()
    except Exception as e:
        raise to_http_exception(e)
