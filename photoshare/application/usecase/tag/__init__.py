"""Tag use cases."""

from .list_tags import ListTagsUseCase, TagItem

__all__ = ["ListTagsUseCase", "TagItem"]
