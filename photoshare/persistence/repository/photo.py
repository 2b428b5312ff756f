"""PostgreSQL implementation of Photo repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import Select, delete, desc, func, or_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from photoshare.domain.model import Photo, TagCount
from photoshare.domain.repository import PhotoRepository
from photoshare.domain.value import (
    PhotoId,
    PhotoSortOrder,
    SearchTerms,
    UserId,
    VoteDirection,
)
from photoshare.persistence.mappers import photo_to_dict, row_to_photo
from photoshare.persistence.tables import photo_tags_table, photos_table, tags_table


def _tagged_with(name: str):
    """Subquery of IDs of photos carrying the given tag."""
    return (
        select(photo_tags_table.c.photo_id)
        .join(tags_table, photo_tags_table.c.tag_id == tags_table.c.id)
        .where(tags_table.c.name == name)
    )


def _search_filters(terms: SearchTerms) -> list:
    filters = [photos_table.c.id.in_(_tagged_with(tag.root)) for tag in terms.tags]
    for word in terms.words:
        filters.append(
            or_(
                photos_table.c.title.icontains(word, autoescape=True),
                photos_table.c.id.in_(_tagged_with(word)),
            )
        )
    return filters


class PostgresPhotoRepository(PhotoRepository):
    """PostgreSQL implementation of PhotoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_photos(
        self, photo_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple photos in a single query.

        Args:
            photo_ids: List of photo IDs

        Returns:
            Dict mapping photo_id -> tag names in display order
        """
        if not photo_ids:
            return {}

        stmt = (
            select(photo_tags_table.c.photo_id, tags_table.c.name)
            .select_from(photo_tags_table)
            .join(tags_table, photo_tags_table.c.tag_id == tags_table.c.id)
            .where(photo_tags_table.c.photo_id.in_(photo_ids))
            .order_by(photo_tags_table.c.photo_id, photo_tags_table.c.position)
        )
        result = await self.session.execute(stmt)

        photo_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            photo_tag_map[row.photo_id].append(row.name)

        return photo_tag_map

    async def _fetch_photos(self, stmt: Select) -> List[Photo]:
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        if not rows:
            return []

        photo_tag_map = await self._fetch_tags_for_photos([row.id for row in rows])
        return [
            row_to_photo(row._asdict(), tag_names=photo_tag_map.get(row.id, []))
            for row in rows
        ]

    async def _count(self, *filters) -> int:
        stmt = select(func.count()).select_from(photos_table).where(*filters)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_id(self, photo_id: PhotoId) -> Optional[Photo]:
        """Find a photo by ID."""
        with logfire.span("photo_repository.find_by_id", photo_id=str(photo_id)):
            photos = await self._fetch_photos(
                select(photos_table).where(photos_table.c.id == photo_id)
            )
            return photos[0] if photos else None

    async def find_all(
        self,
        sort: PhotoSortOrder = PhotoSortOrder.CREATED,
        limit: int = 32,
        offset: int = 0,
    ) -> List[Photo]:
        """Find photos with ordering and pagination."""
        with logfire.span(
            "photo_repository.find_all", sort=sort.value, limit=limit, offset=offset
        ):
            stmt = select(photos_table)

            if sort == PhotoSortOrder.VOTES:
                score = photos_table.c.up_votes - photos_table.c.down_votes
                stmt = stmt.order_by(desc(score), desc(photos_table.c.created_at))
            else:
                stmt = stmt.order_by(desc(photos_table.c.created_at))

            photos = await self._fetch_photos(stmt.limit(limit).offset(offset))
            logfire.info("Found photos", count=len(photos))
            return photos

    async def count(self) -> int:
        """Count all photos."""
        return await self._count()

    async def search(
        self, terms: SearchTerms, limit: int = 32, offset: int = 0
    ) -> List[Photo]:
        """Find photos matching every search term, newest first."""
        with logfire.span(
            "photo_repository.search",
            tags=[tag.root for tag in terms.tags],
            words=terms.words,
        ):
            stmt = (
                select(photos_table)
                .where(*_search_filters(terms))
                .order_by(desc(photos_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            photos = await self._fetch_photos(stmt)
            logfire.info("Search matched photos", count=len(photos))
            return photos

    async def count_search(self, terms: SearchTerms) -> int:
        """Count photos matching every search term."""
        return await self._count(*_search_filters(terms))

    async def find_by_owner(
        self, owner_id: UserId, limit: int = 32, offset: int = 0
    ) -> List[Photo]:
        """Find photos uploaded by a user, newest first."""
        stmt = (
            select(photos_table)
            .where(photos_table.c.owner_id == owner_id)
            .order_by(desc(photos_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_photos(stmt)

    async def count_by_owner(self, owner_id: UserId) -> int:
        """Count photos uploaded by a user."""
        return await self._count(photos_table.c.owner_id == owner_id)

    async def save(self, photo: Photo) -> Photo:
        """Save a photo (create or update), replacing its tags."""
        with logfire.span(
            "photo_repository.save",
            photo_id=str(photo.id),
            title=photo.title,
            tags=photo.tag_names,
        ):
            photo_dict = photo_to_dict(photo)

            # Vote counters only change through increment_votes
            stmt = (
                insert(photos_table)
                .values(**photo_dict)
                .on_conflict_do_update(
                    index_elements=[photos_table.c.id],
                    set_={
                        "title": photo.title,
                        "filename": photo.filename,
                    },
                )
            )
            stmt = stmt.returning(photos_table)
            row = (await self.session.execute(stmt)).mappings().one()

            await self.session.execute(
                delete(photo_tags_table).where(photo_tags_table.c.photo_id == photo.id)
            )

            if photo.tags:
                # Create any tags we haven't seen before
                await self.session.execute(
                    insert(tags_table)
                    .values([{"name": name} for name in photo.tag_names])
                    .on_conflict_do_nothing(index_elements=[tags_table.c.name])
                )

                tag_result = await self.session.execute(
                    select(tags_table.c.id, tags_table.c.name).where(
                        tags_table.c.name.in_(photo.tag_names)
                    )
                )
                tag_id_map = {row.name: row.id for row in tag_result.fetchall()}

                await self.session.execute(
                    insert(photo_tags_table).values(
                        [
                            {
                                "photo_id": photo.id,
                                "tag_id": tag_id_map[name],
                                "position": position,
                            }
                            for position, name in enumerate(photo.tag_names)
                        ]
                    )
                )

            await self.session.flush()
            logfire.info("Photo saved successfully", photo_id=str(photo.id))
            # Stored counters, which may be newer than the caller's copy
            return row_to_photo(dict(row), tag_names=photo.tag_names)

    async def delete(self, photo_id: PhotoId) -> None:
        """Delete a photo; tag links and votes cascade."""
        stmt = photos_table.delete().where(photos_table.c.id == photo_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_votes(
        self, photo_id: PhotoId, direction: VoteDirection
    ) -> Optional[Photo]:
        """Atomically add one vote to the up or down counter."""
        with logfire.span(
            "photo_repository.increment_votes",
            photo_id=str(photo_id),
            direction=direction.value,
        ):
            if direction == VoteDirection.UP:
                values = {"up_votes": photos_table.c.up_votes + 1}
            else:
                values = {"down_votes": photos_table.c.down_votes + 1}

            stmt = (
                update(photos_table)
                .where(photos_table.c.id == photo_id)
                .values(**values)
                .returning(photos_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn("Photo not found for vote", photo_id=str(photo_id))
                return None

            photo_tag_map = await self._fetch_tags_for_photos([row.id])
            await self.session.flush()
            return row_to_photo(row._asdict(), tag_names=photo_tag_map.get(row.id, []))

    async def tag_counts(self) -> List[TagCount]:
        """Count photos per tag, most used first."""
        with logfire.span("photo_repository.tag_counts"):
            photo_count = func.count(photo_tags_table.c.photo_id).label("photo_count")
            stmt = (
                select(tags_table.c.name, photo_count)
                .join(photo_tags_table, photo_tags_table.c.tag_id == tags_table.c.id)
                .group_by(tags_table.c.name)
                .order_by(desc(photo_count), tags_table.c.name)
            )
            result = await self.session.execute(stmt)
            return [
                TagCount(tag=row.name, count=row.photo_count)
                for row in result.fetchall()
            ]
