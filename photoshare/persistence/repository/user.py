"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from photoshare.domain.model import User
from photoshare.domain.repository import UserRepository
from photoshare.domain.value import PhotoId, UserId
from photoshare.persistence.mappers import row_to_user, user_to_dict
from photoshare.persistence.tables import user_votes_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *filters) -> Optional[User]:
        stmt = select(users_table).where(*filters)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        votes_stmt = (
            select(user_votes_table.c.photo_id)
            .where(user_votes_table.c.user_id == row["id"])
            .order_by(user_votes_table.c.created_at)
        )
        votes = (await self.session.execute(votes_stmt)).scalars().all()
        return row_to_user(dict(row), votes=list(votes))

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, with their votes."""
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_name(self, name: str) -> Optional[User]:
        """Find a user by name, ignoring case."""
        return await self._find_one(func.lower(users_table.c.name) == name.lower())

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        return await self._find_one(func.lower(users_table.c.email) == email.lower())

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)
        stmt = (
            insert(users_table)
            .values(**user_dict)
            .on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={
                    key: value for key, value in user_dict.items() if key != "id"
                },
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def add_vote(self, user_id: UserId, photo_id: PhotoId) -> bool:
        """Record that a user voted on a photo.

        The (user_id, photo_id) primary key decides: a concurrent or repeated
        vote inserts nothing and returns False.
        """
        stmt = (
            insert(user_votes_table)
            .values(user_id=user_id, photo_id=photo_id)
            .on_conflict_do_nothing(
                index_elements=[
                    user_votes_table.c.user_id,
                    user_votes_table.c.photo_id,
                ]
            )
            .returning(user_votes_table.c.photo_id)
        )
        result = await self.session.execute(stmt)
        inserted = result.first() is not None
        await self.session.flush()
        return inserted
