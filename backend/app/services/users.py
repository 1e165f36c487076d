"""User Operations — read-only access to users.

Invariants:
    - get_user raises NotFoundError for unknown usernames
    - get_user_or_404 exported for comment insertion (author must exist)
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.models.user import User
from app.schemas.user import UserResponse


async def get_user_or_404(username: str, db: AsyncSession) -> User:
    """Get user or raise NotFoundError. Exported for comments."""
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()
    if not user:
        raise NotFoundError("User", username)
    return user


async def list_users(db: AsyncSession) -> list[UserResponse]:
    """Return every user."""
    result = await db.execute(select(User))
    return [UserResponse.model_validate(u) for u in result.scalars().all()]


async def get_user(db: AsyncSession, username: str) -> UserResponse:
    """Single user by username. NotFoundError if absent."""
    return UserResponse.model_validate(await get_user_or_404(username, db))
