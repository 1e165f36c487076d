"""User Routes — GET /api/users and GET /api/users/{username}."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.services import users as user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def get_users(db: AsyncSession = Depends(get_db)):
    """List all users."""
    return {"users": await user_service.list_users(db)}


@router.get("/{username}")
async def get_user(username: str, db: AsyncSession = Depends(get_db)):
    """Get one user by username."""
    return {"user": await user_service.get_user(db, username)}
