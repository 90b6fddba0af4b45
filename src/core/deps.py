from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.database import get_session
from src.core.services.friendship import FriendshipService

async def get_friendship_service(
    db: AsyncSession = Depends(get_session)
) -> FriendshipService:
    """按请求构造好友服务，会话由 get_session 管理"""
    return FriendshipService(db)
