from typing import List, Optional, Union
from uuid import UUID
import logging

from sqlalchemy import select, delete, update, and_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import StoreError
from src.core.models.friendship import FriendRequest, FriendRequestStatus

logger = logging.getLogger(__name__)

def _status_value(status: Union[FriendRequestStatus, str]) -> str:
    """校验并返回状态的字符串值"""
    return FriendRequestStatus(status).value

class RelationshipAccessor:
    """好友请求表的增删改查，每个方法只执行一条语句"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_by_requester_and_status(
        self, user_id: UUID, status: Union[FriendRequestStatus, str]
    ) -> List[FriendRequest]:
        """按发起者和状态查询好友请求，不保证顺序"""
        status_value = _status_value(status)
        try:
            result = await self.db.execute(
                select(FriendRequest).where(
                    and_(
                        FriendRequest.from_user_id == user_id,
                        FriendRequest.status == status_value
                    )
                )
            )
        except SQLAlchemyError as e:
            raise StoreError(f"查询好友请求失败: {e}") from e
        return list(result.scalars().all())

    async def get_by_id(self, request_id: int) -> Optional[FriendRequest]:
        """按ID获取好友请求"""
        try:
            result = await self.db.execute(
                select(FriendRequest).where(FriendRequest.id == request_id)
            )
        except SQLAlchemyError as e:
            raise StoreError(f"查询好友请求失败: {e}") from e
        return result.scalar_one_or_none()

    async def delete_by_id(self, request_id: int) -> bool:
        """删除好友请求，返回是否有记录被删除"""
        try:
            result = await self.db.execute(
                delete(FriendRequest).where(FriendRequest.id == request_id)
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StoreError(f"删除好友请求失败: {e}") from e
        logger.debug(f"删除好友请求 - request_id: {request_id}, 影响行数: {result.rowcount}")
        return result.rowcount > 0

    async def update_status_by_id(
        self, request_id: int, new_status: Union[FriendRequestStatus, str]
    ) -> bool:
        """更新好友请求状态，返回是否匹配到记录"""
        status_value = _status_value(new_status)
        try:
            result = await self.db.execute(
                update(FriendRequest)
                .where(FriendRequest.id == request_id)
                .values(status=status_value)
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StoreError(f"更新好友请求失败: {e}") from e
        logger.debug(
            f"更新好友请求状态 - request_id: {request_id}, status: {status_value}, 影响行数: {result.rowcount}"
        )
        return result.rowcount > 0
