from typing import List, Optional, Tuple
from uuid import UUID
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.core.exceptions import IdentityMismatch, MalformedCommand
from src.core.models.friendship import FriendRequestStatus
from src.core.schemas.friendship import FriendEntry
from src.core.services.command import decode_command
from src.core.services.identity import IdentityService
from src.core.services.relationship import RelationshipAccessor

logger = logging.getLogger(__name__)

class FriendshipService:
    """好友请求生命周期服务

    调用者身份来自上游签名验证中间件给出的钱包地址，这里不再校验签名本身。
    变更操作从签名消息中解析请求ID，再通过 RelationshipAccessor 删除或更新。

    默认不校验调用者是否为该请求的参与者（已知的授权缺口），
    enforce_ownership=True 时启用严格模式。
    """

    def __init__(
        self,
        db: AsyncSession,
        identity: Optional[IdentityService] = None,
        accessor: Optional[RelationshipAccessor] = None,
        enforce_ownership: Optional[bool] = None,
    ):
        self.identity = identity or IdentityService(db)
        self.accessor = accessor or RelationshipAccessor(db)
        if enforce_ownership is None:
            enforce_ownership = settings.FRIENDS_ENFORCE_OWNERSHIP
        self.enforce_ownership = enforce_ownership

    async def get_user_friends(self, verified_signer: str) -> List[FriendEntry]:
        """获取好友列表，只查询调用者作为发起者且已接受的请求"""
        user_id = await self.identity.resolve(verified_signer)
        requests = await self.accessor.list_by_requester_and_status(
            user_id, FriendRequestStatus.ACCEPTED
        )
        return [FriendEntry.model_validate(request) for request in requests]

    async def get_pending_requests(self, verified_signer: str) -> Optional[List[FriendEntry]]:
        """获取待处理的好友请求，没有记录时返回空列表"""
        user_id = await self.identity.resolve(verified_signer)
        requests = await self.accessor.list_by_requester_and_status(
            user_id, FriendRequestStatus.PENDING
        )
        if requests is None:
            return None
        return [FriendEntry.model_validate(request) for request in requests]

    async def cancel_request_or_remove_friend(
        self, verified_signer: str, signature: str, message: str
    ) -> bool:
        """取消好友请求或删除好友，请求不存在时返回 False"""
        user_id, request_id = await self._resolve_command(verified_signer, message)
        if not await self._check_participant(verified_signer, user_id, request_id):
            return False

        removed = await self.accessor.delete_by_id(request_id)
        logger.info(
            f"取消好友请求 - signer: {verified_signer}, request_id: {request_id}, removed: {removed}"
        )
        return removed

    async def accept_friend_request(
        self, verified_signer: str, signature: str, message: str
    ) -> bool:
        """接受好友请求，重复接受已接受的请求视为成功"""
        user_id, request_id = await self._resolve_command(verified_signer, message)
        if not await self._check_participant(verified_signer, user_id, request_id):
            return False

        updated = await self.accessor.update_status_by_id(
            request_id, FriendRequestStatus.ACCEPTED
        )
        logger.info(
            f"接受好友请求 - signer: {verified_signer}, request_id: {request_id}, updated: {updated}"
        )
        return updated

    async def _resolve_command(self, verified_signer: str, message: str) -> Tuple[UUID, int]:
        """解析签名地址和签名消息，消息格式错误统一按身份不匹配处理"""
        user_id = await self.identity.resolve(verified_signer)
        try:
            return user_id, decode_command(message)
        except MalformedCommand as e:
            logger.info(f"签名消息与调用者不一致 - signer: {verified_signer}, 原因: {e}")
            raise IdentityMismatch() from e

    async def _check_participant(
        self, verified_signer: str, user_id: UUID, request_id: int
    ) -> bool:
        """严格模式下校验调用者是请求的发起者或接收者，请求不存在时返回 False"""
        if not self.enforce_ownership:
            logger.debug(f"未校验请求归属 - signer: {verified_signer}, request_id: {request_id}")
            return True

        request = await self.accessor.get_by_id(request_id)
        if request is None:
            return False
        if user_id not in (request.from_user_id, request.to_user_id):
            logger.warning(
                f"调用者不是好友请求的参与者 - signer: {verified_signer}, request_id: {request_id}"
            )
            raise IdentityMismatch()
        return True
