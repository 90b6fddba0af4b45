from uuid import UUID
import logging

from sqlalchemy import select
from sqlalchemy.exc import MultipleResultsFound, NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import IdentityMismatch, StoreError
from src.core.models.user import User

logger = logging.getLogger(__name__)

class IdentityService:
    """钱包地址到用户ID的解析服务"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def resolve(self, wallet_address: str) -> UUID:
        """根据已验证的钱包地址查找唯一用户，找不到或不唯一都视为身份不匹配"""
        try:
            result = await self.db.execute(
                select(User.id).where(User.wallet_address == wallet_address)
            )
            return result.scalar_one()
        except (NoResultFound, MultipleResultsFound) as e:
            logger.info(f"钱包地址没有对应的唯一用户 - wallet_address: {wallet_address}")
            raise IdentityMismatch() from e
        except SQLAlchemyError as e:
            raise StoreError(f"查询用户失败: {e}") from e
