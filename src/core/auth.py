from typing import Optional
import logging

from fastapi import Header, HTTPException, status

from config.settings import settings

logger = logging.getLogger(__name__)

async def get_verified_signer(
    verified_signer: Optional[str] = Header(None, alias=settings.SIGNER_HEADER)
) -> str:
    """获取上游签名验证中间件写入的钱包地址

    签名已在上游验证，这里只读取结果，不重新校验。
    """
    if verified_signer is None or not verified_signer.strip():
        logger.info("请求缺少已验证的签名地址")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="缺少已验证的签名地址"
        )
    return verified_signer
