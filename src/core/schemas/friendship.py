from typing import List
from uuid import UUID
from pydantic import BaseModel, Field, field_validator

from .response import SuccessResponse

# friend_requests.id 为 32 位整数
MAX_REQUEST_ID = 2**31 - 1

class SignedCommand(BaseModel):
    """签名消息中的指令内容"""
    id: int = Field(..., gt=0, le=MAX_REQUEST_ID, description="好友请求ID")

    @field_validator("id", mode="before")
    @classmethod
    def reject_bool(cls, v):
        if isinstance(v, bool):
            raise ValueError("id 不能是布尔值")
        return v

class SignedCommandRequest(BaseModel):
    """取消/接受好友请求的请求体"""
    signature: str = Field(..., min_length=1, description="钱包签名")
    message: str = Field(..., min_length=1, description="被签名的原始消息")

class FriendEntry(BaseModel):
    """好友请求的目标用户"""
    to_user_id: UUID = Field(..., description="接收者ID")

    class Config:
        from_attributes = True

class FriendListResponse(SuccessResponse[List[FriendEntry]]):
    """好友/待处理请求列表响应"""

class FriendActionResponse(SuccessResponse[bool]):
    """取消/接受操作响应"""
