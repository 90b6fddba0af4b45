from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

class ResponseCode(str, Enum):
    """响应状态码"""
    SUCCESS = "SUCCESS"
    UPDATE_SUCCESS = "UPDATE_SUCCESS"  # 接受请求
    DELETE_SUCCESS = "DELETE_SUCCESS"  # 取消请求/删除好友
    NOT_FOUND = "NOT_FOUND"
    MISMATCH_PAYLOAD = "MISMATCH_PAYLOAD"  # 签名地址与载荷不一致
    SERVER_ERROR = "SERVER_ERROR"

T = TypeVar("T")

class BaseResponse(BaseModel):
    """响应外层结构"""
    success: bool = Field(..., description="是否成功")
    code: str = Field(..., description="响应码")
    message: str = Field(..., description="响应消息")

class SuccessResponse(BaseResponse, Generic[T]):
    data: T = Field(..., description="响应数据")

    @classmethod
    def create(cls, code: str, message: str, data: T) -> "SuccessResponse[T]":
        return cls(success=True, code=code, message=message, data=data)

class ErrorResponse(BaseResponse):
    @classmethod
    def create(cls, code: str, message: str) -> "ErrorResponse":
        return cls(success=False, code=code, message=message)
