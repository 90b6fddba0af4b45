from fastapi import APIRouter, Depends, Body, status
from fastapi.responses import JSONResponse

from src.core.auth import get_verified_signer
from src.core.deps import get_friendship_service
from src.core.exceptions import IdentityMismatch
from src.core.schemas.friendship import (
    SignedCommandRequest, FriendListResponse, FriendActionResponse
)
from src.core.schemas.response import ResponseCode, ErrorResponse
from src.core.services.friendship import FriendshipService
from src.core.utils.logger import APILogger

router = APIRouter()

def _error(status_code: int, code: ResponseCode, message: str) -> JSONResponse:
    """构造统一的错误响应"""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.create(code=code.value, message=message).model_dump()
    )

def _mismatch() -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, ResponseCode.MISMATCH_PAYLOAD, "Mismatch Payload")

def _server_error(message: str) -> JSONResponse:
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ResponseCode.SERVER_ERROR, message)

@router.get("/get-user-friends", response_model=FriendListResponse)
async def get_user_friends(
    verified_signer: str = Depends(get_verified_signer),
    service: FriendshipService = Depends(get_friendship_service)
):
    """获取好友列表"""
    try:
        APILogger.log_request("获取好友列表", 签名地址=verified_signer)

        friends = await service.get_user_friends(verified_signer)

        APILogger.log_response(
            "获取好友列表",
            签名地址=verified_signer,
            返回记录数=len(friends)
        )

        return FriendListResponse.create(
            code=ResponseCode.SUCCESS.value,
            message="获取好友列表成功",
            data=friends
        )
    except IdentityMismatch as e:
        APILogger.log_warning("获取好友列表", "身份不匹配", 签名地址=verified_signer, 错误信息=str(e))
        return _mismatch()
    except Exception as e:
        APILogger.log_error("获取好友列表", e, 签名地址=verified_signer)
        return _server_error("获取好友列表失败")

@router.get("/get-pending-requests", response_model=FriendListResponse)
async def get_pending_requests(
    verified_signer: str = Depends(get_verified_signer),
    service: FriendshipService = Depends(get_friendship_service)
):
    """获取待处理的好友请求"""
    try:
        APILogger.log_request("获取待处理请求", 签名地址=verified_signer)

        requests = await service.get_pending_requests(verified_signer)

        if requests is None:
            APILogger.log_warning("获取待处理请求", "查询结果为空", 签名地址=verified_signer)
            return _error(status.HTTP_404_NOT_FOUND, ResponseCode.NOT_FOUND, "No pending requests found")

        APILogger.log_response(
            "获取待处理请求",
            签名地址=verified_signer,
            返回记录数=len(requests)
        )

        return FriendListResponse.create(
            code=ResponseCode.SUCCESS.value,
            message="获取待处理请求成功",
            data=requests
        )
    except IdentityMismatch as e:
        APILogger.log_warning("获取待处理请求", "身份不匹配", 签名地址=verified_signer, 错误信息=str(e))
        return _mismatch()
    except Exception as e:
        APILogger.log_error("获取待处理请求", e, 签名地址=verified_signer)
        return _server_error("获取待处理请求失败")

async def _cancel(
    operation: str,
    verified_signer: str,
    request: SignedCommandRequest,
    service: FriendshipService
):
    """取消请求与删除好友共用同一个删除流程"""
    try:
        APILogger.log_request(
            operation,
            签名地址=verified_signer,
            签名=APILogger.mask_signature(request.signature),
            消息=request.message
        )

        removed = await service.cancel_request_or_remove_friend(
            verified_signer, request.signature, request.message
        )

        if not removed:
            APILogger.log_warning(operation, "好友请求不存在", 签名地址=verified_signer, 消息=request.message)
            return _error(status.HTTP_404_NOT_FOUND, ResponseCode.NOT_FOUND, "Friend request not found")

        APILogger.log_response(operation, 签名地址=verified_signer, 操作结果="成功")

        return FriendActionResponse.create(
            code=ResponseCode.DELETE_SUCCESS.value,
            message="好友请求已删除",
            data=True
        )
    except IdentityMismatch as e:
        APILogger.log_warning(operation, "身份不匹配", 签名地址=verified_signer, 错误信息=str(e))
        return _mismatch()
    except Exception as e:
        APILogger.log_error(operation, e, 签名地址=verified_signer)
        return _server_error(f"{operation}失败")

@router.post("/cancel-request", response_model=FriendActionResponse)
async def cancel_request(
    request: SignedCommandRequest = Body(...),
    verified_signer: str = Depends(get_verified_signer),
    service: FriendshipService = Depends(get_friendship_service)
):
    """取消好友请求"""
    return await _cancel("取消好友请求", verified_signer, request, service)

@router.post("/remove-friend", response_model=FriendActionResponse)
async def remove_friend(
    request: SignedCommandRequest = Body(...),
    verified_signer: str = Depends(get_verified_signer),
    service: FriendshipService = Depends(get_friendship_service)
):
    """删除好友"""
    return await _cancel("删除好友", verified_signer, request, service)

@router.put("/accept-request", response_model=FriendActionResponse)
async def accept_request(
    request: SignedCommandRequest = Body(...),
    verified_signer: str = Depends(get_verified_signer),
    service: FriendshipService = Depends(get_friendship_service)
):
    """接受好友请求"""
    try:
        APILogger.log_request(
            "接受好友请求",
            签名地址=verified_signer,
            签名=APILogger.mask_signature(request.signature),
            消息=request.message
        )

        updated = await service.accept_friend_request(
            verified_signer, request.signature, request.message
        )

        if not updated:
            APILogger.log_warning("接受好友请求", "好友请求不存在", 签名地址=verified_signer, 消息=request.message)
            return _error(status.HTTP_404_NOT_FOUND, ResponseCode.NOT_FOUND, "Friend request not found")

        APILogger.log_response("接受好友请求", 签名地址=verified_signer, 操作结果="成功")

        return FriendActionResponse.create(
            code=ResponseCode.UPDATE_SUCCESS.value,
            message="已接受好友请求",
            data=True
        )
    except IdentityMismatch as e:
        APILogger.log_warning("接受好友请求", "身份不匹配", 签名地址=verified_signer, 错误信息=str(e))
        return _mismatch()
    except Exception as e:
        APILogger.log_error("接受好友请求", e, 签名地址=verified_signer)
        return _server_error("接受好友请求失败")
