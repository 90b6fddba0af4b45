from fastapi import APIRouter
from .endpoints import friendship

api_router = APIRouter()

# 健康检查
@api_router.get("/health", tags=["health"])
async def health():
    return {"status": "ok", "message": "API is running"}

# 注册好友相关路由
api_router.include_router(friendship.router, prefix="/friends", tags=["friends"])
