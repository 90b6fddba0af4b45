class FriendshipError(Exception):
    """好友服务异常基类"""

class IdentityMismatch(FriendshipError):
    """签名地址无法对应唯一用户，或签名载荷与调用者不一致"""

    def __init__(self, message: str = "Mismatch Payload"):
        super().__init__(message)

class MalformedCommand(FriendshipError):
    """签名消息无法解析为有效指令，只在服务内部使用"""

class StoreError(FriendshipError):
    """数据库访问失败，原始异常保存在 __cause__ 中"""
