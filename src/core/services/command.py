import logging

from pydantic import ValidationError

from src.core.exceptions import MalformedCommand
from src.core.schemas.friendship import SignedCommand

logger = logging.getLogger(__name__)

def decode_command(message: str) -> int:
    """
    从签名消息中解析出好友请求ID

    message 必须是调用者签名时的原文，解析结果与签名覆盖的内容保持一致。
    消息不是 JSON 对象、缺少 id 或 id 不是正整数时抛出 MalformedCommand。
    """
    if not isinstance(message, (str, bytes)):
        raise MalformedCommand("签名消息必须是字符串")
    try:
        command = SignedCommand.model_validate_json(message)
    except ValidationError as e:
        logger.debug(f"签名消息解析失败: {e.errors()}")
        raise MalformedCommand("签名消息格式错误") from e
    return command.id
