import logging
from typing import Optional

logger = logging.getLogger("api")

class APILogger:
    """API日志记录工具类

    每条日志形如 ``[操作] 阶段 | 说明 | k=v | ...``，值为 None 的字段不输出。
    """

    SEPARATOR = "=" * 50

    @classmethod
    def _emit(
        cls,
        level: int,
        operation: str,
        stage: str,
        detail: Optional[str] = None,
        exc_info: bool = False,
        **fields,
    ) -> None:
        parts = [f"[{operation}] {stage}"]
        if detail:
            parts.append(detail)
        parts.extend(f"{k}={v}" for k, v in fields.items() if v is not None)
        logger.log(level, f"\n{cls.SEPARATOR}\n{' | '.join(parts)}\n{cls.SEPARATOR}", exc_info=exc_info)

    @classmethod
    def log_request(cls, operation: str, **fields) -> None:
        cls._emit(logging.INFO, operation, "请求", **fields)

    @classmethod
    def log_response(cls, operation: str, **fields) -> None:
        cls._emit(logging.INFO, operation, "响应", **fields)

    @classmethod
    def log_warning(cls, operation: str, message: str, **fields) -> None:
        cls._emit(logging.WARNING, operation, "警告", message, **fields)

    @classmethod
    def log_error(cls, operation: str, error: Exception, **fields) -> None:
        """记录错误日志，附带异常堆栈"""
        cls._emit(logging.ERROR, operation, "错误", str(error), exc_info=True, **fields)

    @staticmethod
    def mask_signature(signature: str) -> str:
        """签名只记录首尾"""
        if len(signature) <= 12:
            return signature
        return f"{signature[:6]}...{signature[-4:]}"
