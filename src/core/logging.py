import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

from config.settings import settings

# 日志文件名与最低级别
LOG_FILES = {
    "debug.log": logging.DEBUG,
    "api.log": logging.INFO,
    "error.log": logging.ERROR,
}
MAX_BYTES = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5

def _file_handler(path: Path, level: int, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=path,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler

def setup_logging() -> logging.Logger:
    """配置根日志记录器，重复调用不会重复添加处理器"""
    logger = logging.getLogger()
    logger.setLevel(settings.LOG_LEVEL.upper())
    if getattr(logger, "_friends_configured", False):
        return logger

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(settings.LOG_FORMAT)

    for filename, level in LOG_FILES.items():
        logger.addHandler(_file_handler(log_dir / filename, level, formatter))

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    console.setLevel(logging.DEBUG)
    logger.addHandler(console)

    # 第三方库只保留必要日志
    for name, level in (
        ("uvicorn", logging.INFO),
        ("uvicorn.access", logging.INFO),
        ("sqlalchemy.engine", logging.WARNING),
        ("aiosqlite", logging.WARNING),
    ):
        logging.getLogger(name).setLevel(level)

    logger._friends_configured = True
    return logger

root_logger = setup_logging()
