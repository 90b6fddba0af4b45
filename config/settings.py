from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # 应用设置
    APP_NAME: str = "Wallet Friends API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # 服务器设置
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    WORKERS: int = 1

    # 数据库设置
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_HOST: str
    POSTGRES_PORT: int
    POSTGRES_DB: str
    SQLALCHEMY_DATABASE_URI: Optional[str] = None  # 完整连接串，设置后覆盖 POSTGRES_*
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800

    # CORS设置，逗号分隔
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    # 日志设置
    LOG_LEVEL: str = "DEBUG"  # 默认设置为DEBUG级别，方便开发调试
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DIR: str = "logs"

    # 签名验证设置
    SIGNER_HEADER: str = "X-Verified-Signer"  # 上游签名中间件写入的已验证钱包地址
    FRIENDS_ENFORCE_OWNERSHIP: bool = False  # 开启后只允许请求参与者取消/接受

    # 数据库连接URL
    @property
    def DATABASE_URL(self) -> str:
        if self.SQLALCHEMY_DATABASE_URI:
            return self.SQLALCHEMY_DATABASE_URI
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def CORS_ORIGINS(self) -> List[str]:
        return [i.strip() for i in self.ALLOWED_ORIGINS.split(",") if i.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"  # 允许额外的字段


settings = Settings()
