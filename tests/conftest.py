import os

# 测试环境配置，需在导入应用模块之前设置
os.environ.setdefault("POSTGRES_USER", "test")
os.environ.setdefault("POSTGRES_PASSWORD", "test")
os.environ.setdefault("POSTGRES_HOST", "localhost")
os.environ.setdefault("POSTGRES_PORT", "5432")
os.environ.setdefault("POSTGRES_DB", "test")
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_LEVEL", "INFO")

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.core.database import Base, get_session
from src.core.models import User, FriendRequest, FriendRequestStatus
from src.main import app

@pytest_asyncio.fixture
async def engine():
    """每个测试使用独立的内存数据库"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()

@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session

@pytest_asyncio.fixture
async def users(db):
    """钱包地址 0xA、0xB、0xC 各对应一个用户"""
    created = {
        name: User(wallet_address=f"0x{name}", username=name.lower())
        for name in ("A", "B", "C")
    }
    db.add_all(created.values())
    await db.commit()
    return created

@pytest_asyncio.fixture
async def make_request(db):
    async def _make(from_user, to_user, status=FriendRequestStatus.PENDING, request_id=None):
        request = FriendRequest(
            id=request_id,
            from_user_id=from_user.id,
            to_user_id=to_user.id,
            status=status.value,
        )
        db.add(request)
        await db.commit()
        return request.id
    return _make

@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
