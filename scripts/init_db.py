import asyncio
from sqlalchemy import inspect
from src.core.database import engine, Base
from src.core.models import User, FriendRequest  # noqa: F401  注册模型

async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        print('Tables in database:', tables)

if __name__ == "__main__":
    asyncio.run(init_db())
