from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool
from finmitra.core.config import settings
from finmitra.db.base import Base
from finmitra.db import models  # noqa: F401

# NullPool: aiosqlite connections are bound to the event loop that opened them
engine = create_async_engine(settings.DATABASE_URL, echo=False, poolclass=NullPool)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False)

async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
