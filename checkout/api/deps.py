
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from checkout.config import get_settings

settings = get_settings()

# Ensure we have a valid URL or fallback to memory for dev/test if not set
DB_URL = settings.database_url or "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(DB_URL, echo=False)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)

