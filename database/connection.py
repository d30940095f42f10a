import asyncio
import logging
from datetime import timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

logger = logging.getLogger(__name__)


class MongoConnection:
    """Manages the Motor client lifecycle.

    ``initialize`` is a one-time barrier: the first caller starts the
    connection attempt and every concurrent caller awaits that same task.
    A failed attempt is dropped so the next caller can retry.
    """

    def __init__(self):
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None
        self._connecting: Optional[asyncio.Task] = None

    async def initialize(self, uri: str, db_name: str) -> AsyncIOMotorDatabase:
        """Connect once and return the database handle. Call at app startup."""
        if self._database is not None:
            return self._database

        if self._connecting is None:
            self._connecting = asyncio.ensure_future(self._connect(uri, db_name))

        task = self._connecting
        try:
            database = await asyncio.shield(task)
        except Exception:
            if self._connecting is task:
                self._connecting = None
            raise

        self._database = database
        return database

    async def _connect(self, uri: str, db_name: str) -> AsyncIOMotorDatabase:
        client = AsyncIOMotorClient(uri, tz_aware=True, tzinfo=timezone.utc)
        try:
            await client.admin.command("ping")
            database = client[db_name]
            await ensure_indexes(database)
        except Exception:
            client.close()
            raise
        self._client = client
        logger.info("Connected to %s", db_name)
        return database

    async def close(self) -> None:
        """Close the client. Call at app shutdown."""
        if self._client is not None:
            self._client.close()
        self._client = None
        self._database = None
        self._connecting = None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        """Get the database, raising if not connected yet."""
        if self._database is None:
            raise RuntimeError(
                "Database not connected yet. Call await db.initialize() first."
            )
        return self._database

    async def health_check(self) -> bool:
        """Test connectivity with a ping."""
        if self._client is None:
            return False
        try:
            await self._client.admin.command("ping")
            return True
        except Exception:
            logger.warning("Database ping failed", exc_info=True)
            return False


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """Create the unique email index backing registration."""
    await database["users"].create_index([("email", ASCENDING)], unique=True)


# Module-level singleton for convenience
db = MongoConnection()
