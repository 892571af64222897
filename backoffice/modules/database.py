"""
Storage Clients

Connection lifecycle for the two credential tiers and schema bootstrap.
Clients are constructed explicitly and handed to repositories; nothing is
instantiated at import time.
"""
import logging
from typing import Optional

from databases import Database

from backoffice.modules.config import Settings

logger = logging.getLogger("backoffice.database")


SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS profiles (
        id TEXT PRIMARY KEY,
        full_name TEXT,
        email TEXT,
        phone TEXT,
        role TEXT NOT NULL DEFAULT 'buyer',
        status TEXT NOT NULL DEFAULT 'pending',
        type TEXT,
        revision INTEGER NOT NULL DEFAULT 0,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS verification_reports (
        id TEXT PRIMARY KEY,
        profile_id TEXT NOT NULL,
        report_text TEXT,
        status TEXT NOT NULL DEFAULT 'pending',
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS marketplace_orders (
        id TEXT PRIMARY KEY,
        entrepreneur_id TEXT NOT NULL,
        buyer_id TEXT,
        status TEXT NOT NULL DEFAULT 'pending',
        estimated_delivery_date TEXT,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        CHECK (status IN ('pending', 'paid', 'shipped', 'delivered', 'completed', 'cancelled', 'dispute'))
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS audit_logs (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        action TEXT NOT NULL,
        resource_type TEXT NOT NULL,
        resource_id TEXT NOT NULL,
        details TEXT,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_reports_profile ON verification_reports (profile_id)",
    "CREATE INDEX IF NOT EXISTS idx_orders_entrepreneur ON marketplace_orders (entrepreneur_id)",
)


class ConnectionManager:
    """
    Manages one database connection lifecycle.
    """

    def __init__(self, database_url: str, name: str = "storage"):
        if not database_url:
            raise ValueError("database_url is required")
        self.database_url = database_url
        self.name = name
        self._database: Optional[Database] = None

    @property
    def database(self) -> Database:
        """
        Get the database instance. Creates it if it doesn't exist.
        """
        if self._database is None:
            self._database = Database(self.database_url)
        return self._database

    async def connect(self) -> None:
        if not self.database.is_connected:
            await self.database.connect()
            logger.info(f"Database connection established ({self.name})")

    async def disconnect(self) -> None:
        if self._database and self._database.is_connected:
            await self._database.disconnect()
            logger.info(f"Database connection closed ({self.name})")

    async def health_check(self) -> bool:
        """
        Check if database connection is healthy.
        """
        try:
            if not self._database or not self._database.is_connected:
                return False
            await self._database.fetch_val("SELECT 1")
            return True
        except Exception as e:
            logger.warning(f"Database health check failed ({self.name}): {e}")
            return False


class StorageClients:
    """
    The privileged service client and the restricted client, bound once at init.
    """

    def __init__(self, service: ConnectionManager, client: ConnectionManager):
        self.service = service
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "StorageClients":
        return cls(
            service=ConnectionManager(settings.service_url, name="service"),
            client=ConnectionManager(settings.client_url, name="client"),
        )

    async def connect(self) -> None:
        await self.service.connect()
        await self.client.connect()

    async def disconnect(self) -> None:
        # Close both even if the first one fails.
        try:
            await self.client.disconnect()
        finally:
            await self.service.disconnect()

    async def health_check(self) -> bool:
        return await self.service.health_check() and await self.client.health_check()


async def init_schema(database: Database) -> None:
    """Create the back-office tables if they are missing."""
    for statement in SCHEMA_STATEMENTS:
        await database.execute(statement)
    logger.info("Back office schema ensured")
