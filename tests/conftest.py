"""
Shared fixtures: a temporary SQLite store behind both credential tiers,
a started container, and seeding helpers.
"""
import pytest

from backoffice.container import BackofficeContainer
from backoffice.modules.database import ConnectionManager, StorageClients


class Seeder:
    """Inserts fixture rows directly, bypassing the services under test."""

    def __init__(self, database):
        self.database = database

    async def profile(
        self,
        profile_id,
        full_name=None,
        email=None,
        phone=None,
        role="buyer",
        status="active",
        type=None,
    ):
        await self.database.execute(
            """
            INSERT INTO profiles (id, full_name, email, phone, role, status, type)
            VALUES (:id, :full_name, :email, :phone, :role, :status, :type)
            """,
            {
                "id": profile_id,
                "full_name": full_name,
                "email": email,
                "phone": phone,
                "role": role,
                "status": status,
                "type": type,
            },
        )

    async def report(self, report_id, profile_id, status="pending", report_text=None):
        await self.database.execute(
            """
            INSERT INTO verification_reports (id, profile_id, report_text, status)
            VALUES (:id, :profile_id, :report_text, :status)
            """,
            {"id": report_id, "profile_id": profile_id, "report_text": report_text, "status": status},
        )

    async def order(self, order_id, entrepreneur_id, created_at, status="pending", buyer_id="buyer-1"):
        await self.database.execute(
            """
            INSERT INTO marketplace_orders (id, entrepreneur_id, buyer_id, status, created_at)
            VALUES (:id, :entrepreneur_id, :buyer_id, :status, :created_at)
            """,
            {
                "id": order_id,
                "entrepreneur_id": entrepreneur_id,
                "buyer_id": buyer_id,
                "status": status,
                "created_at": created_at,
            },
        )


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'backoffice.db'}"


@pytest.fixture
def storage_clients(database_url):
    return StorageClients(
        service=ConnectionManager(database_url, name="service"),
        client=ConnectionManager(database_url, name="client"),
    )


@pytest.fixture
async def container(storage_clients):
    container = BackofficeContainer(storage_clients, init_schema_on_startup=True)
    await container.startup()
    yield container
    await container.shutdown()


@pytest.fixture
def seed(container):
    return Seeder(container.clients.service.database)


@pytest.fixture
def signals(container):
    """Every invalidation signal emitted during the test, in order."""
    recorded = []
    container.invalidator.add_listener(recorded.append)
    return recorded
