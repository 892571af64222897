"""
Service Container

Builds every component from explicitly constructed storage clients.
Lifecycle: startup (connect) -> serve requests -> shutdown (disconnect).
"""
import logging
from typing import Optional

from backoffice.modules.audit_manager import AuditManager
from backoffice.modules.config import Settings
from backoffice.modules.database import StorageClients, init_schema
from backoffice.modules.users.repositories import (
    OrderRepository,
    ProfileRepository,
    VerificationRepository,
)
from backoffice.modules.users.services import (
    AdminDashboardService,
    DirectorySearchService,
    OrderListingService,
    RoleResolver,
    StatusMutator,
    VerificationAdjudicator,
)
from backoffice.modules.view_cache import ViewCache, ViewInvalidator

logger = logging.getLogger("backoffice.container")


class BackofficeContainer:
    """
    Wires repositories and services.

    Mutators and search use the privileged service client; session-bound
    order reads use the restricted client.
    """

    def __init__(
        self,
        clients: StorageClients,
        invalidator: Optional[ViewInvalidator] = None,
        init_schema_on_startup: bool = False,
    ):
        self.clients = clients
        self.invalidator = invalidator or ViewInvalidator(ViewCache())
        self.init_schema_on_startup = init_schema_on_startup

        service_db = clients.service.database
        client_db = clients.client.database

        self.audit = AuditManager(service_db)
        self.profile_repository = ProfileRepository(service_db)
        self.verification_repository = VerificationRepository(service_db)
        self.order_repository = OrderRepository(client_db)

        self.directory_search = DirectorySearchService(self.profile_repository)
        self.role_resolver = RoleResolver(self.profile_repository)
        self.status_mutator = StatusMutator(self.profile_repository, self.invalidator, self.audit)
        self.verification_adjudicator = VerificationAdjudicator(
            self.verification_repository, self.invalidator, self.audit
        )
        self.order_listing = OrderListingService(self.order_repository, self.invalidator)
        self.admin_dashboard = AdminDashboardService(
            self.profile_repository, self.verification_repository, self.invalidator.cache
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "BackofficeContainer":
        return cls(
            StorageClients.from_settings(settings),
            init_schema_on_startup=settings.init_schema,
        )

    async def startup(self) -> None:
        await self.clients.connect()
        if self.init_schema_on_startup:
            await init_schema(self.clients.service.database)
        logger.info("Back office services started")

    async def shutdown(self) -> None:
        await self.clients.disconnect()
        logger.info("Back office services stopped")
