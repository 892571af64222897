"""
Back Office Configuration

Process-wide settings read once from the environment (and a local .env file).
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from databases import DatabaseURL
from dotenv import load_dotenv

logger = logging.getLogger("backoffice.config")

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Storage endpoint plus the two credential tiers.

    The service credential bypasses row-level policy and is used by the
    mutators and search; the client credential is used by session-bound reads.
    """
    storage_url: str
    service_credential: Optional[str] = None
    client_credential: Optional[str] = None
    init_schema: bool = False
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        load_dotenv()

        storage_url = os.getenv("STORAGE_URL")
        if not storage_url:
            raise ValueError("STORAGE_URL must be set")

        origins = os.getenv("BACKOFFICE_CORS_ORIGINS", "*")
        return cls(
            storage_url=storage_url,
            service_credential=os.getenv("STORAGE_SERVICE_CREDENTIAL") or None,
            client_credential=os.getenv("STORAGE_CLIENT_CREDENTIAL") or None,
            init_schema=os.getenv("BACKOFFICE_INIT_SCHEMA", "false").strip().lower() in _TRUE_VALUES,
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def service_url(self) -> str:
        return _with_credential(self.storage_url, self.service_credential)

    @property
    def client_url(self) -> str:
        return _with_credential(self.storage_url, self.client_credential)


def _with_credential(url: str, credential: Optional[str]) -> str:
    """Bind a ``user:password`` credential into the storage URL."""
    if not credential:
        return url
    username, _, password = credential.partition(":")
    if not username:
        raise ValueError("Storage credential must be in 'user:password' form")
    return str(DatabaseURL(url).replace(username=username, password=password or None))


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    root.setLevel(level)
