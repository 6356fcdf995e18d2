"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first (via ``python-dotenv``) so that local deployments can keep
their configuration next to ``run.py``; variables already present in
the environment take precedence.  Defaults are provided for all
fields.
"""

import os
import uuid
from dataclasses import dataclass, field
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

# Identity used for every request until authentication exists.
DEFAULT_USER_ID = "5afb91d8-555d-45d7-a517-ece1b6655b42"


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Order Store API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Address the HTTP server binds to, in ``host:port`` form.
    server: str = field(default_factory=lambda: os.getenv("SERVER", "127.0.0.1:8000"))

    # Storage backend: ``memory`` keeps orders in the process, ``mongodb``
    # uses the collection configured below.
    order_store: str = field(default_factory=lambda: os.getenv("ORDER_STORE", "memory"))
    mongodb_uri: str = field(default_factory=lambda: os.getenv("MONGODB_URI", "mongodb://localhost:27017"))
    mongodb_database: str = field(default_factory=lambda: os.getenv("MONGODB_DATABASE", "orders"))
    mongodb_collection: str = field(default_factory=lambda: os.getenv("MONGODB_COLLECTION", "orders"))

    # Every request acts on behalf of this user.
    default_user_id: str = field(default_factory=lambda: os.getenv("DEFAULT_USER_ID", DEFAULT_USER_ID))

    request_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("REQUEST_TIMEOUT_SECONDS", "5"))
    )

    def server_address(self) -> Tuple[str, int]:
        """Split ``server`` into host and port.

        Raises
        ------
        ValueError
            If the value is not of the form ``host:port`` with a numeric
            port in the range 0‑65535.
        """
        host, sep, port = self.server.rpartition(":")
        if not sep or not host or not port.isdigit():
            raise ValueError(f"SERVER must be host:port, got {self.server!r}")
        port_number = int(port)
        if port_number > 65535:
            raise ValueError(f"SERVER port out of range: {port_number}")
        return host, port_number

    def caller_id(self) -> uuid.UUID:
        """Return the configured caller identity as a UUID."""
        return uuid.UUID(self.default_user_id)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  ``create_app`` accepts an
# explicit ``Settings`` instance for tests.
settings = Settings()
