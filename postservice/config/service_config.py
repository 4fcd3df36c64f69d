"""Service configuration.

This module defines the runtime configuration for postservice with
environment variable overrides.

Environment Variables (Service):
- ENVIRONMENT: Deployment environment, "production" switches to JSON logs
  (default: development)
- SERVICE_NAME: Name used in logs and metric labels (default: postservice)
- SERVICE_VERSION: Version reported by /health (default: package version)
- HOST / PORT: Listener address (default: 0.0.0.0 / 8080)

Environment Variables (Storage):
- STORAGE_BACKEND: "memory" or "postgres" (default: memory)
- DATABASE_URL: PostgreSQL connection string (required for postgres)
- DB_POOL_SIZE: Persistent pool connections (default: 5)
- DB_MAX_OVERFLOW: Extra connections above the pool size, -1 for unbounded
  (default: 10)
- DB_PING_TIMEOUT_SECONDS: Bound on the health-check ping (default: 5.0)
- SQLALCHEMY_ECHO: Log emitted SQL (default: false)
- AUTO_CREATE_SCHEMA: Create the posts table at startup (default: true)

Environment Variables (Health thresholds):
- MEMORY_DEGRADED_MB / MEMORY_UNHEALTHY_MB (default: 512 / 1024)
- TASKS_DEGRADED / TASKS_UNHEALTHY (default: 1000 / 5000)
- DB_POOL_DEGRADED_RATIO (default: 0.8)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from postservice import __version__

STORAGE_MEMORY = "memory"
STORAGE_POSTGRES = "postgres"
STORAGE_BACKENDS = frozenset({STORAGE_MEMORY, STORAGE_POSTGRES})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class HealthThresholds:
    """Classification thresholds for component health checks.

    Each ladder is strictly ordered: a value above the unhealthy threshold is
    UNHEALTHY, above the degraded threshold DEGRADED, otherwise HEALTHY.

    Attributes:
        memory_degraded_mb: Allocated MB above which memory is degraded.
        memory_unhealthy_mb: Allocated MB above which memory is unhealthy.
        tasks_degraded: Concurrent unit count above which tasks are degraded.
        tasks_unhealthy: Concurrent unit count above which tasks are unhealthy.
        db_pool_degraded_ratio: Open/max connection ratio above which the
            database is degraded.
    """

    memory_degraded_mb: int = 512
    memory_unhealthy_mb: int = 1024
    tasks_degraded: int = 1000
    tasks_unhealthy: int = 5000
    db_pool_degraded_ratio: float = 0.8

    def __post_init__(self) -> None:
        """Validate threshold ordering."""
        if self.memory_degraded_mb < 1:
            raise ValueError(
                f"memory_degraded_mb must be positive, got {self.memory_degraded_mb}"
            )
        if self.memory_unhealthy_mb <= self.memory_degraded_mb:
            raise ValueError(
                f"memory_unhealthy_mb ({self.memory_unhealthy_mb}) must be greater "
                f"than memory_degraded_mb ({self.memory_degraded_mb})"
            )
        if self.tasks_degraded < 1:
            raise ValueError(
                f"tasks_degraded must be positive, got {self.tasks_degraded}"
            )
        if self.tasks_unhealthy <= self.tasks_degraded:
            raise ValueError(
                f"tasks_unhealthy ({self.tasks_unhealthy}) must be greater "
                f"than tasks_degraded ({self.tasks_degraded})"
            )
        if not 0 < self.db_pool_degraded_ratio <= 1:
            raise ValueError(
                "db_pool_degraded_ratio must be in (0, 1], "
                f"got {self.db_pool_degraded_ratio}"
            )

    @classmethod
    def from_environment(cls) -> HealthThresholds:
        """Create thresholds from environment variables with defaults.

        Returns:
            HealthThresholds with values from environment or defaults.
        """
        return cls(
            memory_degraded_mb=_get_int_env("MEMORY_DEGRADED_MB", 512),
            memory_unhealthy_mb=_get_int_env("MEMORY_UNHEALTHY_MB", 1024),
            tasks_degraded=_get_int_env("TASKS_DEGRADED", 1000),
            tasks_unhealthy=_get_int_env("TASKS_UNHEALTHY", 5000),
            db_pool_degraded_ratio=_get_float_env("DB_POOL_DEGRADED_RATIO", 0.8),
        )


@dataclass(frozen=True)
class ServiceConfig:
    """Top-level service configuration.

    Attributes:
        environment: Deployment environment name.
        service_name: Service name for logs and metric labels.
        version: Version string reported by the health endpoint.
        storage_backend: "memory" or "postgres".
        database_url: PostgreSQL connection string (postgres backend only).
        db_pool_size: Persistent connections kept in the pool.
        db_max_overflow: Connections allowed above db_pool_size, -1 unbounded.
        db_ping_timeout_seconds: Bound on the database health ping.
        sqlalchemy_echo: Whether SQLAlchemy logs emitted SQL.
        auto_create_schema: Whether to create the posts table at startup.
        host: Listener host.
        port: Listener port.
        health_thresholds: Component health classification thresholds.
    """

    environment: str = "development"
    service_name: str = "postservice"
    version: str = __version__
    storage_backend: str = STORAGE_MEMORY
    database_url: str | None = None
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_ping_timeout_seconds: float = 5.0
    sqlalchemy_echo: bool = False
    auto_create_schema: bool = True
    host: str = "0.0.0.0"
    port: int = 8080
    health_thresholds: HealthThresholds = field(default_factory=HealthThresholds)

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"storage_backend must be one of {sorted(STORAGE_BACKENDS)}, "
                f"got {self.storage_backend!r}"
            )
        if self.storage_backend == STORAGE_POSTGRES and not self.database_url:
            raise ValueError("database_url is required for the postgres backend")
        if self.db_pool_size < 1:
            raise ValueError(f"db_pool_size must be positive, got {self.db_pool_size}")
        if self.db_max_overflow < -1:
            raise ValueError(
                f"db_max_overflow must be -1 or greater, got {self.db_max_overflow}"
            )
        if self.db_ping_timeout_seconds <= 0:
            raise ValueError(
                "db_ping_timeout_seconds must be positive, "
                f"got {self.db_ping_timeout_seconds}"
            )
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be in 1..65535, got {self.port}")

    @property
    def is_production(self) -> bool:
        """True when running in the production environment."""
        return self.environment == "production"

    @property
    def uses_database(self) -> bool:
        """True when posts are stored in PostgreSQL."""
        return self.storage_backend == STORAGE_POSTGRES

    @classmethod
    def from_environment(cls) -> ServiceConfig:
        """Create config from environment variables with defaults.

        Returns:
            ServiceConfig with values from environment or defaults.

        Raises:
            ValueError: If the resulting configuration is invalid.
        """
        return cls(
            environment=os.environ.get("ENVIRONMENT", "development"),
            service_name=os.environ.get("SERVICE_NAME", "postservice"),
            version=os.environ.get("SERVICE_VERSION", __version__),
            storage_backend=os.environ.get("STORAGE_BACKEND", STORAGE_MEMORY)
            .strip()
            .lower(),
            database_url=os.environ.get("DATABASE_URL") or None,
            db_pool_size=_get_int_env("DB_POOL_SIZE", 5),
            db_max_overflow=_get_int_env("DB_MAX_OVERFLOW", 10),
            db_ping_timeout_seconds=_get_float_env("DB_PING_TIMEOUT_SECONDS", 5.0),
            sqlalchemy_echo=_get_bool_env("SQLALCHEMY_ECHO", False),
            auto_create_schema=_get_bool_env("AUTO_CREATE_SCHEMA", True),
            host=os.environ.get("HOST", "0.0.0.0"),
            port=_get_int_env("PORT", 8080),
            health_thresholds=HealthThresholds.from_environment(),
        )


# Testing config: in-memory storage, no database
TEST_SERVICE_CONFIG = ServiceConfig(environment="test")
