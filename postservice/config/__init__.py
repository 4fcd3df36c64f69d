"""Configuration module for postservice.

Available Configurations:
- ServiceConfig: Storage backend, database pool, listener, versioning
- HealthThresholds: Component health classification ladders
"""

from postservice.config.service_config import (
    STORAGE_MEMORY,
    STORAGE_POSTGRES,
    TEST_SERVICE_CONFIG,
    HealthThresholds,
    ServiceConfig,
)

__all__ = [
    "HealthThresholds",
    "ServiceConfig",
    "STORAGE_MEMORY",
    "STORAGE_POSTGRES",
    "TEST_SERVICE_CONFIG",
]
