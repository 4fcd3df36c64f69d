"""Database adapters."""

from postservice.infrastructure.adapters.database.sqlalchemy_database_probe import (
    SqlAlchemyDatabaseProbe,
)

__all__: list[str] = ["SqlAlchemyDatabaseProbe"]
