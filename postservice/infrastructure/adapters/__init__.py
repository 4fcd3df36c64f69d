"""Infrastructure adapters for postservice.

Adapters implement the ports defined in the application layer,
providing concrete implementations for storage and database probing.
"""

__all__: list[str] = []
