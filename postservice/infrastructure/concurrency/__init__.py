"""Concurrency primitives for infrastructure adapters."""

from postservice.infrastructure.concurrency.read_write_lock import AsyncReadWriteLock

__all__: list[str] = ["AsyncReadWriteLock"]
