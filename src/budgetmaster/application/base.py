"""Common base for handlers that need the store."""

from __future__ import annotations

from budgetmaster.domain.repository.storage import StorageHandle


class StorageBoundHandler:
    """Checks the store once, when the handler is built.

    Raises StorageUnavailableError from the constructor so an unreachable
    database is reported before any input is processed.
    """

    def __init__(self, storage: StorageHandle) -> None:
        storage.ensure_ready()
        self._storage = storage
