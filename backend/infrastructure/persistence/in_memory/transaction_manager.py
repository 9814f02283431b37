"""In-memory implementation of ITransactionManager."""

import asyncio
from typing import Any, Awaitable, Callable, List, Protocol, Sequence, TypeVar

import structlog

from domain.shared.ports.transaction_manager import ITransactionManager

logger = structlog.get_logger(__name__, layer="infrastructure")

T = TypeVar("T")


class Snapshottable(Protocol):
    def snapshot(self) -> Any:
        ...

    def restore(self, state: Any) -> None:
        ...


class InMemoryTransactionManager(ITransactionManager):
    """
    Transaction manager over in-memory repositories.

    Transactions are serialized with a lock. Before ``work`` runs every
    participating repository is snapshotted; if ``work`` raises, all of
    them are restored and the error is re-raised.

    Example:
        >>> manager = InMemoryTransactionManager([users, records])
        >>> await manager.execute(work)
    """

    def __init__(self, repositories: Sequence[Snapshottable] = ()) -> None:
        self._repositories = list(repositories)
        self._lock = asyncio.Lock()

    async def execute(self, work: Callable[[], Awaitable[T]]) -> T:
        async with self._lock:
            snapshots: List[Any] = [repo.snapshot() for repo in self._repositories]
            try:
                return await work()
            except Exception:
                for repo, state in zip(self._repositories, snapshots):
                    repo.restore(state)
                logger.debug("transaction rolled back", repositories=len(self._repositories))
                raise
