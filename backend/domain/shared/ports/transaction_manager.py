"""Transaction manager port.

Application handlers that write more than one aggregate wrap the
writes in ``execute`` so they commit or roll back together.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

T = TypeVar("T")


class ITransactionManager(ABC):
    """Unit of work boundary."""

    @abstractmethod
    async def execute(self, work: Callable[[], Awaitable[T]]) -> T:
        """Run ``work`` inside one transaction.

        Commits when ``work`` returns, rolls back and re-raises when it
        raises.

        Example:
            >>> async def work() -> None:
            ...     await record_repository.save(record)
            ...     await record_pfc_repository.save(record_pfc)
            >>> await transaction_manager.execute(work)
        """
        pass
