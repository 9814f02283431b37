"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.advice_cache_repository import (
    InMemoryAdviceCacheRepository,
)
from infrastructure.persistence.in_memory.record_pfc_repository import (
    InMemoryRecordPfcRepository,
)
from infrastructure.persistence.in_memory.record_repository import (
    InMemoryRecordRepository,
)
from infrastructure.persistence.in_memory.session_repository import (
    InMemorySessionRepository,
)
from infrastructure.persistence.in_memory.transaction_manager import (
    InMemoryTransactionManager,
)
from infrastructure.persistence.in_memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryAdviceCacheRepository",
    "InMemoryRecordPfcRepository",
    "InMemoryRecordRepository",
    "InMemorySessionRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]
