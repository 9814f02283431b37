"""Fixtures wiring application handlers to in-memory adapters."""

import pytest
import pytest_asyncio

from domain.record.core.entities import Record, RecordItemInput
from domain.user.core.entities.user import User
from infrastructure.ai.providers import StubAdviceGenerator, StubPfcEstimator
from infrastructure.persistence.in_memory import (
    InMemoryAdviceCacheRepository,
    InMemoryRecordPfcRepository,
    InMemoryRecordRepository,
    InMemorySessionRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def record_repository() -> InMemoryRecordRepository:
    return InMemoryRecordRepository()


@pytest.fixture
def record_pfc_repository(record_repository) -> InMemoryRecordPfcRepository:
    return InMemoryRecordPfcRepository(record_repository)


@pytest.fixture
def advice_cache_repository() -> InMemoryAdviceCacheRepository:
    return InMemoryAdviceCacheRepository()


@pytest.fixture
def transaction_manager(
    user_repository,
    session_repository,
    record_repository,
    record_pfc_repository,
    advice_cache_repository,
) -> InMemoryTransactionManager:
    return InMemoryTransactionManager(
        [
            user_repository,
            session_repository,
            record_repository,
            record_pfc_repository,
            advice_cache_repository,
        ]
    )


@pytest.fixture
def advice_generator() -> StubAdviceGenerator:
    return StubAdviceGenerator()


@pytest.fixture
def pfc_estimator() -> StubPfcEstimator:
    return StubPfcEstimator()


@pytest_asyncio.fixture
async def saved_user(user_repository, user) -> User:
    """Reference user already stored in the repository."""
    await user_repository.save(user)
    return user


@pytest.fixture
def store_record(record_repository, clock):
    """Create and save a record; items are (name, calories) pairs."""

    async def _store(user_id, eaten_at, items) -> Record:
        record = Record.create(
            user_id,
            eaten_at,
            [RecordItemInput(name, calories) for name, calories in items],
            clock=clock,
        )
        await record_repository.save(record)
        return record

    return _store
