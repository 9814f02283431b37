"""Dependency wiring: adapters and handlers built from Settings."""

from dataclasses import dataclass
from typing import Optional

import structlog

from application.auth.commands.login import LoginHandler
from application.auth.commands.logout import LogoutHandler
from application.auth.queries.authenticate_session import AuthenticateSessionQueryHandler
from application.nutrition.queries.get_advice import GetAdviceQueryHandler
from application.nutrition.queries.get_today_pfc import GetTodayPfcQueryHandler
from application.record.commands.create_record import CreateRecordHandler
from application.record.queries.analyze_image import AnalyzeImageQueryHandler
from application.record.queries.get_statistics import GetStatisticsQueryHandler
from application.record.queries.get_today_records import GetTodayRecordsQueryHandler
from application.user.commands.register_user import RegisterUserHandler
from application.user.commands.update_profile import UpdateProfileHandler
from application.user.queries.get_user import GetUserQueryHandler
from domain.advice.core.ports.advice_generator import IAdviceGenerator
from domain.record.core.ports.image_analyzer import IImageAnalyzer
from domain.record.core.ports.pfc_estimator import IPfcEstimator
from domain.shared.clock import Clock, SystemClock
from domain.user.core.value_objects.password import BcryptPasswordHasher
from infrastructure.ai.providers.factory import create_ai_providers
from infrastructure.config import Settings
from infrastructure.logging_config import configure_logging
from infrastructure.persistence.in_memory import (
    InMemoryAdviceCacheRepository,
    InMemoryRecordPfcRepository,
    InMemoryRecordRepository,
    InMemorySessionRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
)

logger = structlog.get_logger(__name__, layer="infrastructure")


@dataclass(frozen=True)
class Container:
    """Every adapter and handler of one application instance."""

    settings: Settings
    clock: Clock
    user_repository: InMemoryUserRepository
    record_repository: InMemoryRecordRepository
    record_pfc_repository: InMemoryRecordPfcRepository
    session_repository: InMemorySessionRepository
    advice_cache_repository: InMemoryAdviceCacheRepository
    transaction_manager: InMemoryTransactionManager
    advice_generator: IAdviceGenerator
    pfc_estimator: IPfcEstimator
    image_analyzer: IImageAnalyzer

    register_user: RegisterUserHandler
    update_profile: UpdateProfileHandler
    get_user: GetUserQueryHandler
    login: LoginHandler
    logout: LogoutHandler
    authenticate_session: AuthenticateSessionQueryHandler
    create_record: CreateRecordHandler
    get_today_records: GetTodayRecordsQueryHandler
    get_statistics: GetStatisticsQueryHandler
    get_today_pfc: GetTodayPfcQueryHandler
    get_advice: GetAdviceQueryHandler
    analyze_image: AnalyzeImageQueryHandler


def build_container(
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
    advice_generator: Optional[IAdviceGenerator] = None,
    pfc_estimator: Optional[IPfcEstimator] = None,
    image_analyzer: Optional[IImageAnalyzer] = None,
) -> Container:
    """
    Configure logging, then build in-memory adapters and all handlers.

    Args:
        settings: Defaults to ``Settings.from_env()``
        clock: Defaults to the system clock in ``settings.timezone``
        advice_generator: Overrides the provider chosen by settings
        pfc_estimator: Overrides the provider chosen by settings
        image_analyzer: Overrides the provider chosen by settings

    Example:
        >>> container = build_container(Settings(bcrypt_rounds=4))
        >>> user = await container.register_user.handle(command)
    """
    settings = settings or Settings.from_env()
    configure_logging(settings)
    clock = clock or SystemClock(tz=settings.tzinfo())

    if advice_generator is None or pfc_estimator is None or image_analyzer is None:
        default_generator, default_estimator, default_analyzer = create_ai_providers(settings)
        advice_generator = advice_generator or default_generator
        pfc_estimator = pfc_estimator or default_estimator
        image_analyzer = image_analyzer or default_analyzer

    hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)

    users = InMemoryUserRepository()
    records = InMemoryRecordRepository()
    record_pfcs = InMemoryRecordPfcRepository(records)
    sessions = InMemorySessionRepository()
    advice_caches = InMemoryAdviceCacheRepository()
    transaction_manager = InMemoryTransactionManager(
        [users, records, record_pfcs, sessions, advice_caches]
    )

    logger.info(
        "container built",
        ai_provider=settings.ai_provider,
        timezone=settings.timezone,
    )

    return Container(
        settings=settings,
        clock=clock,
        user_repository=users,
        record_repository=records,
        record_pfc_repository=record_pfcs,
        session_repository=sessions,
        advice_cache_repository=advice_caches,
        transaction_manager=transaction_manager,
        advice_generator=advice_generator,
        pfc_estimator=pfc_estimator,
        image_analyzer=image_analyzer,
        register_user=RegisterUserHandler(users, transaction_manager, hasher, clock),
        update_profile=UpdateProfileHandler(users, transaction_manager, clock),
        get_user=GetUserQueryHandler(users),
        login=LoginHandler(users, sessions, transaction_manager, hasher, clock),
        logout=LogoutHandler(sessions, transaction_manager),
        authenticate_session=AuthenticateSessionQueryHandler(sessions, clock),
        create_record=CreateRecordHandler(
            records,
            record_pfcs,
            advice_caches,
            transaction_manager,
            pfc_estimator,
            clock,
        ),
        get_today_records=GetTodayRecordsQueryHandler(users, records, clock),
        get_statistics=GetStatisticsQueryHandler(users, records, clock),
        get_today_pfc=GetTodayPfcQueryHandler(users, record_pfcs, clock),
        get_advice=GetAdviceQueryHandler(
            users,
            records,
            record_pfcs,
            advice_caches,
            advice_generator,
            clock,
        ),
        analyze_image=AnalyzeImageQueryHandler(image_analyzer),
    )
