import random
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from app.modules.access_sentinel.analytics import BehaviorPatternEngine
from app.modules.access_sentinel.application.services import AccessSentinelService
from app.modules.access_sentinel.config import (
    AlertStreamConfig,
    BehaviorScoringConfig,
    TravelTimeModel,
)
from app.modules.access_sentinel.detection import TravelFeasibilityAnalyzer
from app.modules.access_sentinel.repositories import (
    AccessEventRepository,
    AccessEventRepositoryFactory,
    ReferenceRegistry,
)
from app.modules.access_sentinel.settings import (
    InMemorySettingsStore,
    JsonFileSettingsStore,
    SettingsManager,
    SettingsStore,
)
from app.modules.access_sentinel.streaming import AlertStreamProcessor, SyntheticAlertSource
from app.modules.access_sentinel.utils import DateTimeService


@dataclass
class Container:
    registry: ReferenceRegistry
    settings_manager: SettingsManager
    event_repository: AccessEventRepository
    travel_analyzer: TravelFeasibilityAnalyzer
    behavior_engine: BehaviorPatternEngine
    alert_stream: AlertStreamProcessor
    service: AccessSentinelService


def build_container(
    event_repository: AccessEventRepository | None = None,
    registry: ReferenceRegistry | None = None,
    settings_store: SettingsStore | None = None,
    stream_config: AlertStreamConfig | None = None,
    feed_seed: int | None = None,
    travel_model: TravelTimeModel | None = None,
    scoring_config: BehaviorScoringConfig | None = None,
    clock: Callable[[], datetime] = DateTimeService.utc_now,
) -> Container:
    """Wire the object graph; defaults give the hospital catalog and a synthetic log"""
    registry = registry or ReferenceRegistry.default()
    stream_config = stream_config or AlertStreamConfig()
    settings_manager = SettingsManager(settings_store or InMemorySettingsStore())
    event_repository = event_repository or AccessEventRepositoryFactory.create_repository(
        "synthetic", registry=registry, clock=clock
    )

    feed = None
    if stream_config.feed_enabled:
        feed = SyntheticAlertSource(
            registry, stream_config.feed, rng=random.Random(feed_seed), clock=clock
        )
    alert_stream = AlertStreamProcessor(
        registry, capacity=stream_config.capacity, feed=feed, clock=clock
    )

    travel_analyzer = TravelFeasibilityAnalyzer(registry, settings_manager, travel_model)
    behavior_engine = BehaviorPatternEngine(registry, scoring_config, clock)
    service = AccessSentinelService(
        event_repository, travel_analyzer, behavior_engine, alert_stream, settings_manager, clock
    )

    return Container(
        registry=registry,
        settings_manager=settings_manager,
        event_repository=event_repository,
        travel_analyzer=travel_analyzer,
        behavior_engine=behavior_engine,
        alert_stream=alert_stream,
        service=service,
    )


def get_container() -> Container:
    """Get container configured from the application settings"""
    from app import config

    registry = ReferenceRegistry.default()
    if config.ACCESS_EVENT_SOURCE == "csv":
        repository = AccessEventRepositoryFactory.create_csv_repository(config.ACCESS_EVENTS_CSV_PATH)
    else:
        repository = AccessEventRepositoryFactory.create_synthetic_repository(
            registry, count=config.SYNTHETIC_EVENT_COUNT, seed=config.SYNTHETIC_SEED
        )

    store = (
        JsonFileSettingsStore(config.SETTINGS_FILE_PATH)
        if config.SETTINGS_FILE_PATH
        else InMemorySettingsStore()
    )

    return build_container(
        event_repository=repository,
        registry=registry,
        settings_store=store,
        stream_config=AlertStreamConfig(
            capacity=config.ALERT_BUFFER_CAPACITY, feed_enabled=config.ALERT_FEED_ENABLED
        ),
        feed_seed=config.ALERT_FEED_SEED,
    )
