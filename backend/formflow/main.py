"""Application wiring and lifecycle."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from formflow.application.interfaces import SeedLoader, SettingsRepository
from formflow.application.services import (
    AnalyticsService,
    AppSettingsService,
    DomainStore,
    FormBuilderService,
    InvoiceDraftingService,
    StoreBroadcaster,
    bootstrap_store,
)
from formflow.config import Settings, get_settings
from formflow.infrastructure.logging.log_config import setup_logging
from formflow.infrastructure.seed import YamlSeedLoader
from formflow.infrastructure.storage import JsonFileSettingsRepository

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Everything a presentation layer needs, constructed once per process."""

    settings: Settings
    store: DomainStore
    broadcaster: StoreBroadcaster
    app_settings: AppSettingsService
    invoices: InvoiceDraftingService
    form_builder: FormBuilderService
    analytics: AnalyticsService


def build_container(
    settings: Settings,
    settings_repository: SettingsRepository | None = None,
) -> AppContainer:
    store = DomainStore(activity_log_limit=settings.activity_log_limit)
    broadcaster = StoreBroadcaster(queue_size=settings.broadcast_queue_size)
    broadcaster.attach(store)
    app_settings = AppSettingsService(
        settings_repository or JsonFileSettingsRepository(settings.settings_dir)
    )
    return AppContainer(
        settings=settings,
        store=store,
        broadcaster=broadcaster,
        app_settings=app_settings,
        invoices=InvoiceDraftingService(
            store, app_settings, default_currency=settings.default_currency
        ),
        form_builder=FormBuilderService(store, embed_base_url=settings.embed_base_url),
        analytics=AnalyticsService(),
    )


@asynccontextmanager
async def lifespan(
    settings: Settings | None = None,
    *,
    seed_loader: SeedLoader | None = None,
    settings_repository: SettingsRepository | None = None,
) -> AsyncIterator[AppContainer]:
    """Startup: configure logging, wire services, populate the store.

    Shutdown: disconnect broadcast subscribers and close the store.
    """
    settings = settings or get_settings()
    setup_logging(settings)
    logger.info("Starting %s v%s (%s)", settings.app_title, settings.app_version, settings.app_env)

    container = build_container(settings, settings_repository)
    try:
        await bootstrap_store(
            container.store,
            seed_loader or YamlSeedLoader(settings.seed_file),
            delay_seconds=settings.startup_delay_seconds,
        )
        yield container
    finally:
        await container.broadcaster.shutdown()
        container.store.close()
        logger.info("%s stopped", settings.app_title)
