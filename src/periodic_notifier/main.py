"""FastAPI application bootstrap."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from .api import api_router
from .core.config import get_settings
from .core.logging import NOTIFIER_LOGGER, configure_logging
from .core.schedule import parse_schedule
from .core.scheduler import AppScheduler
from .services.notifier import PeriodicNotifier


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown hooks."""

    settings = get_settings()
    configure_logging(settings.log_level)

    schedule = parse_schedule(settings.notifier_schedule)
    scheduler = AppScheduler.from_schedule(
        schedule, run_on_startup=settings.notifier_run_on_startup
    )
    notifier = PeriodicNotifier(
        logging.getLogger(NOTIFIER_LOGGER),
        message_prefix=settings.notifier_message_prefix,
    )
    scheduler.register(notifier.on_tick)
    await scheduler.start()
    logger.info("Notifier registered with schedule %r", schedule.expression)

    app.state.settings = settings
    app.state.schedule = schedule
    app.state.scheduler = scheduler

    try:
        yield
    finally:
        await scheduler.shutdown()


def create_app() -> FastAPI:
    """Create and configure a FastAPI application instance."""

    settings = get_settings()
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.include_router(api_router, prefix="/api")
    return application


app = create_app()
