"""Process startup: settings, logging, observability and the DI container."""

from dishka import AsyncContainer
import logfire

from folio.config import Settings
from folio.util.di.container import create_container
from folio.util.logging import setup_logging
from folio.util.observability import configure_logfire


def bootstrap(settings: Settings | None = None) -> AsyncContainer:
    """Configure logging and Logfire, then build the production container.

    Logfire is configured before the container so that engine
    instrumentation finds it ready.

    Args:
        settings: Settings to configure from (loaded from environment if None)

    Returns:
        Production DI container; open a request scope with ``container()``
    """
    settings = settings or Settings()

    setup_logging(settings)
    configure_logfire(settings)

    container = create_container()
    logfire.info("Container created", environment=settings.environment)
    return container
