"""Application entry point."""

from collections.abc import Generator
from contextlib import contextmanager

from stockpos.config import Settings, get_settings
from stockpos.state.manager import AppState
from stockpos.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@contextmanager
def lifespan(settings: Settings | None = None) -> Generator[AppState, None, None]:
    """Application lifespan manager."""
    settings = settings or get_settings()
    setup_logging(settings)

    logger.info("application_starting")
    state = AppState(settings)
    state.start()

    try:
        yield state
    finally:
        logger.info("application_shutting_down")
        state.stop()
