import logging

from rental_tracker.config import Settings, settings
from rental_tracker.services.rental_directory import RentalDirectory
from rental_tracker.storage import check_data_dir

logger = logging.getLogger(__name__)


def configure_logging(config: Settings | None = None) -> None:
    config = config or settings
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_directory(config: Settings | None = None) -> RentalDirectory:
    """
    Build the directory for one process lifetime and replay its logs.

    Whoever owns the CLI or service lifetime calls this once and passes the
    returned object to the code that needs it.
    """
    config = config or settings
    configure_logging(config)

    ok = check_data_dir(config)
    logger.info("✅ Data directory ready" if ok else "❌ Data directory NOT writable")

    directory = RentalDirectory(config)
    if not directory.load_report.clean:
        logger.warning(f"{config.APP_NAME} started with load errors: {directory.load_report.errors}")
    return directory
