"""Parliamentary initiative analytics."""

from loguru import logger

# Silent as a library; settings.logging.setup_logging() turns the package logs on.
logger.disable("app")
