"""
Command-line entry point.

Takes no arguments; paths and the home coordinate come from FANCYWALKS_*
environment variables or a .env file.
"""

import logging

from fancywalks.core.config import get_settings
from fancywalks.core.errors import FancyWalksException
from fancywalks.core.logging_config import setup_logging
from fancywalks.core.pipeline import run_pipeline

logger = logging.getLogger(__name__)


def main() -> int:
    """
    Run the walk export.

    Returns:
        Process exit status: 0 on success, the error's exit code on failure
    """
    try:
        settings = get_settings()
    except FancyWalksException as e:
        setup_logging()
        logger.error(str(e))
        return e.exit_code

    setup_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        json_logs=settings.json_logs,
        environment=settings.environment,
    )

    try:
        run_pipeline(settings)
    except FancyWalksException as e:
        logger.error(str(e), extra={"error": e.to_dict()})
        for suggestion in e.suggestions:
            logger.error(f"  - {suggestion}")
        return e.exit_code

    return 0
