import sys
import os
from pathlib import Path
from loguru import logger

# Flag to track if logging has been configured
_logging_configured = False

LOG_DIR_NAME = ".sizeguard/logs"


def setup_logging(level=None, suppress_console=None, enable_file_logging=None, force=False):
    """
    Configures the global logger.

    By default, only console logging is enabled. File logging is opt-in via
    SIZEGUARD_FILE_LOGGING=1 environment variable or enable_file_logging=True.

    Args:
        level: Logging level. If None, check SIZEGUARD_LOG_LEVEL env var (default: INFO)
        suppress_console: If True, suppress console logging. If None, check SIZEGUARD_MACHINE_MODE env var.
        enable_file_logging: If True, enable file logging. If None, check SIZEGUARD_FILE_LOGGING env var.
        force: Reconfigure even if logging was already set up. The CLI uses this to
            switch the import-time setup to machine mode or --verbose.
    """
    global _logging_configured

    # Only configure once to avoid duplicate handlers
    if _logging_configured and not force:
        return
    _logging_configured = True

    logger.remove()

    if level is None:
        level = os.getenv("SIZEGUARD_LOG_LEVEL", "INFO").upper()

    if suppress_console is None:
        suppress_console = os.getenv("SIZEGUARD_MACHINE_MODE", "").lower() in ("1", "true", "yes")

    # Stream 1: Human-readable console output (only if not suppressed)
    if not suppress_console:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True
        )

    # Stream 2: File logging is opt-in only
    if enable_file_logging is None:
        enable_file_logging = os.getenv("SIZEGUARD_FILE_LOGGING", "").lower() in ("1", "true", "yes")

    if enable_file_logging:
        log_dir = Path(os.getenv("SIZEGUARD_LOG_DIR", LOG_DIR_NAME))
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "sizeguard.log",
            level="INFO",
            rotation="10 MB",
            retention="7 days",
            compression="gz",
            catch=True,
            serialize=False
        )


# Configure the logger on import (will check env var for machine mode)
setup_logging()
