"""Logging configuration for tasksync."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

# Third-party loggers that repeat what RemoteClient already logs per request
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure logging based on verbosity level and optional file output.

    Remote fallbacks are logged at WARNING, request timings at INFO and
    not-found no-ops at DEBUG, so ``-v`` shows every remote call and
    ``-vv`` also shows cache reads and writes.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    if verbose == 0 and log_file is None:
        # Stay silent; CLI output goes through cli.output
        return

    # A log file without -v still records INFO
    level = logging.DEBUG if verbose >= 2 else logging.INFO

    logger = logging.getLogger("tasksync")
    logger.setLevel(level)

    # httpx logs every request at INFO; keep only its warnings
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # timestamp - module - level - message
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if verbose > 0:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Startup delimiter, so runs appended to one log file stay apart
    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("=" * 60)
    logger.info("tasksync starting | %s | level=%s", timestamp, logging.getLevelName(level))
    logger.info("=" * 60)
