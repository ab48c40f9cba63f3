# SPDX-License-Identifier: MIT

import sys

import structlog

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


def configure_logging(log_level: str = "warning") -> None:
    """Configure structlog with the specified log level.

    Log lines go to stderr so they never mix with rendered tables.
    """
    if log_level.lower() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level}")
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            min_level=log_level.lower()
        ),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
