"""
PURPOSE: Structured logging for the parity engine.

Every engine module binds a logger named after its area and file
("predictors.pattern", "engine.fusion", "storage.json_store", ...) and logs
snake_case events with key-value context, e.g. model_failed,
monte_carlo_gate_rejected, value_table_updated. Per-cycle detail goes to
debug, learned-state changes and decisions to info, fallbacks to warning and
store failures to error. Hosts call setup_logging(settings.LOG_LEVEL) once at
startup; the engine itself never configures logging.
"""

import logging

import structlog


def setup_logging(log_level: str = "INFO") -> None:
    """
    PURPOSE: Render engine events as one JSON object per line on stdout.

    Events below log_level are dropped before rendering.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to "INFO".
    """
    level = getattr(logging, log_level.strip().upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(module_name: str) -> structlog.BoundLogger:
    """
    PURPOSE: Return a bound logger with module context for structured logging.

    Args:
        module_name: "<area>.<module>" of the caller, e.g. "engine.fusion".

    Returns:
        structlog.BoundLogger: Logger instance with module context bound.
    """
    return structlog.get_logger().bind(module=module_name)
