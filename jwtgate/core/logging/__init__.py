"""
Logging configuration module for structured logging.

This module configures the application's logging system using structlog,
with JSON output for production and human-readable console output for
development. Request-scoped values bound through ``structlog.contextvars``
are merged into every record.
"""

import logging

import structlog


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configures the application's logging system.

    Sets up structlog with:
    1. Context variables merged into each event
    2. Log level inclusion
    3. ISO format timestamps
    4. JSON rendering when ``json_logs`` is set, console rendering otherwise
    5. Standard library logger factory and bound logger
    """
    logging.basicConfig(format="%(message)s", level=log_level.upper())

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def mask_email(email: str) -> str:
    """Masks the local part of an email address for logging."""
    if not email or "@" not in email:
        return "***"
    local, domain = email.split("@", 1)
    return f"{local[:3]}***@{domain}"


def mask_code(code: str) -> str:
    """Returns only the first characters of a one-time code for logging."""
    if not code:
        return "none"
    return f"{code[:4]}***"


def mask_ip_address(ip_address: str) -> str:
    """Masks the last octet (IPv4) or last segment (IPv6) of a client address."""
    if not ip_address:
        return "[unknown]"
    if "." in ip_address:
        parts = ip_address.split(".")
        if len(parts) == 4:
            return f"{parts[0]}.{parts[1]}.{parts[2]}.***"
    if ":" in ip_address:
        return ip_address.rsplit(":", 1)[0] + ":***"
    return ip_address[:8] + "***"
