"""Helpers shared by the authentication routes."""

import uuid
from typing import Tuple

import structlog
from fastapi import Request

from jwtgate.core.logging import mask_ip_address

logger = structlog.get_logger("jwtgate.adapters.api.v1.auth")


def bind_request_logger(request: Request, endpoint: str) -> Tuple[structlog.stdlib.BoundLogger, str]:
    """Returns a logger bound to a fresh correlation id, and that id.

    The correlation id is passed on to the workflow so route, workflow and
    event records of one request can be joined.
    """
    correlation_id = str(uuid.uuid4())
    client_ip = request.client.host if request.client else ""
    request_logger = logger.bind(
        correlation_id=correlation_id,
        client_ip=mask_ip_address(client_ip),
        endpoint=endpoint,
    )
    return request_logger, correlation_id
