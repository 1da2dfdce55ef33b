"""Password reset request endpoint.

Always answers 200 with an empty body, whether or not the email belongs to an
account, so the endpoint cannot be used to enumerate users.
"""

from fastapi import APIRouter, Request, Response, status

from jwtgate.adapters.api.v1.auth.schemas import RequestPasswordResetRequest
from jwtgate.adapters.api.v1.auth.utils import bind_request_logger
from jwtgate.core.logging import mask_email
from jwtgate.infrastructure.dependency_injection.auth_dependencies import WorkflowDep

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Request a password reset",
    responses={200: {"description": "Reset mail sent if the email is registered"}},
)
async def request_password_reset(
    request: Request, payload: RequestPasswordResetRequest, workflow: WorkflowDep
) -> Response:
    request_logger, correlation_id = bind_request_logger(request, "request_password_reset")
    request_logger.info("Password reset requested", email=mask_email(payload.email))

    await workflow.request_password_reset(payload.email, correlation_id=correlation_id)

    return Response(status_code=status.HTTP_200_OK)
