"""Reset password endpoint: consumes a reset ticket and sets a new password."""

from fastapi import APIRouter, Request, Response, status

from jwtgate.adapters.api.v1.auth.schemas import CompletePasswordResetRequest
from jwtgate.adapters.api.v1.auth.utils import bind_request_logger
from jwtgate.infrastructure.dependency_injection.auth_dependencies import WorkflowDep

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Complete a password reset",
    responses={
        200: {"description": "Password replaced"},
        404: {"description": "Unknown, expired or already used ticket"},
        422: {"description": "Password rejected by policy; every failure is listed"},
    },
)
async def reset_password(
    request: Request, payload: CompletePasswordResetRequest, workflow: WorkflowDep
) -> Response:
    request_logger, correlation_id = bind_request_logger(request, "reset_password")
    request_logger.info("Password reset completion requested")

    await workflow.complete_password_reset(
        payload.ticket_code, payload.password, correlation_id=correlation_id
    )

    request_logger.info("Password reset completion succeeded")
    return Response(status_code=status.HTTP_200_OK)
