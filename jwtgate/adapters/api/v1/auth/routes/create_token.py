"""Token endpoint: exchanges credentials for a full and a lightweight JWT.

Both tokens share one expiry. The full token carries the user's role claims;
the lightweight one carries identity only, for callers that must keep
headers small.
"""

from fastapi import APIRouter, Request, status

from jwtgate.adapters.api.v1.auth.schemas import CreateTokenRequest, TokenResponse
from jwtgate.adapters.api.v1.auth.utils import bind_request_logger
from jwtgate.core.logging import mask_email
from jwtgate.infrastructure.dependency_injection.auth_dependencies import WorkflowDep

router = APIRouter()


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Create tokens",
    responses={
        401: {"description": "Invalid username or password"},
        403: {"description": "Account is inactive or locked"},
    },
)
async def create_token(
    request: Request, payload: CreateTokenRequest, workflow: WorkflowDep
) -> TokenResponse:
    request_logger, correlation_id = bind_request_logger(request, "create_token")
    request_logger.info("Token creation requested", username=mask_email(payload.username))

    grant = await workflow.create_token(
        payload.username, payload.password, correlation_id=correlation_id
    )

    request_logger.info("Token creation completed", expires_at=grant.expires_at.isoformat())
    return TokenResponse.from_grant(grant)
