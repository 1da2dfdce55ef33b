"""Activate endpoint: redeems an activation code and sets the first password."""

from fastapi import APIRouter, Request, Response, status

from jwtgate.adapters.api.v1.auth.schemas import ActivateRequest
from jwtgate.adapters.api.v1.auth.utils import bind_request_logger
from jwtgate.infrastructure.dependency_injection.auth_dependencies import WorkflowDep

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Activate an account",
    responses={
        200: {"description": "Account activated"},
        404: {"description": "Unknown or already used activation code"},
        422: {"description": "Password rejected by policy"},
    },
)
async def activate(request: Request, payload: ActivateRequest, workflow: WorkflowDep) -> Response:
    request_logger, correlation_id = bind_request_logger(request, "activate")
    request_logger.info("Activation requested")

    await workflow.activate(payload.activation_code, payload.password, correlation_id=correlation_id)

    request_logger.info("Activation completed")
    return Response(status_code=status.HTTP_200_OK)
