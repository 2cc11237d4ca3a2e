"""FastAPI dependencies for the gateway."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from .service import GatewayError, GatewayService


async def get_gateway_service(request: Request) -> GatewayService:
    """Get the gateway service from app state.

    Args:
        request: FastAPI request

    Returns:
        GatewayService instance
    """
    service = getattr(request.app.state, "gateway_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Gateway service not available",
        )
    return service


GatewayServiceDep = Annotated[GatewayService, Depends(get_gateway_service)]


def handle_gateway_error(error: GatewayError) -> HTTPException:
    """Convert gateway errors to HTTP exceptions.

    Args:
        error: Gateway error

    Returns:
        HTTPException with appropriate status code
    """
    status_map = {
        "content_rejected": status.HTTP_400_BAD_REQUEST,
        "upstream_unavailable": status.HTTP_502_BAD_GATEWAY,
        "persistence_failed": status.HTTP_500_INTERNAL_SERVER_ERROR,
    }

    status_code = status_map.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return HTTPException(
        status_code=status_code,
        detail=error.message,
    )
