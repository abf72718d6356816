import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

PERMISSIONS_POLICY = "fullscreen=(self), geolocation=()"


async def add_permissions_policy(request: Request, call_next):
    """Attach the Permissions-Policy header to every response, unexpected 500s included"""
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        response = JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"}
        )
    response.headers["Permissions-Policy"] = PERMISSIONS_POLICY
    return response
