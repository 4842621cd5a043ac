import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from exceptions import PaletteError
from security.auth import authenticate, require_write_access


class SecurityMiddleware(BaseHTTPMiddleware):
    """Combined middleware for auth and request ID.

    Order of operations per request:
    1. Inject request ID (UUID)
    2. Authenticate (check Bearer token)
    3. Require authentication for preset mutations (when API_KEY is set)
    4. Process request
    5. Add X-Request-ID to response
    """

    async def dispatch(self, request: Request, call_next):
        # 1. Request ID
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        try:
            # 2. Authentication
            is_authenticated = authenticate(request)
            request.state.is_authenticated = is_authenticated

            # 3. Write access
            require_write_access(request.method, is_authenticated)

            # 4. Process request
            response = await call_next(request)

        except PaletteError as exc:
            response = JSONResponse(
                status_code=exc.status_code,
                content={
                    "success": False,
                    "error": exc.error_code,
                    "message": exc.message,
                    **exc.details,
                },
            )

        # 5. Request ID header
        response.headers["X-Request-ID"] = request_id
        return response
