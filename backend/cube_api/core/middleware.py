from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from cube_api.api.dto.response_format import ErrorResponse


class MaxBodySizeMiddleware(BaseHTTPMiddleware):
    """Rejette (413) les requêtes dont le Content-Length dépasse `max_body_size` octets."""

    def __init__(self, app, max_body_size: int):
        super().__init__(app)
        self.max_body_size = max_body_size

    async def dispatch(self, request, call_next):
        cl = request.headers.get("content-length")
        if cl is not None:
            try:
                too_large = int(cl) > self.max_body_size
            except ValueError:
                # Content-Length invalide → on laisse passer, la validation du corps tranchera
                too_large = False
            if too_large:
                return JSONResponse(
                    ErrorResponse.from_detail(
                        f"Request body too large (>{self.max_body_size} bytes)",
                        code="HTTP_413",
                    ).model_dump(),
                    status_code=413,
                )
        return await call_next(request)
