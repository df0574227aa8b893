from __future__ import annotations
import logging
from fastapi.responses import JSONResponse
from app.core.errors import AppError, ErrorKind, HTTP_STATUS_BY_KIND

log = logging.getLogger(__name__)


def error_response(err: Exception, operation: str, space_id: str = "-") -> JSONResponse:
    """Log a handled error and turn it into the ``{"error": ...}`` response."""
    extra = {"operation": operation, "space_id": space_id}
    if isinstance(err, AppError) and err.kind != ErrorKind.INTERNAL:
        log.warning("Request rejected: %s", err.message, extra=extra)
        return JSONResponse(status_code=HTTP_STATUS_BY_KIND[err.kind], content={"error": err.message})

    log.error("Request failed: %s", err, exc_info=err, extra=extra)
    return JSONResponse(status_code=500, content={"error": "internal server error"})
