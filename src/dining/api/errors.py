"""HTTP mapping for the errors Protean's handlers do not know about.

Responses use the same ``{"error": ...}`` body as
``protean.integrations.fastapi.register_exception_handlers``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError

from dining.exceptions import ForbiddenError, ShareCodeConflictError


def register_access_handlers(app: FastAPI) -> None:
    @app.exception_handler(ForbiddenError)
    async def forbidden(_request: Request, exc: ForbiddenError) -> JSONResponse:
        return JSONResponse(status_code=403, content={"error": exc.messages})

    @app.exception_handler(ShareCodeConflictError)
    async def share_code_conflict(_request: Request, exc: ShareCodeConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"error": exc.messages})

    # A concurrent writer saved the aggregate first; the caller can retry
    @app.exception_handler(ExpectedVersionError)
    async def stale_write(_request: Request, exc: ExpectedVersionError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"error": str(exc)})
