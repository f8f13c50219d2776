import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


# ============================================================================
# Domain errors
# ============================================================================

class GuidebookError(Exception):
    """Base class for errors raised by the guidebook core."""
    code = "guidebook_error"


class InvalidRoleError(GuidebookError, ValueError):
    """A role outside the closed Role enumeration was supplied."""
    code = "invalid_role"


class InvalidInputError(GuidebookError, ValueError):
    """Malformed input (unparseable date, empty identifier...)."""
    code = "invalid_input"


# ============================================================================
# HTTP mapping
# ============================================================================

def _normalize_errors(errs):
    norm = []
    for e in errs:
        e = dict(e)
        val = e.get("input")
        if isinstance(val, (bytes, bytearray)):
            e["input"] = val.decode("utf-8", errors="ignore")
        # ctx may carry exception instances, which are not JSON serializable
        if "ctx" in e:
            e["ctx"] = {k: str(v) for k, v in e["ctx"].items()}
        norm.append(e)
    return norm


def install_error_handlers(app: FastAPI):
    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"error": "validation_error", "detail": _normalize_errors(exc.errors())},
        )

    @app.exception_handler(GuidebookError)
    async def guidebook_handler(request: Request, exc: GuidebookError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=422, content={"error": exc.code, "detail": str(exc)})

    @app.exception_handler(IntegrityError)
    async def integrity_handler(request: Request, exc: IntegrityError):
        return JSONResponse(status_code=409, content={"error": "conflict", "detail": str(exc.orig)})
