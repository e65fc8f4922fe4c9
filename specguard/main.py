import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from specguard import __version__
from specguard.api.analysis import router as analysis_api_router
from specguard.api.errors import error_response
from specguard.api.gate import router as gate_api_router
from specguard.api.specs import router as specs_api_router
from specguard.core.config import config
from specguard.core.errors import (
    GateConfigError,
    SpecCompilationError,
    SpecFormatError,
    SpecGuardError,
    SpecNotFoundError,
)
from specguard.core.utils.logging import configure_logging

# --- Application Setup ---

configure_logging(config.logging)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title="SpecGuard",
    description="Natural-language code quality rules, compiled and enforced.",
    version=__version__,
    debug=config.debug,
)

# --- CORS Configuration ---

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.methods,
    allow_headers=config.cors.headers,
)

# --- Include Routers ---

app.include_router(analysis_api_router, prefix="/api/v1", tags=["Analysis API"])
app.include_router(specs_api_router, prefix="/api/v1", tags=["Specification API"])
app.include_router(gate_api_router, prefix="/api/v1", tags=["Quality Gate API"])

# --- Error Handlers ---

ERROR_STATUS: dict[type[SpecGuardError], tuple[int, str]] = {
    SpecNotFoundError: (status.HTTP_404_NOT_FOUND, "spec_not_found"),
    SpecFormatError: (status.HTTP_400_BAD_REQUEST, "invalid_spec_format"),
    GateConfigError: (status.HTTP_400_BAD_REQUEST, "invalid_gate_config"),
    SpecCompilationError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "compilation_failed"),
}


@app.exception_handler(SpecGuardError)
async def handle_specguard_error(request: Request, exc: SpecGuardError) -> JSONResponse:
    status_code, code = ERROR_STATUS.get(type(exc), (status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error"))
    details = exc.to_details() if isinstance(exc, GateConfigError) else None
    logger.warning("request_failed", path=request.url.path, code=code, error=str(exc))
    return error_response(status_code, code=code, message=str(exc), details=details)


# --- Root Endpoint ---


@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the service is running."""
    return {
        "status": "ok",
        "message": "SpecGuard is running.",
        "version": __version__,
        "environment": config.environment,
    }
