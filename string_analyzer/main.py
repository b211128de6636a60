from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import logging
import time

from string_analyzer import __version__
from string_analyzer.api.routes import router
from string_analyzer.config import Settings, get_settings
from string_analyzer.errors import InternalError, InvalidTypeError, StringAnalyzerError
from string_analyzer.store import StringStore

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(settings: Optional[Settings] = None, store: Optional[StringStore] = None) -> FastAPI:
    """Build the API around a store; a fresh, empty store is created when none is given."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="String Analyzer Service",
        description="Analyze, store and query string properties",
        version=__version__
    )
    app.state.store = store if store is not None else StringStore()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
        )
        return response

    app.include_router(router, tags=["strings"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": "String Analyzer Service",
            "version": __version__,
            "endpoints": {
                "POST /strings": "Analyze and store a string",
                "GET /strings/{string_value}": "Get specific string analysis",
                "GET /strings": "Get all strings with optional filters",
                "GET /strings/filter-by-natural-language": "Filter using natural language",
                "DELETE /strings/{string_value}": "Delete a string"
            }
        }

    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint"""
        return {"status": "healthy", "strings": request.app.state.store.count()}

    register_exception_handlers(app)
    return app


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(StringAnalyzerError)
    async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
        if isinstance(exc, InternalError):
            logger.error(f"Internal error on {request.method} {request.url.path}: {exc.message}", exc_info=exc)
            return JSONResponse(
                status_code=exc.status_code,
                content={"error": InternalError.default_message}
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message}
        )

    # Missing/empty value -> 400, value of the wrong type -> 422
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = {}
        wrong_type = False
        for error in exc.errors():
            field = str(error['loc'][-1]) if error.get('loc') else 'body'
            errors[field] = error['msg']
            if error.get('type') == 'string_type':
                wrong_type = True

        if wrong_type:
            return JSONResponse(
                status_code=InvalidTypeError.status_code,
                content={"error": InvalidTypeError.default_message, "details": errors}
            )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request body or missing 'value' field",
                "details": errors
            }
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"}
        )


app = create_app()


def run() -> None:
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "string_analyzer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
