from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import logging

from string_analyzer import __version__, config
from string_analyzer.api.routes import router
from string_analyzer.database import JsonFilePersistence, StringStore
from string_analyzer.errors import StringAnalyzerError, InvalidFilterError, InvalidInputError

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(
    store: Optional[StringStore] = None,
    persistence: Optional[JsonFilePersistence] = None,
) -> FastAPI:
    """
    Build the application around a string store.
    Without arguments the store is persisted to config.STRINGS_FILE
    (unless PERSISTENCE_ENABLED is off).
    """
    if store is None:
        if persistence is None and config.PERSISTENCE_ENABLED:
            persistence = JsonFilePersistence(config.STRINGS_FILE)
        store = StringStore(on_mutate=persistence.save if persistence else None)

    app = FastAPI(
        title="String Analyzer Service",
        description="Analyze, store and query string properties",
        version=__version__
    )
    app.state.store = store

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    def on_startup():
        if persistence is not None:
            logger.info(f"Loading strings from {persistence.path}...")
            store.load(persistence.load())

    @app.on_event("shutdown")
    def on_shutdown():
        if persistence is not None:
            logger.info("🧩 Saving before shutdown...")
            persistence.save(store.snapshot())

    app.include_router(router, tags=["strings"])

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": "String Analyzer Service",
            "version": __version__,
            "endpoints": {
                "POST /strings": "Analyze and store a string",
                "GET /strings/{string_value}": "Get specific string analysis",
                "GET /strings": "Get all strings with optional filters",
                "GET /strings/filter-by-natural-language": "Filter using natural language",
                "DELETE /strings/{string_value}": "Delete a string",
                "GET /docs": "API documentation"
            }
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "strings": len(store)}

    register_exception_handlers(app)
    return app


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StringAnalyzerError)
    async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
        logger.info(f"{request.method} {request.url.path} -> {exc.kind}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    # Validation error handler
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = {}
        for error in exc.errors():
            field = error['loc'][-1]
            errors[field] = error['msg']

        # Bad query parameters on the listing endpoint are bad filters
        query_error = any(error['loc'][0] == "query" for error in exc.errors())
        if query_error and request.url.path == "/strings":
            err = InvalidFilterError("Invalid query parameter values or types")
        else:
            err = InvalidInputError("Invalid request body or missing 'value' field")

        content = err.to_dict()
        content["details"] = errors
        return JSONResponse(status_code=err.status_code, content=content)

    # HTTPException handler
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if isinstance(exc.detail, dict) and 'error' in exc.detail:
            return JSONResponse(status_code=exc.status_code, content=exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)}
        )

    # Generic error handler
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {str(exc)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error"
            }
        )


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host="0.0.0.0", port=config.PORT, reload=True)
