from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import time

from string_analyzer import config
from string_analyzer.database import init_db
from string_analyzer.errors import ErrorKind, StringAnalyzerError
from string_analyzer.routes import router

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="String Analyzer Service",
    description="Analyze strings and store their properties keyed by SHA-256 hash",
    version="1.0.0"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}

ERROR_STATUS = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_QUERY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICTING_FILTERS: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
    return response


# Load the store on startup
@app.on_event("startup")
def on_startup():
    logger.info("Loading string store...")
    store = init_db()
    logger.info(f"String store ready at {store.path}")

    if config.DEBUG_ROUTES:
        for route in app.routes:
            methods = ",".join(sorted(getattr(route, "methods", None) or []))
            logger.info(f"Registered route: [{methods}] {route.path}")


# Include routers
app.include_router(router, tags=["strings"])


# Root endpoint
@app.get("/")
def root():
    return {
        "message": "String Analyzer Service",
        "version": "1.0.0",
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
    return {"status": "healthy"}


# Service error handler
@app.exception_handler(StringAnalyzerError)
async def service_exception_handler(request: Request, exc: StringAnalyzerError):
    status_code = ERROR_STATUS.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    if status_code >= 500:
        logger.error(f"{exc.kind.value}: {exc.message}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


# Validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    status_code = status.HTTP_400_BAD_REQUEST
    for error in exc.errors():
        field = error['loc'][-1]
        errors[field] = error['msg']
        # "value" present but not a string
        if error['loc'][0] == 'body' and error['type'] == 'string_type':
            status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    return JSONResponse(
        status_code=status_code,
        content={
            "error": "Validation failed",
            "kind": ErrorKind.INVALID_INPUT.value,
            "details": errors
        }
    )


# HTTPException handler
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # If detail is already a dict with 'error' key, return as is
    if isinstance(exc.detail, dict) and 'error' in exc.detail:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail
        )
    # Otherwise wrap it
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)}
    )


# Generic error handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error"
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=config.HOST, port=config.PORT)
