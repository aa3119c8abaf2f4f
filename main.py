import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from database import engine, init_db, is_connection_failure, reset_pool
from errors import AppError
from api.admin import router as admin_router
from api.opportunities import router as opportunities_router
from api.reference_data import router as reference_data_router
from services.schema_probe import ensure_indexes, resolve_capabilities

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong, please try again later"


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_tables:
        await init_db()
    async with engine.begin() as conn:
        app.state.schema = await resolve_capabilities(conn)
        if settings.auto_create_tables:
            await ensure_indexes(conn, app.state.schema)
    logger.info("%s started (%s)", settings.app_name, settings.environment)
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="SME registry, admin reference data and investment opportunity API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _server_error(message: str) -> JSONResponse:
    if settings.is_production:
        message = GENERIC_ERROR_MESSAGE
    return JSONResponse(status_code=500, content={"error": message})


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _server_error(exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Unknown routes and wrong methods use the same body shape as application errors
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=400, content={"error": "Invalid request"})
    err = errors[0]
    field = ".".join(str(p) for p in err["loc"] if p not in ("body", "query", "path"))
    message = f"{field}: {err['msg']}" if field else err["msg"]
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    if is_connection_failure(exc):
        await reset_pool()
        return _server_error("Database unavailable")
    return _server_error(f"Database error: {exc.__class__.__name__}")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _server_error("Internal server error")


app.include_router(opportunities_router)
app.include_router(admin_router)
app.include_router(reference_data_router)


@app.get("/api")
async def api_root():
    return {"message": f"{settings.app_name} is alive", "env": settings.environment}


@app.get("/health")
async def health():
    return {"status": "ok"}
