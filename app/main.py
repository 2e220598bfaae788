import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.database import init_db, close_db
from app.core.exceptions import setup_exception_handlers
from app.core.logger import setup_logging
from app.routers import resources


setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # 启动时建表, 失败则直接退出
    try:
        init_db()
    except Exception:
        logger.exception("Failed to initialize database")
        raise
    logger.info("%s %s started (%s)", settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT)
    try:
        yield
    finally:
        close_db()
        logger.info("Server shut down")


app = FastAPI(
    title=settings.APP_NAME,
    description="Resource CRUD API",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)


# Request Logger Middleware (development only)
@app.middleware("http")
async def log_request(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    if settings.is_development:
        process_time = (time.time() - start_time) * 1000
        logger.info(
            "%s %s -> %s (%.1fms)",
            request.method, request.url.path, response.status_code, process_time
        )
    return response


app.include_router(resources.router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    return {
        "success": True,
        "message": "CRUD API Server",
        "version": settings.APP_VERSION,
        "endpoints": {
            "health": "/health",
            "resources": f"{settings.API_PREFIX}/resources",
        },
        "documentation": "/docs",
    }


@app.get("/health")
def health_check():
    return {
        "success": True,
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
    }
