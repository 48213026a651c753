# app/main.py

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.database import create_db_and_tables, engine, get_session
from app.core.exceptions import InternalError, register_exception_handlers
from app.core.middleware import register_middleware

from app.domains.employee.routers import router as employee_router
from app.domains.department.routers import router as department_router

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG_MODE else settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# -- Lifespan: open the database before serving, release the pool on exit --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Starting %s (%s)", settings.APP_NAME, settings.APP_ENV)
    try:
        await create_db_and_tables()
    except Exception:
        logger.exception("Database initialization failed")
        raise

    yield

    logger.info("Shutting down %s", settings.APP_NAME)
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description="CRUD API for employees and departments with token authentication.",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

register_middleware(app)
register_exception_handlers(app)

app.include_router(employee_router, prefix="/employee")
app.include_router(department_router, prefix="/department")


# -- Liveness --
@app.get("/", response_class=PlainTextResponse, summary="Liveness check")
async def read_root():
    return "Hello World"


# -- Health check: also verifies the database connection --
@app.get("/health-check", summary="Health Check")
async def health_check(session: AsyncSession = Depends(get_session)):
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar_one()
    except Exception as e:
        logger.error("Database health check failed: %s", e)
        raise InternalError("Database connection error during health check")
    return {"status": "ok", "database_connection": "successful"}


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
