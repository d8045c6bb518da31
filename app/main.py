# app/main.py
"""
FastAPI application entry point.
Includes request timing middleware, error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app.routers import health, orders, tables
from app.database import pool
from app.config import settings
from app.services.query_filters import InvalidQueryError
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Logistics Manager API",
    description="Routes, orders, locations, invoices, staff and fleet tables over one connection pool.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (allow the dashboard to call the API) ──────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],   # Restrict to dashboard origin in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(InvalidQueryError)
async def invalid_query_handler(request: Request, exc: InvalidQueryError):
    logger.info(f"Rejected query on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid_query", "message": str(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal_error", "message": str(exc)},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(orders.router)
app.include_router(tables.router)
app.include_router(health.router)


# ── Startup / Shutdown ───────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚚 Logistics Manager starting up...")
    pool.initialize()
    logger.info(f"🌐 Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    # uvicorn runs this on SIGINT/SIGTERM before the process exits
    logger.info("🛑 Logistics Manager shutting down...")
    pool.shutdown(settings.DB_SHUTDOWN_GRACE_SECONDS)
