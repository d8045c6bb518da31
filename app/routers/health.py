# app/routers/health.py
"""
Database connectivity checks.
/check-db-connection answers plain text for the dashboard status badge;
/health returns JSON for monitoring.
"""

from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.database import ConnectionPool, get_pool

router = APIRouter()


@router.get("/check-db-connection", response_class=PlainTextResponse, summary="Database reachable?")
def check_db_connection(pool: ConnectionPool = Depends(get_pool)):
    return "connected" if pool.ping() else "unable to connect"


@router.get("/health", summary="System health check")
def health_check(pool: ConnectionPool = Depends(get_pool)):
    """
    Returns:
    - Backend status
    - Database connectivity
    - Connections currently borrowed from the pool
    """
    database_ok = pool.ping()
    return {
        "status": "ok" if database_ok else "degraded",
        "timestamp": datetime.utcnow().isoformat(),
        "backend": "ok",
        "database": "ok" if database_ok else "unreachable",
        "connections_in_use": pool.checked_out,
    }
