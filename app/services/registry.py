# app/services/registry.py
"""
One table service per entity, keyed by the slug used in the HTTP paths
(e.g. "route" → /routeTable). Insertion order is schema dependency order,
which initialize_all() relies on: parents are rebuilt before their children.
"""

from typing import Dict, Optional

from app.database import ConnectionPool, get_pool
from app.services.assigned_service import AssignedService
from app.services.customer_service import CustomerService
from app.services.dispatcher_service import DispatcherService
from app.services.driver_drives_service import DriverDrivesService
from app.services.driver_service import DriverService
from app.services.employee_service import EmployeeService
from app.services.invoice_service import InvoiceService
from app.services.location_service import LocationService
from app.services.order_service import OrderService
from app.services.route_service import RouteService
from app.services.table_service import TableService
from app.services.truck_service import TruckService
from app.utils.logger import get_logger

logger = get_logger(__name__)

SERVICE_CLASSES = {
    "location": LocationService,
    "route": RouteService,
    "customer": CustomerService,
    "employee": EmployeeService,
    "dispatcher": DispatcherService,
    "driver": DriverService,
    "truck": TruckService,
    "order": OrderService,
    "invoice": InvoiceService,
    "driverDrives": DriverDrivesService,
    "assigned": AssignedService,
}

_services: Optional[Dict[str, TableService]] = None


def build_services(pool: ConnectionPool) -> Dict[str, TableService]:
    return {slug: cls(pool) for slug, cls in SERVICE_CLASSES.items()}


def initialize_all(services: Dict[str, TableService]) -> bool:
    """Rebuild and seed every table. Stops at the first table that fails."""
    for slug, service in services.items():
        if not service.initialize():
            logger.error(f"Schema initialization stopped at {slug}")
            return False
    logger.info(f"Schema initialized: {len(services)} tables")
    return True


def get_services() -> Dict[str, TableService]:
    """FastAPI dependency — services bound to the process-wide pool."""
    global _services
    if _services is None:
        _services = build_services(get_pool())
    return _services
