# app/routers/tables.py
"""
CRUD endpoints for every table, generated from one template.
For slug "route" this yields:
  POST   /initiate-routeTable   rebuild + seed the table
  POST   /insert-routeTable     insert one row (JSON body, camelCase fields)
  GET    /routeTable            all rows
  POST   /select-routeTable     rows matching typed filters
  POST   /update-routeTable     set one attribute of one row
  DELETE /delete-routeTable     delete one row by key
  GET    /count-routeTable      row count
"""

from typing import Dict, Type

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.schemas.common import DeleteRequest, SelectRequest, UpdateRequest
from app.schemas.customer import CustomerCreate
from app.schemas.employee import DispatcherCreate, DriverCreate, EmployeeCreate
from app.schemas.invoice import InvoiceCreate
from app.schemas.location import LocationCreate
from app.schemas.order import OrderCreate
from app.schemas.route import RouteCreate
from app.schemas.truck import AssignedCreate, DriverDrivesCreate, TruckCreate
from app.services.query_filters import Filter
from app.services.registry import get_services, initialize_all
from app.services.table_service import TableService

CREATE_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "location": LocationCreate,
    "route": RouteCreate,
    "customer": CustomerCreate,
    "employee": EmployeeCreate,
    "dispatcher": DispatcherCreate,
    "driver": DriverCreate,
    "truck": TruckCreate,
    "order": OrderCreate,
    "invoice": InvoiceCreate,
    "driverDrives": DriverDrivesCreate,
    "assigned": AssignedCreate,
}


def outcome(ok: bool):
    """{success: true}, or HTTP 500 {success: false}."""
    if ok:
        return {"success": True}
    return JSONResponse(status_code=500, content={"success": False})


def build_table_router(slug: str, create_schema: Type[BaseModel]) -> APIRouter:
    router = APIRouter(tags=[f"{slug}Table"])

    def service(services: Dict[str, TableService] = Depends(get_services)) -> TableService:
        return services[slug]

    @router.post(f"/initiate-{slug}Table", summary=f"Rebuild and seed {slug}Table")
    def initiate_table(svc: TableService = Depends(service)):
        return outcome(svc.initialize())

    @router.post(f"/insert-{slug}Table", summary=f"Insert a row into {slug}Table")
    def insert_row(body: create_schema, svc: TableService = Depends(service)):
        return outcome(svc.insert(body.model_dump(by_alias=True)))

    @router.get(f"/{slug}Table", summary=f"All rows of {slug}Table")
    def fetch_table(svc: TableService = Depends(service)):
        return {"data": svc.fetch_all()}

    @router.post(f"/select-{slug}Table", summary=f"Filtered rows of {slug}Table")
    def select_rows(body: SelectRequest, svc: TableService = Depends(service)):
        filters = [Filter.of(f.column, f.operator, f.value) for f in body.filters]
        return {"data": svc.select_where(filters)}

    @router.post(f"/update-{slug}Table", summary=f"Update one attribute in {slug}Table")
    def update_row(body: UpdateRequest, svc: TableService = Depends(service)):
        return outcome(svc.update(body.key, body.attribute, body.new_value))

    @router.delete(f"/delete-{slug}Table", summary=f"Delete a row from {slug}Table")
    def delete_row(body: DeleteRequest, svc: TableService = Depends(service)):
        return outcome(svc.delete(body.key))

    @router.get(f"/count-{slug}Table", summary=f"Row count of {slug}Table")
    def count_rows(svc: TableService = Depends(service)):
        return {"data": svc.count()}

    return router


router = APIRouter()


@router.post("/initiate-all", summary="Rebuild and seed every table", tags=["schema"])
def initiate_all(services: Dict[str, TableService] = Depends(get_services)):
    return outcome(initialize_all(services))


for _slug, _schema in CREATE_SCHEMAS.items():
    router.include_router(build_table_router(_slug, _schema))
