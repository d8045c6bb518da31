# app/routers/orders.py
"""Order reports — joins, projections and aggregates over ordertable."""

from typing import Dict, List

from fastapi import APIRouter, Depends, Query

from app.services.order_service import OrderService
from app.services.registry import get_services
from app.services.table_service import TableService

router = APIRouter(tags=["orderTable"])


def order_service(services: Dict[str, TableService] = Depends(get_services)) -> OrderService:
    return services["order"]


@router.get("/orderTable/join", summary="Orders with route and origin depot")
def join_route_location(
    min_distance: float = Query(0, alias="minDistance"),
    svc: OrderService = Depends(order_service),
):
    """Only routes at least minDistance long are included."""
    return {"data": svc.join_route_location(min_distance)}


@router.get("/orderTable/project", summary="Selected order columns")
def project_columns(
    columns: List[str] = Query(..., description="Repeat or comma-separate: ?columns=orderId,weight"),
    svc: OrderService = Depends(order_service),
):
    names = [name.strip() for value in columns for name in value.split(",") if name.strip()]
    return {"data": svc.project(names)}


@router.get("/orderTable/count-by-customer", summary="Order count per customer, busiest first")
def count_by_customer(svc: OrderService = Depends(order_service)):
    return {"data": svc.count_by_customer()}


@router.get("/orderTable/earliest-departures", summary="Earliest departure on dates with several orders")
def earliest_departures(svc: OrderService = Depends(order_service)):
    return {"data": svc.earliest_departure_per_date()}


@router.get("/orderTable/above-average-weight", summary="Orders at or above their date's average weight")
def above_average_weight(svc: OrderService = Depends(order_service)):
    return {"data": svc.above_average_weight()}
