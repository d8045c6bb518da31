# tests/test_table_service.py
"""Unit tests for the generic table service, exercised through the entity services."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import patch
from sqlalchemy.exc import OperationalError

from app.services.query_filters import Filter, InvalidQueryError


def route_row(route_id="r00010", origin="A", destination="B", distance=5):
    return {"routeId": route_id, "origin": origin, "destination": destination, "distance": distance}


def order_row(order_id="o00010", route_id="r00010", customer_id="c00001", **extra):
    row = {"orderId": order_id, "customerId": customer_id, "weight": 80, "routeId": route_id,
           "orderDate": "2025-05-01", "departureTime": "08:30", "arrivalTime": "11:00"}
    row.update(extra)
    return row


class TestInitialize:
    def test_seed_rows_present(self, services):
        routes = services["route"].fetch_all()
        assert [r[0] for r in routes] == ["r00001", "r00002", "r00003"]
        assert routes[0] == ["r00001", "49.25761407, -123.23615578", "49.27048682, -123.15760743", 10]

    def test_seed_order_dates_rendered_iso(self, services):
        orders = services["order"].fetch_all()
        assert orders[0][:5] == ["o00001", "c00001", 150, "r00002", "2025-04-22"]
        assert orders[1][6] is None     # o00002 has no arrival time

    def test_initialize_twice_is_idempotent(self, services):
        route = services["route"]
        route.insert(route_row())
        assert route.initialize() is True
        once = route.fetch_all()
        assert route.initialize() is True
        assert route.fetch_all() == once
        assert len(once) == 3

    def test_initialize_drops_dependent_tables(self, services):
        dependents = {t.name for t in services["route"].dependent_tables()}
        assert dependents == {"ordertable", "invoicetable", "assignedtable"}

    def test_seed_failure_reported(self, pool):
        from app.services.order_service import OrderService
        # customers and routes do not exist yet, so the seeded orders cannot be stored
        assert OrderService(pool).initialize() is False


class TestInsert:
    def test_insert_then_select_round_trip(self, services):
        route = services["route"]
        assert route.insert(route_row()) is True
        rows = route.select_where([Filter.of("routeId", "=", "r00010")])
        assert rows == [["r00010", "A", "B", 5]]

    def test_duplicate_primary_key_rejected(self, services):
        assert services["route"].insert(route_row(route_id="r00001")) is False

    def test_seven_character_id_rejected(self, services):
        assert services["route"].insert(route_row(route_id="r000010")) is False
        assert services["route"].count() == 3

    def test_missing_required_column_rejected(self, services):
        assert services["customer"].insert({"customerId": "c00009", "email": "x@example.com"}) is False

    def test_unknown_foreign_key_rejected(self, services):
        assert services["order"].insert(order_row(route_id="r99999")) is False

    def test_bad_date_rejected(self, services):
        services["route"].insert(route_row())
        assert services["order"].insert(order_row(orderDate="2025-13-45")) is False

    def test_bad_clock_time_rejected(self, services):
        services["route"].insert(route_row())
        assert services["order"].insert(order_row(departureTime="8am")) is False

    def test_negative_weight_rejected(self, services):
        services["route"].insert(route_row())
        assert services["order"].insert(order_row(weight=-1)) is False

    def test_unknown_column_raises(self, services):
        with pytest.raises(InvalidQueryError):
            services["route"].insert({**route_row(), "speed": 90})

    def test_driver_error_collapses_to_false(self, services):
        route = services["route"]
        with patch.object(route.pool, "run", side_effect=OperationalError("INSERT", {}, Exception("gone"))):
            assert route.insert(route_row()) is False
            assert route.fetch_all() == []
            assert route.count() == -1


class TestUpdate:
    def test_order_date_stored_and_rendered(self, services):
        order = services["order"]
        assert order.update("o00001", "orderDate", "2025-06-30") is True
        row = order.select_where([Filter.of("orderId", "=", "o00001")])[0]
        assert row[4] == "2025-06-30"
        assert order.select_where([Filter.of("orderDate", "=", "2025-06-30")])[0][0] == "o00001"

    def test_text_attribute(self, services):
        assert services["order"].update("o00002", "arrivalTime", "19:45") is True
        assert services["order"].select_where([Filter.of("orderId", "=", "o00002")])[0][6] == "19:45"

    def test_missing_row_returns_false(self, services):
        assert services["order"].update("o99999", "weight", 10) is False

    def test_bad_value_returns_false(self, services):
        assert services["order"].update("o00001", "orderDate", "not-a-date") is False
        assert services["route"].update("r00001", "origin", "x" * 31) is False

    def test_unknown_attribute_raises(self, services):
        with pytest.raises(InvalidQueryError):
            services["order"].update("o00001", "weight = 0 --", 5)

    def test_date_must_be_dashed_year_month_day(self, services):
        order = services["order"]
        assert order.update("o00001", "orderDate", "20250630") is False
        assert order.update("o00001", "orderDate", "2025-W26-1") is False
        assert order.select_where([Filter.of("orderId", "=", "o00001")])[0][4] == "2025-04-22"

    def test_trucks_parked_checked_against_stored_capacity(self, services):
        location = services["location"]
        depot = "49.25761407, -123.23615578"     # capacity 20, 4 trucks parked
        assert location.update(depot, "trucksParked", 999) is False
        assert location.update(depot, "trucksParked", 20) is True
        assert location.update(depot, "capacity", 10) is False
        row = location.select_where([Filter.of("coordinate", "=", depot)])[0]
        assert row[3:5] == [20, 20]


class TestDelete:
    def test_delete_by_key(self, services):
        assert services["customer"].delete("c00003") is True
        assert services["customer"].delete("c00003") is False

    def test_route_delete_cascades_to_orders(self, services):
        route, order = services["route"], services["order"]
        assert route.insert(route_row()) is True
        assert order.insert(order_row()) is True
        assert any(r[0] == "o00010" and r[3] == "r00010" for r in order.fetch_all())

        assert route.delete("r00010") is True
        assert not any(r[0] == "o00010" for r in order.fetch_all())
        assert order.count() == 3

    def test_parent_delete_rejected_without_cascade(self, services):
        # ordertable.customerId has no ON DELETE rule
        assert services["customer"].delete("c00001") is False
        assert services["customer"].count() == 3

    def test_composite_key(self, services):
        services["employee"].insert({"employeeId": "e00001", "sin": "123456789"})
        services["driver"].insert({"employeeId": "e00001", "licenseId": "BC-7781234", "hoursDriven": 12.5})
        services["truck"].insert({"plateNumber": "AB123C", "model": "Volvo VNL", "mileage": 120000,
                                  "status": "available", "parkedAt": "49.25761407, -123.23615578"})
        drives = services["driverDrives"]
        assert drives.insert({"plateNumber": "AB123C", "employeeId": "e00001"}) is True
        assert drives.fetch_all() == [["AB123C", "e00001"]]

        with pytest.raises(InvalidQueryError):
            drives.delete("AB123C")
        assert drives.delete({"plateNumber": "AB123C", "employeeId": "e00001"}) is True
        assert drives.count() == 0


class TestSelectWhere:
    def test_no_filters_returns_everything(self, services):
        assert len(services["route"].select_where([])) == 3

    def test_combined_filters(self, services):
        rows = services["route"].select_where([
            Filter.of("distance", ">=", 20),
            Filter.of("origin", "like", "49.%"),
        ])
        assert [r[0] for r in rows] == ["r00002"]

    def test_injection_shaped_value_is_just_a_value(self, services):
        rows = services["route"].select_where([Filter.of("routeId", "=", "r00001' OR '1'='1")])
        assert rows == []
        assert services["route"].count() == 3

    def test_unknown_column_raises(self, services):
        with pytest.raises(InvalidQueryError):
            services["route"].select_where([Filter.of("1=1; DROP TABLE routetable", "=", 1)])

    def test_bad_filter_value_raises(self, services):
        with pytest.raises(InvalidQueryError):
            services["order"].select_where([Filter.of("orderDate", ">", "yesterday")])

    def test_over_long_value_matches_nothing(self, services):
        assert services["route"].select_where([Filter.of("routeId", "=", "r000010")]) == []
        assert services["route"].select_where([Filter.of("routeId", "!=", "r000010")]) != []


class TestEntityRules:
    def test_employee_sin_digits_only(self, services):
        employee = services["employee"]
        assert employee.insert({"employeeId": "e00002", "sin": "12345678X"}) is False
        assert employee.insert({"employeeId": "e00002", "sin": "123456789"}) is True
        assert employee.update("e00002", "sin", "12-345-67") is False
        assert employee.update("e00002", "sin", "987654321") is True

    def test_driver_hours_not_negative(self, services):
        services["employee"].insert({"employeeId": "e00003", "sin": "111222333"})
        driver = services["driver"]
        assert driver.insert({"employeeId": "e00003", "licenseId": "ON-1", "hoursDriven": -0.5}) is False
        assert driver.insert({"employeeId": "e00003", "licenseId": "ON-1", "hoursDriven": 0}) is True
        assert driver.update("e00003", "hoursDriven", -3) is False

    def test_truck_mileage_not_negative(self, services):
        truck = services["truck"]
        assert truck.insert({"plateNumber": "ZX900", "mileage": -10}) is False
        assert truck.insert({"plateNumber": "ZX900", "mileage": 10}) is True
        assert truck.update("ZX900", "mileage", -1) is False

    def test_route_distance_not_negative(self, services):
        route = services["route"]
        assert route.insert(route_row(distance=-5)) is False
        assert route.update("r00001", "distance", -1) is False
        assert route.update("r00001", "distance", 12.5) is True

    def test_location_parked_within_capacity_on_insert(self, services):
        location = services["location"]
        depot = {"coordinate": "45.50, -73.56", "city": "Montreal", "address": "1 Rue Peel",
                 "capacity": 5, "trucksParked": 6}
        assert location.insert(depot) is False
        assert location.insert({**depot, "trucksParked": 5}) is True
