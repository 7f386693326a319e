import logging
import tempfile
import unittest
from datetime import date
from pathlib import Path

from rental_tracker.config import Settings
from rental_tracker.main import create_directory
from rental_tracker.models import Vehicle, VehicleStatus, Customer, PickupTruckDetails
from rental_tracker.services.report_service import report_service


class TestReportService(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.config = Settings(DATA_DIR=Path(self._tmp.name), LOG_LEVEL="warning")
        with self.assertNoLogs("rental_tracker.main", level=logging.WARNING):
            self.directory = create_directory(self.config)

        self.car = Vehicle(licensePlate="ABC123", make="Toyota", model="Corolla", year=2020)
        self.truck = Vehicle(licensePlate="TRK1", make="Ford", model="F-150", year=2023,
                             details=PickupTruckDetails())
        self.alice = Customer(customerId=1, name="Alice")
        for v in (self.car, self.truck):
            self.directory.add_vehicle(v)
        self.directory.add_customer(self.alice)

        self.directory.rent_vehicle(self.car, self.alice, date(2024, 1, 5), 50)
        self.directory.return_vehicle(self.car, self.alice, date(2024, 1, 8), 15.25)
        self.directory.rent_vehicle(self.truck, self.alice, date(2024, 1, 9), 80)

    def tearDown(self):
        self._tmp.cleanup()

    def test_vehicle_rows(self):
        rows = report_service.vehicle_rows(self.directory, VehicleStatus.RENTED)
        self.assertEqual(rows, [{
            "type": "Pickup Truck", "licensePlate": "TRK1", "make": "Ford",
            "model": "F-150", "year": 2023, "status": "Rented",
        }])

    def test_customer_rows(self):
        self.assertEqual(report_service.customer_rows(self.directory), [{"customerId": 1, "name": "Alice"}])

    def test_history_rows_keep_append_order(self):
        rows = report_service.history_rows(self.directory)
        self.assertEqual([r["kind"] for r in rows], ["RENT", "RETURN", "RENT"])
        self.assertEqual(rows[1], {
            "kind": "RETURN", "licensePlate": "ABC123", "customer": "Alice",
            "recordDate": "2024-01-08", "amount": "15.25",
        })

    def test_summary(self):
        summary = report_service.summary(self.directory)
        self.assertEqual(summary["vehicles"], {"total": 2, "available": 1, "rented": 1})
        self.assertEqual(summary["byVehicleType"], {"Car": 1, "Pickup Truck": 1})
        self.assertEqual(summary["customers"], 1)
        self.assertEqual(summary["records"], 3)
        self.assertEqual(summary["rentRevenue"], "130.00")
        self.assertEqual(summary["returnFees"], "15.25")


if __name__ == '__main__':
    unittest.main()
