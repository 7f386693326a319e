from decimal import Decimal

from rental_tracker.models import (
    Vehicle, VehicleStatus, VehicleType, Customer, RentalRecord, RecordKind,
)
from rental_tracker.services.rental_directory import RentalDirectory

TYPE_LABELS = {
    VehicleType.CAR:          "Car",
    VehicleType.MINIBUS:      "Minibus",
    VehicleType.PICKUP_TRUCK: "Pickup Truck",
}


def _serialize_vehicle(v: Vehicle) -> dict:
    return {
        "type":         TYPE_LABELS[v.type],
        "licensePlate": v.licensePlate,
        "make":         v.make,
        "model":        v.model,
        "year":         v.year,
        "status":       v.status.value,
    }


def _serialize_customer(c: Customer) -> dict:
    return {"customerId": c.customerId, "name": c.name}


def _serialize_record(r: RentalRecord) -> dict:
    return {
        "kind":         r.kind.value,
        "licensePlate": r.vehicle.licensePlate,
        "customer":     r.customer.name,
        "recordDate":   r.recordDate.isoformat(),
        "amount":       f"{r.amount:.2f}",
    }


class ReportService:
    """Read-only views over a RentalDirectory for whatever renders them."""

    def vehicle_rows(self, directory: RentalDirectory, status: VehicleStatus | None = None) -> list[dict]:
        return [_serialize_vehicle(v) for v in directory.list_vehicles(status)]

    def customer_rows(self, directory: RentalDirectory) -> list[dict]:
        return [_serialize_customer(c) for c in directory.list_customers()]

    def history_rows(self, directory: RentalDirectory) -> list[dict]:
        return [_serialize_record(r) for r in directory.list_history()]

    def summary(self, directory: RentalDirectory) -> dict:
        vehicles = directory.list_vehicles()
        history  = directory.list_history()
        def count_status(s): return sum(1 for v in vehicles if v.status == s)
        def total(kind): return sum((r.amount for r in history if r.kind == kind), Decimal("0.00"))

        by_type = {}
        for v in vehicles:
            label = TYPE_LABELS[v.type]
            by_type[label] = by_type.get(label, 0) + 1

        return {
            "vehicles": {
                "total":     len(vehicles),
                "available": count_status(VehicleStatus.AVAILABLE),
                "rented":    count_status(VehicleStatus.RENTED),
            },
            "byVehicleType": by_type,
            "customers":     len(directory.list_customers()),
            "records":       len(history),
            "rentRevenue":   f"{total(RecordKind.RENT):.2f}",
            "returnFees":    f"{total(RecordKind.RETURN):.2f}",
        }


report_service = ReportService()
