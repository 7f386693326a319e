"""
Import all models here so callers can write `from rental_tracker.models import Vehicle`.

Order matters — RentalRecord refers to Vehicle and Customer.
"""

from rental_tracker.models.vehicle import (
    Vehicle, VehicleType, VehicleStatus,
    CarDetails, MinibusDetails, PickupTruckDetails, default_details,
)
from rental_tracker.models.customer import Customer
from rental_tracker.models.rental_record import RentalRecord, RecordKind

__all__ = [
    "Vehicle",
    "VehicleType",
    "VehicleStatus",
    "CarDetails",
    "MinibusDetails",
    "PickupTruckDetails",
    "default_details",
    "Customer",
    "RentalRecord",
    "RecordKind",
]
