"""
Line format of the three log files.

    vehicles.txt        type,plate,make,model,year
    customers.txt       id,name
    rental_records.txt  kind,plate,customerId,isoDate,amount

Fields are joined with a bare comma, no quoting. Trailing empty fields are
dropped before the field count is checked. Extra trailing fields are
ignored on read, except for a customer name, which keeps everything after
the first comma.
"""
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable

from rental_tracker.models import (
    Vehicle, VehicleType, Customer, RentalRecord, RecordKind, default_details,
)
from rental_tracker.models.rental_record import CENTS
from rental_tracker.utils.exceptions import MalformedRecordException, ErrorCode

DELIMITER = ","

VEHICLE_FIELDS  = 5
CUSTOMER_FIELDS = 2
RECORD_FIELDS   = 5


def _split(line: str, required: int) -> list[str]:
    parts = line.split(DELIMITER)
    # Trailing empty fields do not count: "1," is a short customer line.
    while parts and not parts[-1]:
        parts.pop()
    if len(parts) < required:
        raise MalformedRecordException(f"expected {required} fields, got {len(parts)}")
    return parts


def _lookup_enum(enum_cls, raw: str):
    for member in enum_cls:
        if member.value.casefold() == raw.strip().casefold():
            return member
    raise MalformedRecordException(f"unknown {enum_cls.__name__} '{raw}'")


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise MalformedRecordException(f"{name} is not an integer: '{raw}'")


# ─── Vehicles ─────────────────────────────────────────────────────────────────
def encode_vehicle(v: Vehicle) -> str:
    return DELIMITER.join([v.type.value, v.licensePlate, v.make, v.model, str(v.year)])


def decode_vehicle(line: str) -> Vehicle:
    parts = _split(line, VEHICLE_FIELDS)
    vehicle_type = _lookup_enum(VehicleType, parts[0])
    return Vehicle(
        licensePlate=parts[1],
        make=parts[2],
        model=parts[3],
        year=_parse_int(parts[4], "year"),
        details=default_details(vehicle_type),
    )


# ─── Customers ────────────────────────────────────────────────────────────────
def encode_customer(c: Customer) -> str:
    return f"{c.customerId}{DELIMITER}{c.name}"


def decode_customer(line: str) -> Customer:
    parts = _split(line, CUSTOMER_FIELDS)
    return Customer(
        customerId=_parse_int(parts[0], "customer id"),
        name=DELIMITER.join(parts[1:]),
    )


# ─── Rental Records ───────────────────────────────────────────────────────────
def encode_record(r: RentalRecord) -> str:
    return DELIMITER.join([
        r.kind.value,
        r.vehicle.licensePlate,
        str(r.customer.customerId),
        r.recordDate.isoformat(),
        str(r.amount),
    ])


def decode_record(
    line: str,
    find_vehicle: Callable[[str], Vehicle | None],
    find_customer: Callable[[int], Customer | None],
) -> RentalRecord:
    """
    Parse a record line and resolve its plate and customer id through the
    given lookups. Raises MalformedRecordException (code UNKNOWN_REFERENCE)
    when either side is missing.
    """
    parts = _split(line, RECORD_FIELDS)
    kind        = _lookup_enum(RecordKind, parts[0])
    plate       = parts[1]
    customer_id = _parse_int(parts[2], "customer id")

    try:
        record_date = date.fromisoformat(parts[3].strip())
    except ValueError:
        raise MalformedRecordException(f"date is not ISO formatted: '{parts[3]}'")

    try:
        amount = Decimal(parts[4].strip())
        if not amount.is_finite(): raise InvalidOperation
        amount = amount.quantize(CENTS)
    except InvalidOperation:
        raise MalformedRecordException(f"amount is not a storable number: '{parts[4]}'")

    vehicle  = find_vehicle(plate)
    customer = find_customer(customer_id)
    if vehicle is None or customer is None:
        missing = f"plate {plate}" if vehicle is None else f"customer {customer_id}"
        raise MalformedRecordException(f"unknown {missing}", ErrorCode.UNKNOWN_REFERENCE)

    return RentalRecord(
        kind=kind,
        vehicle=vehicle,
        customer=customer,
        recordDate=record_date,
        amount=amount,
    )
