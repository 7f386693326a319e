from datetime import date
from decimal import Decimal
import logging
from pydantic import ValidationError

from rental_tracker.config import Settings, settings as default_settings
from rental_tracker.models import (
    Vehicle, VehicleStatus, Customer, RentalRecord, RecordKind,
)
from rental_tracker.schemas.common import (
    OperationResult, LoadReport, EntityLoadStats, success_result, error_result,
)
from rental_tracker.services import line_codec
from rental_tracker.storage import LogFile
from rental_tracker.utils.exceptions import (
    AppException, DuplicateEntryException, MalformedRecordException, PersistenceException,
    VehicleNotAvailableException, VehicleNotRentedException, UnknownReferenceException,
    InvalidAmountException,
)

logger = logging.getLogger(__name__)


class RentalDirectory:
    """
    In-memory catalog of vehicles and customers plus the rental history,
    mirrored to one append-only log file per entity type.

    The in-memory state is the source of truth for the running process.
    Disk failures never undo a mutation and never raise: they are logged
    and reported on the returned OperationResult.
    """

    def __init__(self, config: Settings | None = None):
        config = config or default_settings
        self.vehicle_log  = LogFile(config.vehicles_path,  config.FILE_ENCODING)
        self.customer_log = LogFile(config.customers_path, config.FILE_ENCODING)
        self.record_log   = LogFile(config.records_path,   config.FILE_ENCODING)

        self._vehicles:  list[Vehicle]      = []
        self._customers: list[Customer]     = []
        self._history:   list[RentalRecord] = []

        self.load_report = self._load()

    # ─── Registration ─────────────────────────────────────────────────────────
    def add_vehicle(self, vehicle: Vehicle) -> OperationResult:
        if self.find_vehicle_by_plate(vehicle.licensePlate) is not None:
            return self._reject(DuplicateEntryException(
                "A vehicle with this license plate already exists", field="licensePlate"))

        self._vehicles.append(vehicle)
        result = success_result(f"Vehicle {vehicle.licensePlate} added", vehicle)
        self._save(self.vehicle_log, line_codec.encode_vehicle(vehicle), result)
        logger.info(result.message)
        return result

    def add_customer(self, customer: Customer) -> OperationResult:
        if self.find_customer_by_id(customer.customerId) is not None:
            return self._reject(DuplicateEntryException(
                "A customer with this ID already exists", field="customerId"))

        self._customers.append(customer)
        result = success_result(f"Customer {customer.customerId} added", customer)
        self._save(self.customer_log, line_codec.encode_customer(customer), result)
        logger.info(result.message)
        return result

    # ─── Transactions ─────────────────────────────────────────────────────────
    def rent_vehicle(
        self, vehicle: Vehicle, customer: Customer, record_date: date, amount: Decimal | float,
    ) -> OperationResult:
        if vehicle.status != VehicleStatus.AVAILABLE:
            return self._reject(VehicleNotAvailableException(vehicle.licensePlate))
        return self._transition(
            RecordKind.RENT, vehicle, customer, record_date, amount,
            VehicleStatus.RENTED, f"Vehicle rented to {customer.name}",
        )

    def return_vehicle(
        self, vehicle: Vehicle, customer: Customer, record_date: date, extra_fees: Decimal | float,
    ) -> OperationResult:
        if vehicle.status != VehicleStatus.RENTED:
            return self._reject(VehicleNotRentedException(vehicle.licensePlate))
        return self._transition(
            RecordKind.RETURN, vehicle, customer, record_date, extra_fees,
            VehicleStatus.AVAILABLE, f"Vehicle returned by {customer.name}",
        )

    # ─── Lookups ──────────────────────────────────────────────────────────────
    def find_vehicle_by_plate(self, plate: str) -> Vehicle | None:
        for v in self._vehicles:
            if v.same_plate(plate):
                return v
        return None

    def find_customer_by_id(self, customer_id: int) -> Customer | None:
        for c in self._customers:
            if c.customerId == customer_id:
                return c
        return None

    # ─── Read-only Projections ────────────────────────────────────────────────
    def list_vehicles(self, status: VehicleStatus | None = None) -> list[Vehicle]:
        return [v for v in self._vehicles if status is None or v.status == status]

    def list_customers(self) -> list[Customer]:
        return list(self._customers)

    def list_history(self) -> list[RentalRecord]:
        return list(self._history)

    # ─── Internals ────────────────────────────────────────────────────────────
    def _transition(
        self, kind: RecordKind, vehicle: Vehicle, customer: Customer,
        record_date: date, amount, new_status: VehicleStatus, message: str,
    ) -> OperationResult:
        # Records may only point at objects this directory holds.
        if self.find_vehicle_by_plate(vehicle.licensePlate) is not vehicle:
            return self._reject(UnknownReferenceException(
                f"Vehicle {vehicle.licensePlate} is not registered", field="licensePlate"))
        if self.find_customer_by_id(customer.customerId) is not customer:
            return self._reject(UnknownReferenceException(
                f"Customer {customer.customerId} is not registered", field="customerId"))

        try:
            record = RentalRecord(
                kind=kind, vehicle=vehicle, customer=customer,
                recordDate=record_date, amount=amount,
            )
        except ValidationError as e:
            if any(err["loc"] == ("amount",) for err in e.errors()):
                return self._reject(InvalidAmountException(amount))
            raise

        vehicle.status = new_status
        self._history.append(record)
        result = success_result(message, record)
        self._save(self.record_log, line_codec.encode_record(record), result)
        logger.info(message)
        return result

    def _reject(self, exc: AppException) -> OperationResult:
        logger.warning(exc.message)
        return error_result(exc)

    def _save(self, log: LogFile, line: str, result: OperationResult) -> None:
        try:
            log.append(line)
        except PersistenceException as e:
            logger.error(e.message)
            result.persisted = False
            result.warnings.append(e.message)

    def _load(self) -> LoadReport:
        """Replay vehicles, then customers, then records (records resolve against both)."""
        report = LoadReport()

        def add_vehicle(v: Vehicle):
            if self.find_vehicle_by_plate(v.licensePlate) is not None:
                raise DuplicateEntryException(f"duplicate plate {v.licensePlate}")
            self._vehicles.append(v)

        def add_customer(c: Customer):
            if self.find_customer_by_id(c.customerId) is not None:
                raise DuplicateEntryException(f"duplicate customer {c.customerId}")
            self._customers.append(c)

        def add_record(line: str):
            self._history.append(line_codec.decode_record(
                line, self.find_vehicle_by_plate, self.find_customer_by_id))

        self._replay(self.vehicle_log,  report.vehicles,  report,
                     lambda line: add_vehicle(line_codec.decode_vehicle(line)))
        self._replay(self.customer_log, report.customers, report,
                     lambda line: add_customer(line_codec.decode_customer(line)))
        self._replay(self.record_log,   report.records,   report, add_record)

        logger.info(
            f"Loaded {report.vehicles.loaded} vehicles, {report.customers.loaded} customers, "
            f"{report.records.loaded} records"
        )
        return report

    def _replay(self, log: LogFile, stats: EntityLoadStats, report: LoadReport, apply) -> None:
        try:
            for lineno, raw in log.read_lines():
                if not raw.strip():
                    continue
                try:
                    apply(log.decode(raw))
                    stats.loaded += 1
                except (MalformedRecordException, DuplicateEntryException) as e:
                    stats.skipped += 1
                    logger.debug(f"Skipping {log.path}:{lineno}: {e.message}")
        except PersistenceException as e:
            logger.error(e.message)
            report.errors.append(e.message)

    def __repr__(self):
        return (f"<RentalDirectory vehicles={len(self._vehicles)} "
                f"customers={len(self._customers)} records={len(self._history)}>")
