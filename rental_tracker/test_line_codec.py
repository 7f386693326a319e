import unittest
from datetime import date
from decimal import Decimal

from rental_tracker.models import (
    Vehicle, VehicleType, Customer, RentalRecord, RecordKind,
    MinibusDetails, PickupTruckDetails,
)
from rental_tracker.services import line_codec
from rental_tracker.utils.exceptions import MalformedRecordException, ErrorCode


class TestLineCodec(unittest.TestCase):
    def test_encode_vehicle_drops_details(self):
        v = Vehicle(licensePlate="TRK1", make="Ford", model="F-150", year=2023,
                    details=PickupTruckDetails(cargoSize=2.5, hasTrailer=True))
        self.assertEqual(line_codec.encode_vehicle(v), "PickupTruck,TRK1,Ford,F-150,2023")

    def test_decode_vehicle_type_is_case_insensitive(self):
        v = line_codec.decode_vehicle("minibus,MB1,Ford,Transit,2018")
        self.assertEqual(v.type, VehicleType.MINIBUS)
        self.assertEqual(v.details, MinibusDetails())

    def test_decode_vehicle_ignores_extra_fields(self):
        v = line_codec.decode_vehicle("Car,ABC123,Toyota,Corolla,2020,extra")
        self.assertEqual(v.year, 2020)

    def test_decode_vehicle_rejects_short_line(self):
        with self.assertRaises(MalformedRecordException) as ctx:
            line_codec.decode_vehicle("Car,ABC123,Toyota")
        self.assertEqual(ctx.exception.error_code, ErrorCode.MALFORMED_RECORD)

    def test_encode_customer(self):
        self.assertEqual(line_codec.encode_customer(Customer(customerId=3, name="Carol")), "3,Carol")

    def test_decode_customer_rejects_empty_name(self):
        with self.assertRaises(MalformedRecordException):
            line_codec.decode_customer("1,")

    def test_decode_customer_drops_trailing_empty_fields(self):
        self.assertEqual(line_codec.decode_customer("2,Bob,,").name, "Bob")

    def test_decode_record_rejects_amount_too_large_for_cents(self):
        with self.assertRaises(MalformedRecordException) as ctx:
            line_codec.decode_record("RENT,ABC123,1,2024-01-05,1E+30", lambda p: None, lambda i: None)
        self.assertEqual(ctx.exception.error_code, ErrorCode.MALFORMED_RECORD)

    def test_encode_record_uses_two_decimals(self):
        record = RentalRecord(
            kind=RecordKind.RETURN,
            vehicle=Vehicle(licensePlate="ABC123", make="Toyota", model="Corolla", year=2020),
            customer=Customer(customerId=1, name="Alice"),
            recordDate=date(2024, 1, 9),
            amount=Decimal("7"),
        )
        self.assertEqual(line_codec.encode_record(record), "RETURN,ABC123,1,2024-01-09,7.00")

    def test_decode_record_reports_unknown_reference(self):
        with self.assertRaises(MalformedRecordException) as ctx:
            line_codec.decode_record("RENT,ZZZ999,1,2024-01-05,50.00", lambda p: None, lambda i: None)
        self.assertEqual(ctx.exception.error_code, ErrorCode.UNKNOWN_REFERENCE)

    def test_decode_record_rejects_non_finite_amount(self):
        with self.assertRaises(MalformedRecordException):
            line_codec.decode_record("RENT,ABC123,1,2024-01-05,NaN", lambda p: None, lambda i: None)


if __name__ == '__main__':
    unittest.main()
