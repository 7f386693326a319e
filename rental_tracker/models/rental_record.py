import enum
from datetime import date
from decimal import Decimal, InvalidOperation
from pydantic import BaseModel, ConfigDict, field_validator

from rental_tracker.models.customer import Customer
from rental_tracker.models.vehicle import Vehicle

CENTS = Decimal("0.01")


class RecordKind(str, enum.Enum):
    RENT   = "RENT"
    RETURN = "RETURN"


class RentalRecord(BaseModel):
    """
    One entry of the rental history.

    vehicle and customer are the very objects held by the directory,
    not copies: the record refers to them but does not own them.
    """
    kind:       RecordKind
    vehicle:    Vehicle
    customer:   Customer
    recordDate: date
    amount:     Decimal

    model_config = ConfigDict(frozen=True)

    @field_validator("amount")
    @classmethod
    def to_cents(cls, v):
        if not v.is_finite(): raise ValueError("Amount must be a finite number")
        try:
            return v.quantize(CENTS)
        except InvalidOperation:
            raise ValueError("Amount is too large to store in cents")

    def __repr__(self):
        return (f"<RentalRecord kind={self.kind.value} plate={self.vehicle.licensePlate} "
                f"customerId={self.customer.customerId} date={self.recordDate.isoformat()}>")
