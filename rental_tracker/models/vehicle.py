import enum
from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field


class VehicleType(str, enum.Enum):
    CAR          = "Car"
    MINIBUS      = "Minibus"
    PICKUP_TRUCK = "PickupTruck"


class VehicleStatus(str, enum.Enum):
    AVAILABLE = "Available"
    RENTED    = "Rented"


# ─── Variant Payloads ─────────────────────────────────────────────────────────
# Not persisted: a reloaded vehicle always carries the defaults below.
class CarDetails(BaseModel):
    type:     Literal[VehicleType.CAR] = VehicleType.CAR
    numSeats: int = 0


class MinibusDetails(BaseModel):
    type:         Literal[VehicleType.MINIBUS] = VehicleType.MINIBUS
    isAccessible: bool = False


class PickupTruckDetails(BaseModel):
    type:       Literal[VehicleType.PICKUP_TRUCK] = VehicleType.PICKUP_TRUCK
    cargoSize:  float = 0.0
    hasTrailer: bool  = False


VehicleDetails = Annotated[
    Union[CarDetails, MinibusDetails, PickupTruckDetails],
    Field(discriminator="type"),
]

_DETAILS_BY_TYPE = {
    VehicleType.CAR:          CarDetails,
    VehicleType.MINIBUS:      MinibusDetails,
    VehicleType.PICKUP_TRUCK: PickupTruckDetails,
}


def default_details(vehicle_type: VehicleType) -> CarDetails | MinibusDetails | PickupTruckDetails:
    return _DETAILS_BY_TYPE[vehicle_type]()


class Vehicle(BaseModel):
    licensePlate: str
    make:         str
    model:        str
    year:         int
    status:       VehicleStatus  = VehicleStatus.AVAILABLE
    details:      VehicleDetails = Field(default_factory=CarDetails)

    @property
    def type(self) -> VehicleType:
        return self.details.type

    def same_plate(self, plate: str) -> bool:
        return self.licensePlate.casefold() == plate.casefold()

    def __repr__(self):
        return f"<Vehicle plate={self.licensePlate} type={self.type.value} status={self.status.value}>"
