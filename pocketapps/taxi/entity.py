"""Domain entities of the taxi service."""

from dataclasses import dataclass
from enum import Enum


class RideStatus(str, Enum):
    """Lifecycle state of a ride."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def is_valid_status(value) -> bool:
    """Return True if *value* names one of the known ride statuses."""
    try:
        RideStatus(value)
    except ValueError:
        return False
    return True


@dataclass
class Driver:
    id: int = 0
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    is_available: bool = False
    car_type: str = ""
    license_plate: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone_number": self.phone_number,
            "is_available": self.is_available,
            "car_type": self.car_type,
            "license_plate": self.license_plate,
        }


@dataclass
class Passenger:
    id: int = 0
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone_number": self.phone_number,
        }


@dataclass
class Ride:
    id: str = ""
    passenger_id: str = ""
    driver_id: str = ""
    origin: str = ""
    destination: str = ""
    status: RideStatus = RideStatus.PENDING

    def to_dict(self) -> dict:
        status = self.status.value if isinstance(self.status, RideStatus) else self.status
        return {
            "id": self.id,
            "passenger_id": self.passenger_id,
            "driver_id": self.driver_id,
            "origin": self.origin,
            "destination": self.destination,
            "status": status,
        }