"""Business rules for creating rides and assigning drivers."""

from typing import Protocol

from .entity import Ride, RideStatus, is_valid_status
from .errors import (
    CannotAssignDriverToNonPendingRideError,
    CannotChangeCompletedRideError,
    DestinationRequiredError,
    DriverAlreadyAssignedToRideError,
    DriverIDRequiredError,
    InvalidRideStatusError,
    OriginRequiredError,
    PassengerIDRequiredError,
    RideAlreadyAssignedError,
    RideIDRequiredError,
)


class RideStore(Protocol):
    """Storage the ride service works against."""

    def save_ride(self, ride: Ride) -> None: ...

    def find_ride_by_id(self, ride_id: str) -> Ride: ...

    def update_ride_status(self, ride_id: str, status) -> None: ...

    def assign_driver_to_ride(self, ride_id: str, driver_id: str) -> None: ...

    def get_all_rides(self) -> list[Ride]: ...


class RideService:
    """Validates requests and applies them to a ride store."""

    def __init__(self, store: RideStore):
        self._store = store

    def create_ride(self, passenger_id: str, origin: str, destination: str) -> Ride:
        if not passenger_id:
            raise PassengerIDRequiredError()
        if not origin:
            raise OriginRequiredError()
        if not destination:
            raise DestinationRequiredError()
        ride = Ride(
            passenger_id=passenger_id,
            origin=origin,
            destination=destination,
            status=RideStatus.PENDING,
        )
        self._store.save_ride(ride)
        return ride

    def get_ride(self, ride_id: str) -> Ride:
        if not ride_id:
            raise RideIDRequiredError()
        return self._store.find_ride_by_id(ride_id)

    def get_all_rides(self) -> list[Ride]:
        return self._store.get_all_rides()

    def update_ride_status(self, ride_id: str, status) -> None:
        if not ride_id:
            raise RideIDRequiredError()
        ride = self._store.find_ride_by_id(ride_id)
        if ride.status == RideStatus.COMPLETED and status != RideStatus.COMPLETED:
            raise CannotChangeCompletedRideError()
        if not is_valid_status(status):
            raise InvalidRideStatusError()
        ride.status = RideStatus(status)
        self._store.update_ride_status(ride_id, ride.status)

    def assign_driver_to_ride(self, ride_id: str, driver_id: str) -> None:
        if not ride_id:
            raise RideIDRequiredError()
        if not driver_id:
            raise DriverIDRequiredError()
        ride = self._store.find_ride_by_id(ride_id)
        if ride.driver_id:
            if ride.driver_id == driver_id:
                raise DriverAlreadyAssignedToRideError()
            raise RideAlreadyAssignedError()
        if ride.status != RideStatus.PENDING:
            raise CannotAssignDriverToNonPendingRideError()
        ride.driver_id = driver_id
        ride.status = RideStatus.ACCEPTED
        self._store.assign_driver_to_ride(ride_id, driver_id)