"""In-memory ride storage."""

import threading

from .entity import Ride
from .errors import RideNotFoundError


class RideMemory:
    """Thread-safe store that keeps rides in a dictionary keyed by id."""

    def __init__(self):
        self._lock = threading.Lock()
        self._rides: dict[str, Ride] = {}
        self._next_id = 1

    def save_ride(self, ride: Ride) -> None:
        """Assign the next id to *ride* and store it."""
        with self._lock:
            ride.id = str(self._next_id)
            self._rides[ride.id] = ride
            self._next_id += 1

    def find_ride_by_id(self, ride_id: str) -> Ride:
        with self._lock:
            try:
                return self._rides[ride_id]
            except KeyError:
                raise RideNotFoundError() from None

    def update_ride_status(self, ride_id: str, status) -> None:
        with self._lock:
            ride = self._rides.get(ride_id)
            if ride is None:
                raise RideNotFoundError()
            ride.status = status

    def assign_driver_to_ride(self, ride_id: str, driver_id: str) -> None:
        with self._lock:
            ride = self._rides.get(ride_id)
            if ride is None:
                raise RideNotFoundError()
            ride.driver_id = driver_id

    def get_all_rides(self) -> list[Ride]:
        with self._lock:
            return list(self._rides.values())