"""HTTP handlers for the ride API."""

import json
from http import HTTPStatus

from flask import Flask, Response, request

from .errors import RideIDRequiredError, TaxiError
from .service import RideService


class _BadPayload(ValueError):
    pass


def _error(message: str, status: HTTPStatus) -> Response:
    return Response(message + "\n", status=status, mimetype="text/plain")


def _json(payload, status: HTTPStatus) -> Response:
    body = json.dumps(payload, ensure_ascii=False, sort_keys=isinstance(payload, dict) and "message" in payload)
    return Response(body + "\n", status=status, mimetype="application/json")


def _decode_fields(*fields: str) -> dict:
    """Read the first JSON value of the request body and pull string fields from it."""
    text = request.get_data(as_text=True).lstrip()
    try:
        data, _ = json.JSONDecoder().raw_decode(text)
    except json.JSONDecodeError:
        raise _BadPayload() from None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise _BadPayload()
    values = {}
    for field in fields:
        value = data.get(field)
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise _BadPayload()
        values[field] = value
    return values


class RideHandler:
    """Turns HTTP requests into ride service calls."""

    def __init__(self, service: RideService):
        self._service = service

    def create_ride(self) -> Response:
        try:
            req = _decode_fields("passenger_id", "origin", "destination")
        except _BadPayload:
            return _error("invalid JSON", HTTPStatus.BAD_REQUEST)
        try:
            ride = self._service.create_ride(
                req["passenger_id"], req["origin"], req["destination"]
            )
        except TaxiError as err:
            return _error(str(err), HTTPStatus.BAD_REQUEST)
        return _json(ride.to_dict(), HTTPStatus.CREATED)

    def get_ride(self, ride_id: str) -> Response:
        if not ride_id:
            return _error(str(RideIDRequiredError()), HTTPStatus.BAD_REQUEST)
        try:
            ride = self._service.get_ride(ride_id)
        except TaxiError as err:
            return _error(str(err), HTTPStatus.BAD_REQUEST)
        return _json(ride.to_dict(), HTTPStatus.OK)

    def get_all_rides(self) -> Response:
        try:
            rides = self._service.get_all_rides()
        except TaxiError as err:
            return _error(str(err), HTTPStatus.INTERNAL_SERVER_ERROR)
        return _json([ride.to_dict() for ride in rides], HTTPStatus.OK)

    def assign_driver_to_ride(self, ride_id: str) -> Response:
        if not ride_id:
            return _error(str(RideIDRequiredError()), HTTPStatus.BAD_REQUEST)
        try:
            req = _decode_fields("driver_id")
        except _BadPayload:
            return _error("Invalid request payload", HTTPStatus.BAD_REQUEST)
        driver_id = req["driver_id"]
        try:
            self._service.assign_driver_to_ride(ride_id, driver_id)
        except TaxiError as err:
            return _error(str(err), HTTPStatus.BAD_REQUEST)
        return _json(
            {
                "message": "Driver assigned successfully",
                "ride_id": ride_id,
                "driver_id": driver_id,
            },
            HTTPStatus.OK,
        )


def create_app(service: RideService) -> Flask:
    """Build the Flask application that serves the ride API."""
    handler = RideHandler(service)
    app = Flask(__name__)
    app.add_url_rule("/rides", "create_ride", handler.create_ride, methods=["POST"])
    app.add_url_rule("/rides", "get_all_rides", handler.get_all_rides, methods=["GET"])
    app.add_url_rule("/rides/<ride_id>", "get_ride", handler.get_ride, methods=["GET"])
    app.add_url_rule(
        "/rides/<ride_id>/driver",
        "assign_driver_to_ride",
        handler.assign_driver_to_ride,
        methods=["PUT"],
    )
    return app