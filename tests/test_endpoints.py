from http import HTTPStatus

import pytest

from pocketapps.taxi.endpoints import RideHandler, create_app
from pocketapps.taxi.service import RideService
from pocketapps.taxi.storage import RideMemory

RIDE = {"passenger_id": "p1", "origin": "Airport", "destination": "Center"}


@pytest.fixture
def service():
    return RideService(RideMemory())


@pytest.fixture
def client(service):
    return create_app(service).test_client()


def test_create_ride_returns_created_ride(client):
    resp = client.post("/rides", json=RIDE)
    assert resp.status_code == HTTPStatus.CREATED
    assert resp.content_type == "application/json"
    body = resp.get_json()
    assert body["status"] == "pending"
    assert body["driver_id"] == ""
    assert {k: body[k] for k in RIDE} == RIDE


def test_create_ride_invalid_json(client):
    resp = client.post("/rides", data="{not json", content_type="application/json")
    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.get_data(as_text=True) == "invalid JSON\n"


def test_create_ride_wrong_field_type(client):
    resp = client.post("/rides", json={"passenger_id": 5, "origin": "A", "destination": "B"})
    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.get_data(as_text=True) == "invalid JSON\n"


def test_create_ride_validation_error(client):
    resp = client.post("/rides", json={"origin": "A", "destination": "B"})
    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.get_data(as_text=True) == "passenger ID is required\n"


def test_get_ride_round_trip(client):
    created = client.post("/rides", json=RIDE).get_json()
    resp = client.get(f"/rides/{created['id']}")
    assert resp.status_code == HTTPStatus.OK
    assert resp.get_json() == created


def test_get_missing_ride(client):
    resp = client.get("/rides/99")
    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.get_data(as_text=True) == "ride not found\n"


def test_get_all_rides(client):
    assert client.get("/rides").get_json() == []
    ids = {client.post("/rides", json=RIDE).get_json()["id"] for _ in range(2)}
    resp = client.get("/rides")
    assert resp.status_code == HTTPStatus.OK
    assert {r["id"] for r in resp.get_json()} == ids


def test_assign_driver(client):
    ride_id = client.post("/rides", json=RIDE).get_json()["id"]
    resp = client.put(f"/rides/{ride_id}/driver", json={"driver_id": "d1"})
    assert resp.status_code == HTTPStatus.OK
    assert resp.get_json() == {
        "message": "Driver assigned successfully",
        "ride_id": ride_id,
        "driver_id": "d1",
    }
    ride = client.get(f"/rides/{ride_id}").get_json()
    assert ride["driver_id"] == "d1"
    assert ride["status"] == "accepted"


def test_assign_driver_twice(client):
    ride_id = client.post("/rides", json=RIDE).get_json()["id"]
    client.put(f"/rides/{ride_id}/driver", json={"driver_id": "d1"})
    resp = client.put(f"/rides/{ride_id}/driver", json={"driver_id": "d2"})
    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.get_data(as_text=True) == "ride already assigned\n"


def test_assign_driver_bad_payload(client):
    ride_id = client.post("/rides", json=RIDE).get_json()["id"]
    resp = client.put(f"/rides/{ride_id}/driver", data="[]", content_type="application/json")
    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.get_data(as_text=True) == "Invalid request payload\n"


def test_assign_driver_empty_id(client):
    ride_id = client.post("/rides", json=RIDE).get_json()["id"]
    resp = client.put(f"/rides/{ride_id}/driver", json={})
    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.get_data(as_text=True) == "drive ID is required\n"


def test_wrong_method_rejected(client):
    resp = client.delete("/rides")
    assert resp.status_code == HTTPStatus.METHOD_NOT_ALLOWED


def test_handler_rejects_empty_ride_id(service):
    handler = RideHandler(service)
    resp = handler.get_ride("")
    assert resp.status_code == HTTPStatus.BAD_REQUEST
    assert resp.get_data(as_text=True) == "ride ID is required\n"
    resp = handler.assign_driver_to_ride("")
    assert resp.get_data(as_text=True) == "ride ID is required\n"