import pytest

from pocketapps.taxi import errors


def _all_default_errors():
    return [
        errors.RideNotFoundError(),
        errors.RideIDRequiredError(),
        errors.OriginRequiredError(),
        errors.DestinationRequiredError(),
        errors.PassengerIDRequiredError(),
        errors.InvalidRideStatusError(),
        errors.CannotChangeCompletedRideError(),
        errors.DriverIDRequiredError(),
        errors.CannotAssignDriverToNonPendingRideError(),
        errors.RideAlreadyAssignedError(),
        errors.DriverAlreadyAssignedToRideError(),
    ]


def test_default_messages():
    assert str(errors.RideNotFoundError()) == "ride not found"
    assert str(errors.RideIDRequiredError()) == "ride ID is required"
    assert str(errors.OriginRequiredError()) == "origin is required"
    assert str(errors.DestinationRequiredError()) == "destination is required"
    assert str(errors.PassengerIDRequiredError()) == "passenger ID is required"
    assert str(errors.InvalidRideStatusError()) == "invalid ride status"
    assert (
        str(errors.CannotChangeCompletedRideError()) == "cannot change completed ride"
    )
    assert str(errors.DriverIDRequiredError()) == "drive ID is required"
    assert (
        str(errors.CannotAssignDriverToNonPendingRideError())
        == "cannot assign driver to non pending ride"
    )
    assert str(errors.RideAlreadyAssignedError()) == "ride already assigned"
    assert (
        str(errors.DriverAlreadyAssignedToRideError())
        == "this driver already assigned to this ride"
    )


def test_every_error_shares_base_class_and_message():
    instances = _all_default_errors()
    assert len(instances) == 11
    for err in instances:
        assert isinstance(err, errors.TaxiError)
        assert isinstance(err, Exception)
        assert str(err) != ""


def test_ride_not_found_keeps_message_through_base_class():
    err = errors.RideNotFoundError()
    with pytest.raises(errors.TaxiError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == "ride not found"


def test_ride_already_assigned_is_not_ride_not_found():
    err = errors.RideAlreadyAssignedError()
    assert isinstance(err, errors.TaxiError)
    assert not isinstance(err, errors.RideNotFoundError)
    assert str(err) == "ride already assigned"


def test_driver_id_required_message():
    err = errors.DriverIDRequiredError()
    assert isinstance(err, errors.TaxiError)
    assert str(err) == "drive ID is required"


def test_custom_message_overrides_default():
    err = errors.RideNotFoundError("ride 42 is gone")
    assert str(err) == "ride 42 is gone"


def test_messages_are_distinct():
    texts = [str(err) for err in _all_default_errors()]
    assert len(texts) == 11
    assert len(set(texts)) == len(texts)