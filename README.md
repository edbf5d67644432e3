# pocketapps

Two small applications in one package:

- **taxi** (`pocketapps.taxi`): an HTTP API for booking taxi rides, built on
  Flask. It keeps everything in memory.
- **wordle** (`pocketapps.wordle`): the five-letter word guessing game, played
  in your terminal.

## The taxi ride API

Start the server:

```
taxi-api
```

Options:

- `--host`: the address to listen on (default `0.0.0.0`)
- `--port`: the port to listen on (default `8080`)

It serves these routes:

| Method | Path                 | Body                                                              | Success |
|--------|----------------------|-------------------------------------------------------------------|---------|
| POST   | `/rides`             | `{"passenger_id": "...", "origin": "...", "destination": "..."}` | 201 with the new ride |
| GET    | `/rides`             |                                                                   | 200 with a list of every ride |
| GET    | `/rides/<id>`        |                                                                   | 200 with the ride |
| PUT    | `/rides/<id>/driver` | `{"driver_id": "..."}`                                            | 200 with a confirmation |

A ride looks like this:

```json
{
  "id": "1",
  "passenger_id": "p-1",
  "driver_id": "",
  "origin": "Central Station",
  "destination": "Airport",
  "status": "pending"
}
```

Ride ids are handed out in order, starting at `"1"`. A new ride is `pending`.
Assigning a driver to a pending ride moves it to `accepted`. The confirmation
of an assignment is
`{"driver_id": "...", "message": "Driver assigned successfully", "ride_id": "..."}`.

Errors come back as plain text with status 400, for example:

- `passenger ID is required`, `origin is required`, `destination is required`
- `drive ID is required` when no driver id is given
- `ride not found`
- `ride already assigned`, or `this driver already assigned to this ride`
  when the same driver is assigned twice
- `cannot assign driver to non pending ride`

A body that is not a JSON object with string fields is rejected with 400:
`invalid JSON` when creating a ride, `Invalid request payload` when assigning
a driver.

### Using it from Python

The layers can be put together by hand, for instance to embed the API in
another application or to test against it:

```python
from pocketapps.taxi.endpoints import create_app
from pocketapps.taxi.service import RideService
from pocketapps.taxi.storage import RideMemory

service = RideService(RideMemory())
app = create_app(service)

ride = service.create_ride("p-1", "Central Station", "Airport")
service.assign_driver_to_ride(ride.id, "d-7")
print(service.get_ride(ride.id).to_dict())
```

`pocketapps.taxi.server.build_app()` returns an application wired the same
way as the `taxi-api` command uses it.

`RideService` also has `update_ride_status(ride_id, status)`, which accepts
`pending`, `accepted`, `completed` or `cancelled` (see
`pocketapps.taxi.entity.RideStatus`) and refuses to move a completed ride to
any other status.

Service and storage methods raise subclasses of
`pocketapps.taxi.errors.TaxiError`, such as `RideNotFoundError`,
`InvalidRideStatusError` or `RideAlreadyAssignedError`.

### What it does not do

- Rides live only in memory and are lost when the server stops.
- There is no HTTP route for changing a ride's status; that is only available
  through `RideService.update_ride_status`.
- `Driver` and `Passenger` exist as data classes in `pocketapps.taxi.entity`,
  but there is no storage, service or route for drivers or passengers. Driver
  and passenger ids on a ride are plain strings that are not checked against
  anything.

## Wordle

Play a game:

```
wordle
```

A secret five-letter word is fetched from an online random word service, so
you need a network connection; `--url` points the game at another service that
answers with a JSON array of words. You have six tries. After each guess every
letter is coloured:

- green: right letter, right place
- yellow: the letter is in the word, somewhere else
- gray: the letter is not in the word (or not that many times)

A keyboard below the guess shows the best colour seen so far for every letter.
Input is lower-cased, and entries that are not five characters long are asked
for again. Ending the input (Ctrl-D) quits the game.

The game logic can be used on its own:

```python
from pocketapps.wordle.logic import check_guess, is_win

feedback = check_guess("crane", "caper")
print([(f.letter, f.status.value) for f in feedback])
print(is_win(feedback))
```

`pocketapps.wordle.cli.play(secret_word, stream, out)` plays one round against
a word you choose, reading guesses from `stream` and writing to `out`; it
returns the number of tries on a win and `None` on a loss.

## Running the tests

Install the `test` extra and run pytest from the project directory.