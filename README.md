# sensorlib

Three small teaching examples in one package:

- **Sensors** (`sensorlib.sensor`): `create_sensor(sensor_type, rng=None)` builds a
  `Sensor` for `"Temperature"`, `"Humidity"`, `"Pressure"` or `"Light"`. Any other
  type raises `ValueError`. `Sensor.read()` returns one simulated reading as a display line:
  - temperature from 0.0 to 29.9 °C
  - humidity from 0 to 100 %
  - pressure from 900 to 1099 hPa
  - light from 0 to 9999 lux

  Pass a `random.Random` with a fixed seed to get repeatable readings.
- **Sensor manager** (`sensorlib.sensor_manager`): `get_instance()` returns one
  shared `SensorManager` and `destroy_instance()` drops it.
  - `collect(sensor_id, value, sensor_type)` stores up to `MAX_SENSOR_NODES` (10)
    readings as `SensorNode`s. Type names are cut to 49 characters.
  - `connect_database()` marks the database as connected.
  - `push_to_database()` returns the stored readings.
  - `format_data()` lists the stored readings.
  - A manager supports `len()` and iteration.
- **Library** (`sensorlib.library`): a `Library` of `Book`s (at most 100) and
  `User`s (at most 50).
  - Books and users can be added, edited, deleted and found by ID.
  - A user can borrow up to 10 books and return them.
  - `search(keyword)` finds books whose title or author contains the keyword.
  - `available_books()` lists the books that are not lent out.
  - `user_loans()` pairs each user with the books they hold.

  `sensorlib.library_cli` runs an interactive numbered menu on top of it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line use

```
sensorlib-sensors    # print one simulated reading from each kind of sensor
sensorlib-manager    # collect three sample readings, list them and push them
sensorlib-library    # interactive library management menu
```

`sensorlib-library` reads one answer per line. It stops when you choose `0` or
when input ends. Menu entry 4 lists the books that are available. Menu entry 8
lists each user with the books they have borrowed. Failed operations print a
message and return to the menu.

## Library use

```python
import random
from sensorlib.sensor import create_sensor

sensor = create_sensor("Temperature", random.Random(1))
print(sensor.read())
```

```python
from sensorlib.sensor_manager import get_instance, destroy_instance

manager = get_instance()
manager.collect(1, 23.5, "Temperature")
manager.connect_database()
manager.push_to_database()
print(manager.format_data())
destroy_instance()
```

```python
from sensorlib.library import Library

library = Library()
library.add_book(1, "Dune", "Frank Herbert")
library.add_user(7, "Ada")
library.borrow_book(7, 1)
for book in library.available_books():
    print(book.format())
```

When an operation cannot be carried out, it raises an exception.
`SensorManagerError` is the base class for the sensor manager's errors:

- `StorageFullError`
- `DatabaseNotConnectedError`

`LibraryError` is the base class for the library's errors:

- `CapacityError`
- `NotFoundError`
- `BorrowError`

## What it does not do

- The sensors read no real hardware. Their values come from a random number
  generator.
- The sensor manager's "database" is only a flag. `push_to_database()` stores
  nothing anywhere.
- The library lives in memory only. Nothing is saved between runs of
  `sensorlib-library`.