"""Simulated sensors that produce formatted random readings."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from typing import Callable, Protocol, Sequence


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


Reader = Callable[[_RandomSource], str]


def read_temperature(rng: _RandomSource) -> str:
    """Return a temperature reading between 0.0 and 29.9 degrees Celsius."""
    temperature = rng.randrange(300) / 10.0
    return f"Temperature Sensor: {temperature:.1f}°C"


def read_humidity(rng: _RandomSource) -> str:
    """Return a relative humidity reading between 0 and 100 percent."""
    humidity = float(rng.randrange(101))
    return f"Humidity Sensor: {humidity:.0f}%"


def read_pressure(rng: _RandomSource) -> str:
    """Return a pressure reading between 900 and 1099 hPa."""
    pressure = float(900 + rng.randrange(200))
    return f"Pressure Sensor: {pressure:.1f} hPa"


def read_light(rng: _RandomSource) -> str:
    """Return a light reading between 0 and 9999 lux."""
    light = rng.randrange(10000)
    return f"Light Sensor: {light} lux"


_READERS: dict[str, Reader] = {
    "Temperature": read_temperature,
    "Humidity": read_humidity,
    "Pressure": read_pressure,
    "Light": read_light,
}

SENSOR_TYPES: tuple[str, ...] = tuple(_READERS)


@dataclass(frozen=True)
class Sensor:
    """A sensor of a given type that reads from a random source."""

    sensor_type: str
    reader: Reader
    rng: _RandomSource = field(default_factory=random.Random)

    def read(self) -> str:
        """Take one reading and return it as a display line."""
        return self.reader(self.rng)


def create_sensor(sensor_type: str, rng: _RandomSource | None = None) -> Sensor:
    """Build a sensor for the named type; raise ValueError for unknown types."""
    try:
        reader = _READERS[sensor_type]
    except KeyError:
        raise ValueError(f"unknown sensor type: {sensor_type!r}") from None
    return Sensor(sensor_type, reader, rng if rng is not None else random.Random())


def main(argv: Sequence[str] | None = None) -> int:
    """Create one sensor of each type and print a reading from each."""
    parser = argparse.ArgumentParser(description="Print one reading from each sensor.")
    parser.parse_args(argv)
    rng = random.Random()
    for sensor_type in SENSOR_TYPES:
        print(create_sensor(sensor_type, rng).read())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())