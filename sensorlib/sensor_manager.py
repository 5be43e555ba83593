"""A bounded store of sensor readings with a simulated database link."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterator, Sequence

MAX_SENSOR_NODES = 10
MAX_SENSOR_TYPE = 50


class SensorManagerError(Exception):
    """Base class for sensor manager errors."""


class StorageFullError(SensorManagerError):
    """Raised when no more readings can be stored."""


class DatabaseNotConnectedError(SensorManagerError):
    """Raised when pushing data without a database connection."""


@dataclass(frozen=True)
class SensorNode:
    """One collected sensor reading."""

    id: int
    sensor_type: str
    value: float

    def format(self) -> str:
        return f"ID: {self.id}, Type: {self.sensor_type}, Value: {self.value:.2f}"


class SensorManager:
    """Collects up to MAX_SENSOR_NODES readings and pushes them to a database."""

    def __init__(self) -> None:
        self._nodes: list[SensorNode] = []
        self.is_db_connected = False

    def collect(self, sensor_id: int, value: float, sensor_type: str) -> SensorNode:
        """Store a reading; the type name is cut to MAX_SENSOR_TYPE - 1 characters."""
        if len(self._nodes) >= MAX_SENSOR_NODES:
            raise StorageFullError("Memory full, cannot collect more data.")
        node = SensorNode(sensor_id, sensor_type[: MAX_SENSOR_TYPE - 1], float(value))
        self._nodes.append(node)
        return node

    def connect_database(self) -> None:
        self.is_db_connected = True

    def push_to_database(self) -> tuple[SensorNode, ...]:
        """Return the readings pushed; raise if the database is not connected."""
        if not self.is_db_connected:
            raise DatabaseNotConnectedError("Cannot push data, database not connected.")
        return tuple(self._nodes)

    def format_data(self) -> str:
        if not self._nodes:
            return "No sensor data available."
        return "\n".join(["Sensor data list:", *(node.format() for node in self._nodes)])

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SensorNode]:
        return iter(self._nodes)


_instance: SensorManager | None = None


def get_instance() -> SensorManager:
    """Return the shared manager, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = SensorManager()
    return _instance


def destroy_instance() -> bool:
    """Drop the shared manager; return whether one existed."""
    global _instance
    existed = _instance is not None
    _instance = None
    return existed


def main(argv: Sequence[str] | None = None) -> int:
    """Collect sample readings, print them and push them to the database."""
    parser = argparse.ArgumentParser(description="Run the sensor manager demo.")
    parser.parse_args(argv)

    created = _instance is None
    manager = get_instance()
    if created:
        print("SensorManager instance created.")

    manager.connect_database()
    print("Database connection established.")

    for sensor_id, value, sensor_type in (
        (1, 23.5, "Temperature"),
        (2, 45.2, "Humidity"),
        (3, 1015.0, "Pressure"),
    ):
        try:
            manager.collect(sensor_id, value, sensor_type)
        except StorageFullError as exc:
            print(exc)
        else:
            print(f"Data collected: ID={sensor_id}, Type={sensor_type}, Value={value:.2f}")

    print(manager.format_data())

    try:
        manager.push_to_database()
    except DatabaseNotConnectedError as exc:
        print(exc)
    else:
        print("Pushing data to the database...")
        print("Data successfully stored in the database.")

    if destroy_instance():
        print("SensorManager instance destroyed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())