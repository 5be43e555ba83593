"""Simulated sensors, a shared sensor data manager and an in-memory library system."""

__version__ = "0.1.0"