[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sensorlib"
version = "0.1.0"
description = "Simulated sensor readings, a shared sensor data manager and a small in-memory library management system"
requires-python = ">=3.10"
dependencies = []
keywords = ["sensors", "factory", "singleton", "library", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sensorlib-sensors = "sensorlib.sensor:main"
sensorlib-manager = "sensorlib.sensor_manager:main"
sensorlib-library = "sensorlib.library_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sensorlib"]

[tool.pytest.ini_options]
addopts = "-ra"
