import pytest

from sensorlib.sensor_manager import (
    MAX_SENSOR_NODES,
    MAX_SENSOR_TYPE,
    DatabaseNotConnectedError,
    SensorManager,
    SensorManagerError,
    SensorNode,
    StorageFullError,
    destroy_instance,
    get_instance,
    main,
)


@pytest.fixture(autouse=True)
def _reset_singleton():
    destroy_instance()
    yield
    destroy_instance()


def test_new_manager_is_empty():
    manager = SensorManager()
    assert len(manager) == 0
    assert manager.is_db_connected is False
    assert manager.format_data() == "No sensor data available."


def test_collect_stores_in_order():
    manager = SensorManager()
    manager.collect(1, 23.5, "Temperature")
    manager.collect(2, 45.2, "Humidity")
    assert [node.id for node in manager] == [1, 2]
    assert [node.sensor_type for node in manager] == ["Temperature", "Humidity"]
    assert len(manager) == 2


def test_collect_returns_node():
    node = SensorManager().collect(3, 1015.0, "Pressure")
    assert node == SensorNode(3, "Pressure", 1015.0)


def test_collect_beyond_capacity_raises():
    manager = SensorManager()
    for i in range(MAX_SENSOR_NODES):
        manager.collect(i, float(i), "Light")
    with pytest.raises(StorageFullError):
        manager.collect(99, 1.0, "Light")
    assert len(manager) == MAX_SENSOR_NODES


def test_long_type_is_truncated():
    node = SensorManager().collect(1, 1.0, "x" * 80)
    assert node.sensor_type == "x" * (MAX_SENSOR_TYPE - 1)


def test_push_without_connection_raises():
    manager = SensorManager()
    manager.collect(1, 1.0, "Light")
    with pytest.raises(DatabaseNotConnectedError):
        manager.push_to_database()


def test_errors_share_base_class():
    manager = SensorManager()
    with pytest.raises(SensorManagerError):
        manager.push_to_database()
    for i in range(MAX_SENSOR_NODES):
        manager.collect(i, float(i), "Light")
    with pytest.raises(SensorManagerError):
        manager.collect(99, 1.0, "Light")
    assert len(manager) == MAX_SENSOR_NODES


def test_push_after_connect_returns_nodes():
    manager = SensorManager()
    manager.collect(1, 23.5, "Temperature")
    manager.connect_database()
    assert manager.is_db_connected is True
    assert manager.push_to_database() == tuple(manager)


def test_format_data_lists_readings():
    manager = SensorManager()
    manager.collect(1, 23.5, "Temperature")
    manager.collect(3, 1015.0, "Pressure")
    lines = manager.format_data().splitlines()
    assert lines[0] == "Sensor data list:"
    assert lines[1] == "ID: 1, Type: Temperature, Value: 23.50"
    assert lines[1:] == [node.format() for node in manager]


def test_singleton_returns_same_instance():
    first = get_instance()
    first.collect(7, 2.5, "Humidity")
    second = get_instance()
    assert len(second) == 1
    assert [node.id for node in second] == [7]


def test_destroy_creates_fresh_instance():
    first = get_instance()
    first.collect(1, 1.0, "Light")
    assert destroy_instance() is True
    assert destroy_instance() is False
    second = get_instance()
    assert second is not first
    assert len(second) == 0


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "SensorManager instance created."
    assert lines[1] == "Database connection established."
    assert lines[2] == "Data collected: ID=1, Type=Temperature, Value=23.50"
    assert "Sensor data list:" in lines
    assert lines[-3] == "Pushing data to the database..."
    assert lines[-2] == "Data successfully stored in the database."
    assert lines[-1] == "SensorManager instance destroyed."
    assert destroy_instance() is False