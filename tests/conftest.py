# Import Libraries
from ventcontrol.control_loop import ControlLoop
from ventcontrol.data_source import RecordedDataSource
import pytest
import yaml

@pytest.fixture(scope="session")
def project_root(tmp_path_factory):
    """Creates a temporary root directory for the entire test session."""
    return tmp_path_factory.mktemp("project")

@pytest.fixture(scope="session")
def mock_config_path(project_root):
    """
    Creates a fake config.yaml file in a temporary directory and returns its path.
    This allows tests to run with a known, consistent configuration.
    """
    config_data = {
        "sensors": [
            {"kind": "Temperature", "min": 18.0, "max": 25.0},
            {"kind": "Humidity", "min": 30.0, "max": 60.0}
        ],
        "actuators": [{"kind": "Heater"}, {"kind": "Cooler"}],
        "pairings": {"Temperature": "Heater", "Humidity": "Cooler"},
        "targets": {"Temperature": 22.0, "Humidity": 50.0},
        "gains": {"k_p": 1.0, "k_i": 0.5},
        "simulation": {"cycles": 3, "interval_seconds": 2},
        "data_source": {"type": "uniform", "seed": 7},
        "diagnostics": {"log_file": str(project_root / "logs" / "system_log.txt")}
    }
    config_path = project_root / "config.yaml"
    with open(config_path, 'w') as file:
        yaml.dump(config_data, file)
    return config_path

@pytest.fixture
def base_config(mock_config_path):
    """
    A fixture that loads the mock config file and returns it as a Python dictionary.
    Each test gets a fresh copy, so tests may modify it freely.
    """
    from ventcontrol.config import load_config
    return load_config(mock_config_path)

@pytest.fixture
def recorded_source():
    """
    Provides a data source with known readings, so control actions can be
    asserted exactly instead of depending on random samples.
    """
    return RecordedDataSource({
        "Temperature": [20.0, 0.0, 30.0],
        "Humidity": [55.0, 45.0, 40.0]
    })

@pytest.fixture
def loop():
    """An empty control loop using the default Temperature -> Heater pairing."""
    return ControlLoop()
