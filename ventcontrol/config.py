# Import Libraries
from pathlib import Path
import logging
import yaml

# Initialization
logger = logging.getLogger(__name__)

# Define a constant path to the configuration file.
# `__file__` is the current file, `.parent.parent` goes up two directories to the project root.
CONFIG_PATH = Path(__file__).parent.parent / 'config.yaml'
REQUIRED_SECTIONS = ["sensors", "actuators", "targets", "gains", "simulation", "diagnostics"]

def load_config(config_path: Path = CONFIG_PATH) -> dict:
    """
    Loads, parses, and returns the YAML configuration file.

    Args:
        config_path (Path): The path to the YAML configuration file.

    Returns:
        dict: The configuration loaded as a Python dictionary.
    """
    with open(config_path, 'r') as file:
        config = yaml.safe_load(file)
    return config

def validate_config(config: dict):
    for section in REQUIRED_SECTIONS:
        if section not in config:
            raise ValueError(f"Configuration Error: Section '{section}' is missing from config.yaml")
    for index, sensor in enumerate(config["sensors"]):
        for key in ("kind", "min", "max"):
            if key not in sensor:
                raise ValueError(f"Configuration Error: Key '{key}' is missing from sensor #{index}")
        if not sensor["min"] < sensor["max"]:
            raise ValueError(f"Configuration Error: Sensor '{sensor['kind']}' has min >= max")
    for index, actuator in enumerate(config["actuators"]):
        if "kind" not in actuator:
            raise ValueError(f"Configuration Error: Key 'kind' is missing from actuator #{index}")
    for key in ("k_p", "k_i"):
        if key not in config["gains"]:
            raise ValueError(f"Configuration Error: Gain '{key}' is missing from 'gains'")
    for key in ("cycles", "interval_seconds"):
        if key not in config["simulation"]:
            raise ValueError(f"Configuration Error: '{key}' is missing from 'simulation'")
    if "log_file" not in config["diagnostics"]:
        raise ValueError("Configuration Error: 'log_file' is missing from 'diagnostics'")
    logger.info("All required configuration sections and keys are present.")
