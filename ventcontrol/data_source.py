# Import Libraries
from pathlib import Path
from typing import Protocol
from ventcontrol.errors import SensorReadError
import logging
import math
import polars as pl
import random
import sys

# Initialization
logger = logging.getLogger(__name__)

class DataSource(Protocol):
    def read(self, kind: str, min_value: float, max_value: float) -> float:
        ...

class UniformDataSource:
    """Simulated readings, uniformly distributed within the sensor's bounds."""

    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def read(self, kind: str, min_value: float, max_value: float) -> float:
        return self._random.uniform(min_value, max_value)

class RecordedDataSource:
    """
    Replays recorded readings, one series per sensor kind.

    Each call to `read` returns the next value of the series for that kind,
    regardless of the sensor's bounds, so recorded values may fall out of range.
    """

    def __init__(self, readings: dict[str, list[float]]):
        self._readings = {kind: list(values) for kind, values in readings.items()}
        self._positions = {kind: 0 for kind in self._readings}

    def read(self, kind: str, min_value: float, max_value: float) -> float:
        if kind not in self._readings:
            raise SensorReadError(f"No recorded readings for sensor '{kind}'")
        position = self._positions[kind]
        values = self._readings[kind]
        # Skip gaps (nulls) in the recording.
        while position < len(values) and values[position] is None:
            position += 1
        if position >= len(values):
            self._positions[kind] = position
            raise SensorReadError(f"Recorded readings for sensor '{kind}' are exhausted")
        self._positions[kind] = position + 1
        value = float(values[position])
        if math.isnan(value):
            raise SensorReadError(f"Recorded reading #{position} for sensor '{kind}' is NaN")
        return value

def _read_data_file(base_path: Path) -> pl.DataFrame:
    parquet_path = base_path.with_suffix('.parquet')
    csv_path = base_path.with_suffix('.csv')
    if parquet_path.exists():
        logger.info(f"Reading Parquet file: {parquet_path}")
        return pl.read_parquet(parquet_path)
    elif csv_path.exists():
        logger.info(f"Reading CSV file: {csv_path}")
        cols = pl.read_csv(csv_path, n_rows=0, infer_schema_length=0).columns
        return pl.read_csv(csv_path, schema_overrides={col: pl.Float64 for col in cols})
    else:
        logger.error(f"No .parquet or .csv file found for base path: {base_path}")
        sys.exit(1)

def load_recorded_readings(base_path: Path) -> RecordedDataSource:
    """
    Loads a recording with one column per sensor kind and one row per cycle.

    Args:
        base_path (Path): Path of the recording without suffix; `.parquet` is preferred over `.csv`.

    Returns:
        RecordedDataSource: A data source replaying the recorded columns.
    """
    readings_df = _read_data_file(base_path)
    readings_df = readings_df.with_columns(pl.all().cast(pl.Float64))
    logger.info(f"Loaded {readings_df.height} recorded cycles for sensors: {readings_df.columns}")
    return RecordedDataSource(readings_df.to_dict(as_series=False))

def build_data_source(config: dict, base_dir: Path) -> DataSource:
    """
    Creates the data source described by the optional `data_source` config section.

    Args:
        config (dict): The validated configuration.
        base_dir (Path): Directory that relative recording paths are resolved against.

    Returns:
        DataSource: A uniform simulator (the default) or a recorded-readings replay.
    """
    source_config = config.get("data_source") or {"type": "uniform"}
    source_type = source_config.get("type", "uniform")
    if source_type == "uniform":
        return UniformDataSource(seed=source_config.get("seed"))
    if source_type == "recorded":
        if "path" not in source_config:
            raise ValueError("Configuration Error: 'path' is missing from 'data_source'")
        return load_recorded_readings(base_dir / source_config["path"])
    raise ValueError(f"Configuration Error: Unknown data source type '{source_type}'")
