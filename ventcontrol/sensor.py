# Import Libraries
from typing import Callable
from ventcontrol.data_source import DataSource, UniformDataSource
from ventcontrol.errors import InvalidBounds, SensorReadError
from ventcontrol.events import Calibrated, Event
import logging

# Initialization
logger = logging.getLogger(__name__)

class Sensor:
    """
    A sensor with calibration bounds and the last value it read.

    Readings come from a pluggable data source; by default readings are
    simulated uniformly within the current bounds.
    """

    def __init__(self, kind: str, min_value: float, max_value: float,
                 source: DataSource | None = None, emit: Callable[[Event], None] | None = None):
        if not min_value < max_value:
            raise InvalidBounds(kind, min_value, max_value)
        self._kind = kind
        self._min_value = float(min_value)
        self._max_value = float(max_value)
        self._last_value: float | None = None
        self._operational = True
        self._source = source if source is not None else UniformDataSource()
        self._emit = emit

    def __repr__(self):
        return f"Sensor({self._kind!r}, {self._min_value}, {self._max_value})"

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def min_value(self) -> float:
        return self._min_value

    @property
    def max_value(self) -> float:
        return self._max_value

    @property
    def last_value(self) -> float | None:
        return self._last_value

    @property
    def operational(self) -> bool:
        return self._operational

    def bind(self, emit: Callable[[Event], None]):
        self._emit = emit

    def sample(self) -> float:
        try:
            value = self._source.read(self._kind, self._min_value, self._max_value)
        except SensorReadError:
            self._operational = False
            raise
        self._last_value = value
        self._operational = True
        logger.debug(f"Sensor '{self._kind}' read value: {value}")
        return value

    def is_out_of_range(self) -> bool:
        if self._last_value is None:
            return False
        return self._last_value < self._min_value or self._last_value > self._max_value

    def calibrate(self, new_min: float, new_max: float):
        if not new_min < new_max:
            logger.warning(f"Sensor '{self._kind}' calibration rejected: Min={new_min}, Max={new_max}")
            raise InvalidBounds(self._kind, new_min, new_max)
        self._min_value = float(new_min)
        self._max_value = float(new_max)
        logger.info(f"Sensor '{self._kind}' calibrated: Min={self._min_value}, Max={self._max_value}")
        if self._emit:
            self._emit(Calibrated(self._kind, self._min_value, self._max_value))
