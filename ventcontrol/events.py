# Import Libraries
from dataclasses import asdict, dataclass
from enum import Enum

NOT_ACTIVE = "NotActive"

class Role(str, Enum):
    SENSOR = "Sensor"
    ACTUATOR = "Actuator"

@dataclass(frozen=True)
class Event:
    kind: str

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_record(self) -> dict:
        """Flattens the event into a plain dict, e.g. for a polars DataFrame."""
        record = {"event": self.name}
        for key, value in asdict(self).items():
            record[key] = value.value if isinstance(value, Enum) else value
        return record

@dataclass(frozen=True)
class Registered(Event):
    role: Role

@dataclass(frozen=True)
class StateChanged(Event):
    active: bool
    role: Role = Role.ACTUATOR

@dataclass(frozen=True)
class Calibrated(Event):
    min: float
    max: float

@dataclass(frozen=True)
class OutOfRange(Event):
    value: float

@dataclass(frozen=True)
class PowerAdjusted(Event):
    level: float

@dataclass(frozen=True)
class AdjustRejected(Event):
    reason: str = NOT_ACTIVE
