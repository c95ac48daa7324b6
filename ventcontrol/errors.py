class ControlError(Exception):
    """Base class for recoverable conditions raised by the control loop."""


class InvalidBounds(ControlError, ValueError):
    def __init__(self, kind: str, min_value: float, max_value: float):
        super().__init__(f"Sensor '{kind}': min ({min_value}) must be lower than max ({max_value})")
        self.kind = kind
        self.min_value = min_value
        self.max_value = max_value


class SensorReadError(ControlError):
    """Raised by a data source that cannot produce a reading."""
