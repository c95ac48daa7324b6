# Import Libraries
from typing import Callable
from ventcontrol.events import AdjustRejected, Event, PowerAdjusted, StateChanged
import logging

# Initialization
logger = logging.getLogger(__name__)
MIN_POWER = 0.0
MAX_POWER = 100.0

def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))

class Actuator:
    """An actuator (heater, cooler, fan...) driven by a power level between 0 and 100%."""

    def __init__(self, kind: str, emit: Callable[[Event], None] | None = None):
        self._kind = kind
        self._power_level = MIN_POWER
        self._active = False
        self._emit = emit

    def __repr__(self):
        return f"Actuator({self._kind!r})"

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def power_level(self) -> float:
        return self._power_level

    @property
    def active(self) -> bool:
        return self._active

    def bind(self, emit: Callable[[Event], None]):
        self._emit = emit

    def _publish(self, event: Event):
        if self._emit:
            self._emit(event)

    def start(self):
        if self._active:
            return
        self._active = True
        logger.info(f"Actuator '{self._kind}' started.")
        self._publish(StateChanged(self._kind, active=True))

    def stop(self):
        self._power_level = MIN_POWER
        if not self._active:
            return
        self._active = False
        logger.info(f"Actuator '{self._kind}' stopped.")
        self._publish(StateChanged(self._kind, active=False))

    def adjust_power(self, level: float) -> bool:
        """
        Sets the power level, clamped to 0-100%, if the actuator is active.

        Returns:
            bool: False if the adjustment was rejected because the actuator is not active.
        """
        if not self._active:
            logger.warning(f"Actuator '{self._kind}' is not active. Cannot adjust power.")
            self._publish(AdjustRejected(self._kind))
            return False
        self._power_level = clamp(level, MIN_POWER, MAX_POWER)
        logger.info(f"Actuator '{self._kind}' power adjusted to {self._power_level}%.")
        self._publish(PowerAdjusted(self._kind, self._power_level))
        return True
