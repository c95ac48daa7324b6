# Import Libraries
from collections import deque
from typing import Callable, Iterable, Mapping, NamedTuple
from ventcontrol.actuator import Actuator
from ventcontrol.config import validate_config
from ventcontrol.controller import Controller
from ventcontrol.data_source import DataSource
from ventcontrol.errors import SensorReadError
from ventcontrol.events import Event, OutOfRange, Registered, Role
from ventcontrol.sensor import Sensor
import logging

# Initialization
logger = logging.getLogger(__name__)
DEFAULT_PAIRINGS = {"Temperature": "Heater"}
DEFAULT_HISTORY_SIZE = 1000

class Gains(NamedTuple):
    k_p: float
    k_i: float

class ControlLoop:
    """
    The ventilation system: owns the sensors, the actuators and the controller,
    and runs monitoring cycles over them.

    A sensor drives the first registered actuator whose kind equals
    `pairings.get(sensor.kind, sensor.kind)`. Events are forwarded to every
    listener; `events` keeps only the most recent `history_size` of them.
    """

    def __init__(self, pairings: Mapping[str, str] | None = None,
                 listeners: Iterable[Callable[[Event], None]] = (),
                 history_size: int = DEFAULT_HISTORY_SIZE):
        self.pairings = dict(DEFAULT_PAIRINGS if pairings is None else pairings)
        self.controller = Controller()
        self.events: deque[Event] = deque(maxlen=history_size)
        self._cycle_events: list[Event] | None = None
        self._sensors: list[Sensor] = []
        self._actuators: list[Actuator] = []
        self._listeners = list(listeners)
        self._running = False

    @property
    def sensors(self) -> tuple[Sensor, ...]:
        return tuple(self._sensors)

    @property
    def actuators(self) -> tuple[Actuator, ...]:
        return tuple(self._actuators)

    @property
    def running(self) -> bool:
        return self._running

    def subscribe(self, listener: Callable[[Event], None]):
        self._listeners.append(listener)

    def _emit(self, event: Event):
        self.events.append(event)
        if self._cycle_events is not None:
            self._cycle_events.append(event)
        for listener in self._listeners:
            listener(event)

    def add_sensor(self, sensor: Sensor):
        sensor.bind(self._emit)
        self._sensors.append(sensor)
        logger.info(f"Sensor added: {sensor.kind}")
        self._emit(Registered(sensor.kind, Role.SENSOR))

    def add_actuator(self, actuator: Actuator):
        actuator.bind(self._emit)
        self._actuators.append(actuator)
        logger.info(f"Actuator added: {actuator.kind}")
        self._emit(Registered(actuator.kind, Role.ACTUATOR))

    def start(self):
        if self._running:
            return
        logger.info("Starting ventilation system...")
        self._running = True
        for actuator in self._actuators:
            actuator.start()

    def stop(self):
        if not self._running:
            return
        logger.info("Stopping ventilation system...")
        self._running = False
        for actuator in self._actuators:
            actuator.stop()

    def find_actuator(self, sensor_kind: str) -> Actuator | None:
        actuator_kind = self.pairings.get(sensor_kind, sensor_kind)
        return next((a for a in self._actuators if a.kind == actuator_kind), None)

    def run_cycle(self, targets: Mapping[str, float], gains: tuple[float, float]) -> list[Event]:
        """
        Runs one monitoring cycle: samples every sensor in registration order,
        reports out-of-range readings, then adjusts the actuator paired with
        each sensor that has a target.

        Args:
            targets (Mapping[str, float]): Target value per sensor kind.
            gains (tuple[float, float]): The (k_p, k_i) controller gains.

        Returns:
            list[Event]: The events emitted during this cycle.
        """
        k_p, k_i = gains
        self._cycle_events = []
        try:
            self._sample_and_adjust(targets, k_p, k_i)
            return self._cycle_events
        finally:
            self._cycle_events = None

    def _sample_and_adjust(self, targets: Mapping[str, float], k_p: float, k_i: float):
        sampled = []
        for sensor in self._sensors:
            try:
                sensor.sample()
            except SensorReadError as error:
                logger.warning(f"Sensor '{sensor.kind}' failed to read, skipping this cycle: {error}")
                continue
            sampled.append(sensor)
            if self.controller.check_range(sensor):
                logger.warning(f"Sensor '{sensor.kind}' out of range! Value={sensor.last_value}")
                self._emit(OutOfRange(sensor.kind, sensor.last_value))
        for sensor in sampled:
            if sensor.kind not in targets:
                continue
            actuator = self.find_actuator(sensor.kind)
            if actuator is None:
                continue
            action = self.controller.compute_action(sensor.last_value, targets[sensor.kind], k_p, k_i)
            actuator.adjust_power(action)

def build_control_loop(config: dict, source: DataSource | None = None,
                       listeners: Iterable[Callable[[Event], None]] = ()) -> ControlLoop:
    """
    Validates the configuration and builds a loop with its sensors and actuators
    registered in the order they appear in the config.

    Args:
        config (dict): The configuration loaded from config.yaml.
        source (DataSource | None): Data source shared by every sensor; simulated if None.
        listeners (Iterable): Event listeners subscribed before registration starts.

    Returns:
        ControlLoop: A stopped loop ready to be started.
    """
    validate_config(config)
    pairings = {**DEFAULT_PAIRINGS, **(config.get("pairings") or {})}
    loop = ControlLoop(pairings=pairings, listeners=listeners)
    for sensor_config in config["sensors"]:
        loop.add_sensor(Sensor(sensor_config["kind"], sensor_config["min"], sensor_config["max"], source=source))
    for actuator_config in config["actuators"]:
        loop.add_actuator(Actuator(actuator_config["kind"]))
    return loop

def gains_from_config(config: dict) -> Gains:
    return Gains(config["gains"]["k_p"], config["gains"]["k_i"])
