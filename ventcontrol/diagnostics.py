# Import Libraries
from collections import deque
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING
from ventcontrol.events import (AdjustRejected, Calibrated, Event, OutOfRange,
                                PowerAdjusted, Registered, StateChanged)
import logging
import polars as pl

if TYPE_CHECKING:
    from ventcontrol.control_loop import ControlLoop

# Initialization
logger = logging.getLogger(__name__)
DEFAULT_ADVICE = "Contact technical staff."
ADVICE = {
    "OutOfRange": "Check the sensors. Calibrate or replace the faulty sensor.",
    "AdjustRejected": "Check the actuator. It may need to be started or repaired.",
}
DEFAULT_HISTORY_SIZE = 10000

def format_event(event: Event) -> str:
    if isinstance(event, Registered):
        return f"{event.role.value} added: {event.kind}"
    if isinstance(event, StateChanged):
        return f"Actuator {event.kind} {'started' if event.active else 'stopped'}."
    if isinstance(event, Calibrated):
        return f"Sensor {event.kind} calibrated: Min={event.min}, Max={event.max}"
    if isinstance(event, OutOfRange):
        return f"Sensor {event.kind} out of range! Value={event.value}"
    if isinstance(event, PowerAdjusted):
        return f"Actuator {event.kind} power adjusted to {event.level}%."
    if isinstance(event, AdjustRejected):
        return f"Actuator {event.kind} cannot adjust power: {event.reason}"
    return f"{event.name}: {event.kind}"

class ErrorHandler:
    def handle(self, event: Event) -> str | None:
        """Logs an error event together with the remediation advice; returns the advice."""
        if not isinstance(event, (OutOfRange, AdjustRejected)):
            return None
        advice = ADVICE.get(event.name, DEFAULT_ADVICE)
        logger.error(f"=== ERROR === Type: {event.name}. Details: {format_event(event)} Action: {advice}")
        return advice

class EventLog:
    """Append-only text log, one `[timestamp] message` line per event."""

    def __init__(self, path: Path = Path("system_log.txt")):
        self.path = Path(path)

    def write(self, message: str, timestamp: datetime | None = None):
        timestamp = timestamp or datetime.now()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'a', encoding='utf-8') as file:
            file.write(f"[{timestamp:%Y-%m-%d %H:%M:%S}] {message}\n")

class Diagnostics:
    """
    Consumes control loop events: alerts on errors, persists every event to
    the text log and keeps the most recent `history_size` events for the
    end-of-run summary.
    """

    def __init__(self, event_log: EventLog | None = None, error_handler: ErrorHandler | None = None,
                 history_size: int = DEFAULT_HISTORY_SIZE):
        self.event_log = event_log
        self.error_handler = error_handler or ErrorHandler()
        self.records: deque[dict] = deque(maxlen=history_size)

    def __call__(self, event: Event):
        message = format_event(event)
        logger.info(f"[EVENT] {message}")
        self.error_handler.handle(event)
        if self.event_log:
            self.event_log.write(message)
        self.records.append({"timestamp": datetime.now(), **event.to_record()})

    def display_status(self, loop: "ControlLoop") -> list[str]:
        lines = ["=== Ventilation system status ==="]
        for sensor in loop.sensors:
            status = "Normal" if sensor.operational else "Faulty"
            lines.append(f"Sensor: {sensor.kind}, Value: {sensor.last_value}, Status: {status}")
        for actuator in loop.actuators:
            status = "On" if actuator.active else "Off"
            lines.append(f"Actuator: {actuator.kind}, Power: {actuator.power_level}%, Status: {status}")
        for line in lines:
            logger.info(line)
        return lines

    def summarize(self) -> pl.DataFrame:
        """
        Counts the consumed events per event type and device kind.

        Returns:
            pl.DataFrame: Columns `event`, `kind` and `len`, sorted by event then kind.
        """
        if not self.records:
            logger.warning("No events were consumed. Summary is empty.")
            return pl.DataFrame(schema={"event": pl.String, "kind": pl.String, "len": pl.UInt32})
        events_df = pl.DataFrame(
            [{"event": record["event"], "kind": record["kind"]} for record in self.records],
            schema={"event": pl.String, "kind": pl.String},
        )
        return events_df.group_by(["event", "kind"]).len().sort(["event", "kind"])
