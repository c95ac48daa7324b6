# Import Libraries
from main import main
from pathlib import Path
from ventcontrol.events import PowerAdjusted, StateChanged
import logging

def test_main_runs_configured_cycles(mock_config_path, base_config, mocker, caplog):
    """
    An integration test for the driver: it runs the configured number of cycles,
    sleeps between them (never after the last), writes the text log and stops
    every actuator at the end.
    """
    caplog.set_level(logging.INFO)
    sleep = mocker.Mock()
    loop, diagnostics = main(mock_config_path, sleep=sleep)
    cycles = base_config["simulation"]["cycles"]
    assert sleep.call_count == cycles - 1
    sleep.assert_called_with(base_config["simulation"]["interval_seconds"])
    adjustments = [event for event in loop.events if isinstance(event, PowerAdjusted)]
    assert len(adjustments) == 2 * cycles
    assert loop.running is False
    assert all(not actuator.active and actuator.power_level == 0.0 for actuator in loop.actuators)
    assert loop.events[-1] == StateChanged("Cooler", active=False)
    log_lines = Path(base_config["diagnostics"]["log_file"]).read_text(encoding="utf-8").splitlines()
    assert len(log_lines) >= len(loop.events)
    assert "Event summary:" in caplog.text
    summary_df = diagnostics.summarize()
    assert summary_df.filter(summary_df["event"] == "PowerAdjusted")["len"].sum() == 2 * cycles
