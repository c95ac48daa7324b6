# Import Libraries
from pathlib import Path
from ventcontrol.config import load_config
from ventcontrol.control_loop import build_control_loop, gains_from_config
from ventcontrol.data_source import build_data_source
from ventcontrol.diagnostics import Diagnostics, EventLog
import logging
import time

# --- 1. Configure Logging ---
# Set up global logging configuration for the entire application.
# Messages will be shown from the DEBUG level and up.
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

def main(config_path: Path | None = None, sleep=time.sleep):
    """Runs the ventilation control loop simulation from start to finish."""
    logger.info("Starting ventilation control system...")
    # --- 2. Setup Phase ---
    project_root = Path(__file__).parent
    config = load_config(config_path or project_root / 'config.yaml')
    source = build_data_source(config, project_root)
    diagnostics = Diagnostics(EventLog(project_root / config["diagnostics"]["log_file"]))
    loop = build_control_loop(config, source=source, listeners=[diagnostics])
    targets = config["targets"]
    gains = gains_from_config(config)
    cycles = config["simulation"]["cycles"]
    interval = config["simulation"]["interval_seconds"]
    # --- 3. Monitoring Phase ---
    loop.start()
    logger.info("Monitoring the system...")
    for cycle in range(cycles):
        logger.debug(f"Cycle {cycle + 1}/{cycles}")
        loop.run_cycle(targets, gains)
        diagnostics.display_status(loop)
        if cycle < cycles - 1:
            sleep(interval)
    # --- 4. Shutdown Phase ---
    loop.stop()
    logger.info(f"Event summary:\n{diagnostics.summarize()}")
    logger.info("System shut down.")
    return loop, diagnostics

if __name__ == "__main__":
    main()
