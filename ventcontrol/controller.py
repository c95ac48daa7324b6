# Import Libraries
from ventcontrol.actuator import MAX_POWER, MIN_POWER, clamp
from ventcontrol.sensor import Sensor

class Controller:
    """
    Stateless PI controller.

    The integral term is a fixed weighting of the instantaneous error
    (`k_i * error / 2`); no error is accumulated between calls and no time
    step is involved.
    """

    def compute_action(self, current: float, target: float, k_p: float, k_i: float) -> float:
        error = target - current
        action = k_p * error + k_i * (error / 2)
        return clamp(action, MIN_POWER, MAX_POWER)

    def check_range(self, sensor: Sensor) -> bool:
        return sensor.is_out_of_range()
