"""PID controller for scalars and NumPy vectors."""
from __future__ import annotations

from typing import Union

import numpy as np

Signal = Union[float, np.ndarray]


class PIDController:
    """Proportional/integral/derivative controller.

    The same instance works on floats or on arrays of any shape, as long as
    the setpoint and the measured value keep that shape between calls. The
    first update differentiates against a zero error, like a freshly reset
    controller on a physical rig.
    """

    def __init__(self, p_factor: float = 1.0, i_factor: float = 0.0, d_factor: float = 0.0) -> None:
        self.p_factor = float(p_factor)
        self.i_factor = float(i_factor)
        self.d_factor = float(d_factor)
        self._integral: Signal = 0.0
        self._last_error: Signal = 0.0

    @property
    def integral(self) -> Signal:
        return self._integral

    @property
    def last_error(self) -> Signal:
        return self._last_error

    def update(self, setpoint: Signal, actual: Signal, dt: float) -> Signal:
        """Return the control output for one step of ``dt`` seconds."""

        if dt <= 0:
            raise ValueError("dt must be positive")
        present = np.subtract(setpoint, actual)
        self._integral = self._integral + present * dt
        derivative = (present - self._last_error) / dt
        self._last_error = present
        output = present * self.p_factor + self._integral * self.i_factor + derivative * self.d_factor
        if np.ndim(output) == 0:
            return float(output)
        return output

    def reset(self) -> None:
        self._integral = 0.0
        self._last_error = 0.0


__all__ = ["PIDController", "Signal"]
