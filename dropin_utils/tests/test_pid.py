"""PID controller on scalars and vectors."""
from __future__ import annotations

import numpy as np
import pytest

from dropin_utils.pid import PIDController


def test_proportional_only_scales_error():
    controller = PIDController(p_factor=2.0)
    assert controller.update(10.0, 4.0, 0.1) == pytest.approx(12.0)


def test_integral_accumulates_and_derivative_tracks_change():
    controller = PIDController(p_factor=0.0, i_factor=1.0, d_factor=0.0)
    controller.update(1.0, 0.0, 0.5)
    assert controller.update(1.0, 0.0, 0.5) == pytest.approx(1.0)

    derivative = PIDController(p_factor=0.0, i_factor=0.0, d_factor=1.0)
    assert derivative.update(1.0, 0.0, 0.5) == pytest.approx(2.0)
    assert derivative.update(1.0, 0.5, 0.5) == pytest.approx(-1.0)


def test_vector_signals_are_supported():
    controller = PIDController(p_factor=1.0, i_factor=0.5, d_factor=0.0)
    output = controller.update(np.array([1.0, 2.0, 3.0]), np.zeros(3), 1.0)
    np.testing.assert_allclose(output, [1.5, 3.0, 4.5])
    np.testing.assert_allclose(controller.integral, [1.0, 2.0, 3.0])


def test_drives_a_simple_plant_to_the_setpoint():
    controller = PIDController(p_factor=4.0, i_factor=0.5, d_factor=0.1)
    position, velocity = 0.0, 0.0
    for _ in range(2000):
        force = controller.update(1.0, position, 0.01)
        velocity += (force - 2.0 * velocity) * 0.01
        position += velocity * 0.01
    assert position == pytest.approx(1.0, abs=0.05)


def test_reset_and_invalid_dt():
    controller = PIDController(1.0, 1.0, 1.0)
    controller.update(1.0, 0.0, 0.1)
    controller.reset()
    assert controller.integral == 0.0
    assert controller.last_error == 0.0
    with pytest.raises(ValueError):
        controller.update(1.0, 0.0, 0.0)
