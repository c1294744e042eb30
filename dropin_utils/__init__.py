"""Drop-in utilities for game and simulation code.

Every module stands on its own: catenary cables, progress interpolators, an
ADSR envelope, a PID controller, a ring buffer and a few geometry helpers.
None of them talk to an engine; callers feed in points and tick lengths and
read plain values back.
"""

from .vector import UP, as_point
from .catenary import catenary_length, catenary_points, create_catenary, solve_shape_parameter
from .cable import Cable
from .interpolation import InertialInterpolator, Interpolator, ProgressionState, stopping_distance
from .envelope import ADSREnvelope, ease
from .pid import PIDController
from .ring_buffer import RingBuffer
from .sorting import twin_sort
from .bezier import BezierCurve, bezier_point, bezier_tangent, closest_point_on_curve, split_bezier
from .selection import get_closest, get_random
from .config import CableSettings, EnvelopeSettings, InterpolatorSettings, UtilitySettings, load_settings

__all__ = [
    "UP",
    "as_point",
    "create_catenary",
    "catenary_points",
    "catenary_length",
    "solve_shape_parameter",
    "Cable",
    "ProgressionState",
    "Interpolator",
    "InertialInterpolator",
    "stopping_distance",
    "ADSREnvelope",
    "ease",
    "PIDController",
    "RingBuffer",
    "twin_sort",
    "BezierCurve",
    "bezier_point",
    "bezier_tangent",
    "split_bezier",
    "closest_point_on_curve",
    "get_closest",
    "get_random",
    "CableSettings",
    "InterpolatorSettings",
    "EnvelopeSettings",
    "UtilitySettings",
    "load_settings",
]
