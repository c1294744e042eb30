"""Progress interpolators for values that travel between two states.

Typical users are doors, hatches and periscopes: something that is either
stowed (progress 0), deployed (progress 1) or on its way between the two.
Call :meth:`Interpolator.update` once per tick with the elapsed time and read
``progress`` to drive the animation.

:class:`Interpolator` moves at a constant ``max_speed``.
:class:`InertialInterpolator` accelerates towards its target, optionally
brakes ahead of it and can be re-targeted mid-flight.

Both share one state core; the inertial variant only replaces the velocity
integration and the boundary handling. A ``max_speed`` of zero (or less)
disables motion without raising.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from .vector import clamp01

LOGGER = logging.getLogger(__name__)


class ProgressionState(Enum):
    AT_START = auto()
    PROGRESSING = auto()
    AT_END = auto()
    REGRESSING = auto()


def stopping_distance(velocity: float, deceleration: float) -> float:
    """Distance covered while braking from ``velocity`` to rest."""

    if deceleration == 0:
        return float("inf")
    return velocity * velocity / (2.0 * abs(deceleration))


def _state_for(value: float) -> ProgressionState:
    if value == 1.0:
        return ProgressionState.AT_END
    if value == 0.0:
        return ProgressionState.AT_START
    # Mid-range values always read as progressing, even when set from above.
    return ProgressionState.PROGRESSING


@dataclass
class Interpolator:
    """Constant speed interpolator."""

    max_speed: float = 1.0
    progress: float = 0.0
    velocity: float = 0.0
    _state: ProgressionState = field(default=ProgressionState.AT_START, init=False)
    _idle_warned: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.progress = clamp01(self.progress)
        self._state = _state_for(self.progress)

    @classmethod
    def default(cls) -> "Interpolator":
        return cls()

    @property
    def state(self) -> ProgressionState:
        return self._state

    @property
    def progressing_or_at_end(self) -> bool:
        return self.state in (ProgressionState.PROGRESSING, ProgressionState.AT_END)

    @property
    def is_moving(self) -> bool:
        return self.velocity != 0.0

    def start_progressing(self) -> None:
        self.velocity = self.max_speed
        self._state = ProgressionState.PROGRESSING

    def start_regressing(self) -> None:
        self.velocity = -self.max_speed
        self._state = ProgressionState.REGRESSING

    def toggle(self) -> None:
        if self.progressing_or_at_end:
            self.start_regressing()
        else:
            self.start_progressing()

    def set_to(self, value: float) -> None:
        """Jump to ``value`` (clamped to [0, 1]) and stop."""

        value = clamp01(value)
        self.progress = value
        self.velocity = 0.0
        self._state = _state_for(value)

    def update(self, dt: float) -> None:
        """Advance the interpolation by ``dt`` seconds."""

        if not self._can_move():
            return
        self._integrate(dt)
        self._settle()

    def _can_move(self) -> bool:
        if self.max_speed > 0:
            return True
        if not self._idle_warned:
            LOGGER.warning("%s has max_speed %s, it will not move", type(self).__name__, self.max_speed)
            self._idle_warned = True
        return False

    def _integrate(self, dt: float) -> None:
        self.progress += self.velocity * dt

    def _settle(self) -> None:
        # Clamping alone keeps velocity and state; only an explicit regress/progress terminates.
        if self.velocity < 0 and self.progress <= 0.0:
            self.progress = 0.0
            if self.state is ProgressionState.REGRESSING:
                self.velocity = 0.0
                self._state = ProgressionState.AT_START
        elif self.velocity > 0 and self.progress >= 1.0:
            self.progress = 1.0
            if self.state is ProgressionState.PROGRESSING:
                self.velocity = 0.0
                self._state = ProgressionState.AT_END


@dataclass
class InertialInterpolator(Interpolator):
    """Interpolator with inertia.

    It accelerates at ``acceleration`` up to ``max_speed`` and, when
    ``braking_acceleration`` is positive, starts decelerating early enough to
    come to rest on its target. Reversing direction while moving first brakes
    to a stop and then accelerates the other way.
    """

    acceleration: float = 1.0
    braking_acceleration: float = 0.0
    accel: float = 0.0
    braking: bool = False
    begin_target: float = 0.0
    end_target: float = 1.0

    @classmethod
    def default(cls) -> "InertialInterpolator":
        return cls()

    def _braking_magnitude(self) -> float:
        if self.braking_acceleration > 0:
            return self.braking_acceleration
        return self.acceleration

    def progress_to(self, target: float) -> None:
        """Accelerate towards ``target``; a target behind ``progress`` is approached by regressing."""

        target = clamp01(target)
        if target < self.progress:
            self.regress_to(target)
            return
        self.end_target = target
        self.accel = self.acceleration
        self._state = ProgressionState.PROGRESSING
        self.braking = self.velocity < 0
        if self.braking:
            self.accel = self._braking_magnitude()

    def regress_to(self, target: float) -> None:
        target = clamp01(target)
        if target > self.progress:
            self.progress_to(target)
            return
        self.begin_target = target
        self.accel = -self.acceleration
        self._state = ProgressionState.REGRESSING
        self.braking = self.velocity > 0
        if self.braking:
            self.accel = -self._braking_magnitude()

    def accelerate_to(self, target: float) -> None:
        if target >= self.progress:
            self.progress_to(target)
        else:
            self.regress_to(target)

    def start_progressing(self) -> None:
        self.progress_to(1.0)

    def start_regressing(self) -> None:
        self.regress_to(0.0)

    def start_braking(self) -> None:
        """Decelerate to a stop, re-targeting to where the stop will happen."""

        if self.braking or self.velocity == 0.0:
            return
        brake = self._braking_magnitude()
        if brake <= 0:
            LOGGER.debug("cannot brake without acceleration or braking_acceleration")
            return
        distance = stopping_distance(self.velocity, brake)
        if self.velocity > 0:
            self.progress_to(self.progress + distance)
            self.accel = -brake
        else:
            self.regress_to(self.progress - distance)
            self.accel = brake
        self.braking = True

    def set_to(self, value: float) -> None:
        super().set_to(value)
        self.accel = 0.0
        self.braking = False
        self.begin_target = 0.0
        self.end_target = 1.0

    def _integrate(self, dt: float) -> None:
        # //1.- Hold velocity at the cap and drop any acceleration pushing past it.
        if self.velocity >= self.max_speed:
            self.velocity = self.max_speed
            self.accel = min(self.accel, 0.0)
        elif self.velocity <= -self.max_speed:
            self.velocity = -self.max_speed
            self.accel = max(self.accel, 0.0)

        # //2.- Switch to braking once the stopping distance reaches the target.
        brake = self.braking_acceleration
        if brake > 0 and not self.braking:
            if self.velocity > 0 and self.state is ProgressionState.PROGRESSING:
                if self.progress > self.end_target - stopping_distance(self.velocity, brake):
                    self.accel = -brake
                    self.braking = True
            elif self.velocity < 0 and self.state is ProgressionState.REGRESSING:
                if self.progress < self.begin_target + stopping_distance(self.velocity, brake):
                    self.accel = brake
                    self.braking = True

        # //3.- Velocity crossed zero while braking: rest on the target or bounce back.
        if self.braking:
            if self.accel < 0 and self.velocity <= 0:
                if self.state is ProgressionState.PROGRESSING:
                    self.set_to(self.end_target)
                    return
                self.braking = False
                self.accel = -self.acceleration
            elif self.accel > 0 and self.velocity >= 0:
                if self.state is ProgressionState.REGRESSING:
                    self.set_to(self.begin_target)
                    return
                self.braking = False
                self.accel = self.acceleration

        # //4.- Semi-implicit Euler step.
        self.velocity += self.accel * dt
        self.progress += self.velocity * dt

    def _settle(self) -> None:
        if self.state is ProgressionState.PROGRESSING and self.velocity > 0 and self.progress >= self.end_target:
            self.set_to(self.end_target)
        elif self.state is ProgressionState.REGRESSING and self.velocity < 0 and self.progress <= self.begin_target:
            self.set_to(self.begin_target)
        elif self.progress < 0.0:
            self.progress = 0.0
            self.velocity = 0.0
        elif self.progress > 1.0:
            self.progress = 1.0
            self.velocity = 0.0


__all__ = ["ProgressionState", "Interpolator", "InertialInterpolator", "stopping_distance"]
