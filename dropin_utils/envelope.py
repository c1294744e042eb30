"""Attack/decay/sustain/release envelope driven by a boolean gate."""
from __future__ import annotations

from dataclasses import dataclass, field

from .config import EnvelopeSettings


def ease(x: float, curvature: float) -> float:
    """Bend a linear ramp in [0, 1].

    Zero curvature is linear, positive values ease in (``x ** (c + 1)``) and
    negative values ease out (``1 - (1 - x) ** (1 - c)``).
    """

    if curvature == 0:
        return x
    if curvature < 0:
        return 1.0 - pow(1.0 - x, -curvature + 1.0)
    return pow(x, curvature + 1.0)


@dataclass
class ADSREnvelope:
    """Classic ADSR envelope.

    While the gate is held the value rises to 1 over ``attack`` seconds,
    falls to ``sustain`` over ``decay`` seconds and stays there. On release it
    falls from wherever it was to 0 over ``release`` seconds.

    Without ``interrupt`` a short press still plays attack and decay in full
    before releasing. With ``interrupt`` the release starts immediately.
    """

    attack: float = 1.0
    decay: float = 1.0
    sustain: float = 0.5
    release: float = 1.0
    attack_ease: float = 0.0
    decay_ease: float = 0.0
    release_ease: float = 0.0
    interrupt: bool = False
    time: float = field(default=0.0, init=False)
    _last_pressed: bool = field(default=False, init=False, repr=False)
    _last_on_value: float = field(default=0.0, init=False, repr=False)

    @classmethod
    def default(cls) -> "ADSREnvelope":
        return cls(attack=1.0, decay=1.0, sustain=0.5, release=1.0)

    @classmethod
    def from_settings(cls, settings: EnvelopeSettings) -> "ADSREnvelope":
        return cls(
            attack=settings.attack,
            decay=settings.decay,
            sustain=settings.sustain,
            release=settings.release,
            attack_ease=settings.attack_ease,
            decay_ease=settings.decay_ease,
            release_ease=settings.release_ease,
            interrupt=settings.interrupt,
        )

    def evaluate_in(self, time: float) -> float:
        """Envelope value ``time`` seconds after the gate opened."""

        if time < self.attack:
            return 1.0 - ease(1.0 - time / self.attack, self.attack_ease)
        if time < self.attack + self.decay:
            blend = ease(1.0 - (time - self.attack) / self.decay, self.decay_ease)
            return self.sustain + (1.0 - self.sustain) * blend
        return self.sustain

    def evaluate_out(self, time: float, from_value: float = 0.0) -> float:
        """Envelope value ``time`` seconds after the gate closed.

        ``from_value`` is the level at release time; zero means ``sustain``.
        """

        start = self.sustain if from_value == 0 else from_value
        if time < 0:
            return start
        if time < self.release:
            return ease(1.0 - time / self.release, self.release_ease) * start
        return 0.0

    def update(self, pressed: bool, dt: float) -> float:
        # Sticky gate: hold on until the end of decay unless interrupting.
        if self._last_pressed and not self.interrupt and self.time < self.attack + self.decay:
            pressed = True

        if pressed != self._last_pressed:
            self.time = 0.0

        self.time += dt

        if pressed:
            value = self.evaluate_in(self.time)
            self._last_on_value = value
        elif self._last_on_value == 0.0:
            # Never opened; evaluate_out would treat 0 as "release from sustain".
            value = 0.0
        else:
            value = self.evaluate_out(self.time, self._last_on_value)

        self._last_pressed = pressed
        return value

    def reset(self) -> None:
        self.time = 0.0
        self._last_pressed = False
        self._last_on_value = 0.0


__all__ = ["ADSREnvelope", "ease"]
