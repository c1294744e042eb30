"""ADSR envelope curves and gate handling."""
from __future__ import annotations

import pytest

from dropin_utils.config import EnvelopeSettings
from dropin_utils.envelope import ADSREnvelope, ease


def test_ease_shapes():
    assert ease(0.25, 0.0) == 0.25
    assert ease(0.5, 1.0) == pytest.approx(0.25)
    assert ease(0.5, -1.0) == pytest.approx(0.75)


def test_evaluate_in_rises_then_settles_on_sustain():
    envelope = ADSREnvelope.default()
    assert envelope.evaluate_in(0.0) == pytest.approx(0.0)
    assert envelope.evaluate_in(0.5) == pytest.approx(0.5)
    assert envelope.evaluate_in(1.0) == pytest.approx(1.0)
    assert envelope.evaluate_in(1.5) == pytest.approx(0.75)
    assert envelope.evaluate_in(5.0) == 0.5


def test_evaluate_out_falls_from_release_level():
    envelope = ADSREnvelope.default()
    assert envelope.evaluate_out(-1.0) == 0.5
    assert envelope.evaluate_out(0.5) == pytest.approx(0.25)
    assert envelope.evaluate_out(0.5, from_value=0.8) == pytest.approx(0.4)
    assert envelope.evaluate_out(2.0) == 0.0


def test_update_holds_short_press_until_decay_ends():
    envelope = ADSREnvelope(attack=0.2, decay=0.2, sustain=0.5, release=0.4)
    envelope.update(True, 0.1)
    # Released early, but the gate sticks until attack + decay has played.
    value = envelope.update(False, 0.1)
    assert value == pytest.approx(1.0)
    value = envelope.update(False, 0.2)
    assert value == pytest.approx(0.5)
    value = envelope.update(False, 0.2)
    assert value == pytest.approx(0.25)
    assert envelope.update(False, 1.0) == 0.0


def test_interrupt_releases_immediately():
    envelope = ADSREnvelope(attack=0.2, decay=0.2, sustain=0.5, release=0.4, interrupt=True)
    pressed_value = envelope.update(True, 0.1)
    assert pressed_value == pytest.approx(0.5)
    value = envelope.update(False, 0.2)
    assert value == pytest.approx(0.25)


def test_idle_envelope_stays_silent():
    envelope = ADSREnvelope.default()
    assert envelope.update(False, 0.1) == 0.0
    envelope.update(True, 0.5)
    envelope.reset()
    assert envelope.time == 0.0
    assert envelope.update(False, 0.1) == 0.0


def test_from_settings_copies_every_field():
    settings = EnvelopeSettings(attack=0.5, decay=0.25, sustain=0.8, release=2.0, attack_ease=1.0, interrupt=True)
    envelope = ADSREnvelope.from_settings(settings)
    assert (envelope.attack, envelope.decay, envelope.sustain, envelope.release) == (0.5, 0.25, 0.8, 2.0)
    assert envelope.attack_ease == 1.0
    assert envelope.interrupt is True
    # Eased attack: halfway through reads 1 - 0.5 ** 2.
    assert envelope.evaluate_in(0.25) == pytest.approx(0.75)
