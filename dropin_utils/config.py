"""Configuration helpers for the utility defaults."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "DROPIN"


def _coerce(section: str, name: str, value: Any, kind: type) -> Any:
    try:
        if kind is bool and isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return kind(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{section}.{name} must be {kind.__name__}, got {value!r}") from exc


def _section_from_mapping(cls: type, section: str, payload: Optional[Mapping[str, Any]]) -> Any:
    defaults = cls()
    if not payload:
        return defaults
    values: Dict[str, Any] = {}
    for spec in fields(cls):
        if spec.name in payload:
            values[spec.name] = _coerce(section, spec.name, payload[spec.name], type(getattr(defaults, spec.name)))
    return replace(defaults, **values)


# //1.- Cable defaults mirror a short, slightly slack wire.
@dataclass(frozen=True)
class CableSettings:
    segments: int = 9
    slack: float = 0.2
    method: str = "newton"

    def __post_init__(self) -> None:
        if self.segments < 1:
            raise ValueError("cable.segments must be at least 1")
        if self.slack < 0:
            raise ValueError("cable.slack must not be negative")
        if self.method not in ("newton", "step"):
            raise ValueError(f"cable.method must be 'newton' or 'step', got {self.method!r}")


# //2.- Interpolator defaults match Interpolator.default() and InertialInterpolator.default().
@dataclass(frozen=True)
class InterpolatorSettings:
    max_speed: float = 1.0
    acceleration: float = 1.0
    braking_acceleration: float = 0.0

    def __post_init__(self) -> None:
        if self.max_speed < 0:
            raise ValueError("interpolator.max_speed must not be negative")
        if self.acceleration < 0 or self.braking_acceleration < 0:
            raise ValueError("interpolator accelerations must not be negative")


# //3.- Envelope defaults match ADSREnvelope.default().
@dataclass(frozen=True)
class EnvelopeSettings:
    attack: float = 1.0
    decay: float = 1.0
    sustain: float = 0.5
    release: float = 1.0
    attack_ease: float = 0.0
    decay_ease: float = 0.0
    release_ease: float = 0.0
    interrupt: bool = False

    def __post_init__(self) -> None:
        if min(self.attack, self.decay, self.release) < 0:
            raise ValueError("envelope times must not be negative")
        if not 0.0 <= self.sustain <= 1.0:
            raise ValueError("envelope.sustain must be within [0, 1]")


# //4.- Aggregate every section so callers pass a single object around.
@dataclass(frozen=True)
class UtilitySettings:
    cable: CableSettings = field(default_factory=CableSettings)
    interpolator: InterpolatorSettings = field(default_factory=InterpolatorSettings)
    envelope: EnvelopeSettings = field(default_factory=EnvelopeSettings)

    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, Any]] = None) -> "UtilitySettings":
        payload = payload or {}
        return cls(
            cable=_section_from_mapping(CableSettings, "cable", payload.get("cable")),
            interpolator=_section_from_mapping(InterpolatorSettings, "interpolator", payload.get("interpolator")),
            envelope=_section_from_mapping(EnvelopeSettings, "envelope", payload.get("envelope")),
        )

    # //5.- Environment overrides look like DROPIN_CABLE_SEGMENTS=12.
    def with_environment(
        self,
        env: Optional[Mapping[str, str]] = None,
        *,
        prefix: str = DEFAULT_ENV_PREFIX,
    ) -> "UtilitySettings":
        source = env if env is not None else os.environ
        sections: Dict[str, Any] = {}
        for section_name in ("cable", "interpolator", "envelope"):
            current = getattr(self, section_name)
            overrides: Dict[str, Any] = {}
            for spec in fields(current):
                raw = source.get(f"{prefix}_{section_name}_{spec.name}".upper())
                if raw is not None:
                    overrides[spec.name] = _coerce(section_name, spec.name, raw, type(getattr(current, spec.name)))
            sections[section_name] = replace(current, **overrides) if overrides else current
        return UtilitySettings(**sections)

    @classmethod
    def from_environment(
        cls,
        env: Optional[Mapping[str, str]] = None,
        *,
        prefix: str = DEFAULT_ENV_PREFIX,
    ) -> "UtilitySettings":
        return cls().with_environment(env, prefix=prefix)


def _read_json_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"configuration file '{path}' must contain a JSON object")
    return payload


def load_settings(
    path: Optional[str] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> UtilitySettings:
    """Load settings from an optional JSON file, then apply environment overrides."""

    payload: Dict[str, Any] = {}
    if path is not None:
        LOGGER.info("Loading utility settings from %s", path)
        payload = _read_json_config(path)
    return UtilitySettings.from_mapping(payload).with_environment(env, prefix=env_prefix)


__all__ = [
    "CableSettings",
    "InterpolatorSettings",
    "EnvelopeSettings",
    "UtilitySettings",
    "load_settings",
]
