"""Command line interface for sampling cables and interpolator timelines."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO

from .cable import Cable
from .config import UtilitySettings, load_settings
from .envelope import ADSREnvelope
from .interpolation import InertialInterpolator, Interpolator

LOGGER = logging.getLogger(__name__)


def _parse_point(raw: str) -> tuple[float, float, float]:
    # //1.- Accept "x,y,z" triples and report malformed input through argparse.
    parts = [item.strip() for item in raw.split(",")]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected x,y,z but got {raw!r}")
    try:
        x, y, z = (float(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"non-numeric coordinate in {raw!r}") from exc
    return (x, y, z)


def create_parser() -> argparse.ArgumentParser:
    # //2.- Construct the top-level parser shared across tests and runtime execution.
    parser = argparse.ArgumentParser(prog="dropin-utils", description="Sample drop-in utility models")
    parser.add_argument("--config", help="Path to a JSON settings file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    catenary = commands.add_parser("catenary", help="Sample a hanging cable between two anchors")
    catenary.add_argument("--start", type=_parse_point, required=True, help="Start anchor as x,y,z")
    catenary.add_argument("--end", type=_parse_point, required=True, help="End anchor as x,y,z")
    catenary.add_argument("--segments", type=int, help="Number of segments (default from settings)")
    length = catenary.add_mutually_exclusive_group()
    length.add_argument("--slack", type=float, help="Rope length beyond the anchor distance")
    length.add_argument("--length", type=float, help="Absolute rope length")
    catenary.add_argument("--method", choices=["newton", "step"], help="Shape parameter solver")

    interpolate = commands.add_parser("interpolate", help="Print an interpolator timeline")
    interpolate.add_argument("--inertial", action="store_true", help="Use the inertial interpolator")
    interpolate.add_argument("--max-speed", type=float)
    interpolate.add_argument("--acceleration", type=float)
    interpolate.add_argument("--braking", type=float, help="Braking acceleration (inertial only)")
    interpolate.add_argument("--from", dest="initial", type=float, default=0.0, help="Initial progress")
    interpolate.add_argument("--target", type=float, default=1.0, help="Progress to move towards")
    interpolate.add_argument("--dt", type=float, default=0.1, help="Tick length in seconds")
    interpolate.add_argument("--steps", type=int, default=20, help="Number of ticks to simulate")
    interpolate.add_argument("--brake-at", type=int, help="Tick at which to start braking (inertial only)")

    envelope = commands.add_parser("envelope", help="Print an ADSR envelope timeline for a held gate")
    envelope.add_argument("--hold", type=float, default=1.0, help="Seconds the gate stays pressed")
    envelope.add_argument("--interrupt", action="store_true", help="Release as soon as the gate closes")
    envelope.add_argument("--dt", type=float, default=0.1, help="Tick length in seconds")
    envelope.add_argument("--steps", type=int, default=40, help="Number of ticks to simulate")
    return parser


def _run_catenary(args: argparse.Namespace, settings: UtilitySettings) -> Dict[str, Any]:
    cable = Cable.from_settings(args.start, args.end, settings.cable)
    if args.segments is not None:
        cable.segments = args.segments
    if args.method is not None:
        cable.method = args.method
    if args.slack is not None:
        cable.slack = args.slack
    if args.length is not None:
        cable.slack = args.length - (cable.target_length - cable.slack)
    points = cable.update_catenary()
    return {
        "target_length": cable.target_length,
        "points": [[float(component) for component in point] for point in points],
    }


def _build_interpolator(args: argparse.Namespace, settings: UtilitySettings) -> Interpolator:
    defaults = settings.interpolator
    max_speed = defaults.max_speed if args.max_speed is None else args.max_speed
    if not args.inertial:
        return Interpolator(max_speed=max_speed)
    return InertialInterpolator(
        max_speed=max_speed,
        acceleration=defaults.acceleration if args.acceleration is None else args.acceleration,
        braking_acceleration=defaults.braking_acceleration if args.braking is None else args.braking,
    )


def _run_interpolate(args: argparse.Namespace, settings: UtilitySettings) -> List[Dict[str, Any]]:
    interpolator = _build_interpolator(args, settings)
    interpolator.set_to(args.initial)
    # //3.- Inertial runs can aim at intermediate targets; constant ones only pick a direction.
    if isinstance(interpolator, InertialInterpolator):
        interpolator.accelerate_to(args.target)
    elif args.target >= interpolator.progress:
        interpolator.start_progressing()
    else:
        interpolator.start_regressing()

    timeline: List[Dict[str, Any]] = []
    for step in range(1, max(0, args.steps) + 1):
        if isinstance(interpolator, InertialInterpolator) and args.brake_at == step:
            interpolator.start_braking()
        interpolator.update(args.dt)
        timeline.append(
            {
                "time": round(step * args.dt, 9),
                "progress": interpolator.progress,
                "velocity": interpolator.velocity,
                "state": interpolator.state.name,
            }
        )
    return timeline


def _run_envelope(args: argparse.Namespace, settings: UtilitySettings) -> List[Dict[str, Any]]:
    envelope = ADSREnvelope.from_settings(settings.envelope)
    if args.interrupt:
        envelope.interrupt = True
    timeline: List[Dict[str, Any]] = []
    for step in range(1, max(0, args.steps) + 1):
        time = round(step * args.dt, 9)
        pressed = time <= args.hold
        timeline.append({"time": time, "pressed": pressed, "value": envelope.update(pressed, args.dt)})
    return timeline


def main(argv: Optional[Sequence[str]] = None, *, stdout: Optional[TextIO] = None) -> int:
    """Console script entry point invoked via ``dropin-utils``."""

    parser = create_parser()
    args = parser.parse_args(argv)
    # //4.- Keep the log format identical to the other service entry points.
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(message)s",
    )
    try:
        settings = load_settings(args.config)
    except (OSError, ValueError) as exc:
        LOGGER.error("Failed to load settings: %s", exc)
        return 2

    if args.command == "catenary":
        result: Any = _run_catenary(args, settings)
    elif args.command == "interpolate":
        result = _run_interpolate(args, settings)
    else:
        result = _run_envelope(args, settings)
    stream = stdout or sys.stdout
    json.dump(result, stream, indent=2)
    stream.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via ``python -m`` execution
    raise SystemExit(main())
