"""Entry point for stuck package."""

import argparse
import logging
from datetime import datetime

from rich.console import Console
from rich.table import Table

from stuck.behavior import BehaviorCycle, Environment
from stuck.config import get_config
from stuck.core import Bounds, WeatherCondition, make_rng
from stuck.environment import WeatherCache, battery_speed_modifier, time_coefficient
from stuck.persistence import JsonFileStore
from stuck.personality import PersonalityService, PersonalityState, PersonalityVariant


def build_parser() -> argparse.ArgumentParser:
    config = get_config()
    parser = argparse.ArgumentParser(
        description="Stuck - a roaming character driven by personality, weather and time",
        prog="stuck",
    )
    parser.add_argument("--cycles", type=int, default=10, help="Behavior cycles to run (default: 10)")
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed for a reproducible run")
    parser.add_argument(
        "--weather",
        choices=[c.value for c in WeatherCondition],
        help="Weather condition (default: cached or fallback roll)",
    )
    parser.add_argument(
        "--hour", type=int, choices=range(24), default=None, metavar="HOUR",
        help="Hour of day 0-23 (default: now)",
    )
    parser.add_argument("--battery", type=float, default=1.0, help="Battery level 0-1 (default: 1.0)")
    parser.add_argument("--charging", action="store_true", help="Device is charging")
    parser.add_argument(
        "--variant",
        choices=[v.value for v in PersonalityVariant],
        help="Override the stored personality for this run",
    )
    parser.add_argument("--width", type=float, default=config.width, help="Roaming area width")
    parser.add_argument("--height", type=float, default=config.height, help="Roaming area height")
    parser.add_argument("--state", type=str, default=str(config.state_path), help="State file path")
    parser.add_argument("--record-drift", action="store_true", help="Apply today's weather to the drift")
    return parser


def main() -> None:
    """Main entry point for the Stuck demo."""
    config = get_config()
    args = build_parser().parse_args()

    console = Console()
    errors = config.validate()
    for error in errors:
        console.print(f"[yellow]config:[/yellow] {error}")
    level = "WARNING" if any("LOG_LEVEL" in e for e in errors) else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    rng = make_rng(args.seed)
    store = JsonFileStore(args.state)
    service = PersonalityService(store, rng=rng)
    service.initialize_if_needed()

    if args.weather:
        weather = WeatherCondition(args.weather)
    else:
        weather = WeatherCache(store).current(rng).condition
    if args.record_drift:
        if not service.record_daily_drift(weather):
            console.print("Drift already recorded today")

    state = service.load_state()
    if args.variant:
        state = PersonalityState(PersonalityVariant(args.variant), state.drift)

    hour = args.hour if args.hour is not None else datetime.now().hour
    environment = Environment(
        weather=weather,
        time_coefficient=time_coefficient(hour),
        battery_modifier=battery_speed_modifier(args.battery, args.charging),
    )
    cycle = BehaviorCycle(state, Bounds.from_size(args.width, args.height), environment, rng=rng)

    console.print(
        f"[bold]{state.variant.value}[/bold]  weather={weather.value}  hour={hour}  "
        f"time×{environment.time_coefficient}  battery×{environment.battery_modifier}"
    )

    table = Table(title=f"{args.cycles} behavior cycles")
    table.add_column("#", justify="right")
    table.add_column("State")
    table.add_column("Path / Action")
    table.add_column("Points", justify="right")
    table.add_column("End")
    table.add_column("Seconds", justify="right")
    table.add_column("Events")
    for i in range(1, args.cycles + 1):
        behavior = cycle.next_behavior()
        table.add_row(
            str(i),
            behavior.state.value,
            behavior.label,
            str(len(behavior.points)) if behavior.points else "",
            str(behavior.points[-1]) if behavior.points else "",
            f"{behavior.duration:.1f}",
            ", ".join(e.value for e in behavior.events),
        )
    console.print(table)
    console.print(f"Drift: {state.drift}")


if __name__ == "__main__":
    main()
