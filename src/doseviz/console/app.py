"""Menu-driven terminal calculator.

Usage:
  pedidose [--config FILE] [--export-dir DIR] [--no-color] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from doseengine.config import load_config
from doseengine.session import DoseSession
from doseengine.types import MedicationProfile, Severity, Status

from . import colors
from .menu import Command, Handler, MenuItem, build_menu, render_menu, select
from .prompts import InputFn, OutputFn, prompt_positive, prompt_text, prompt_weight

logger = logging.getLogger(__name__)

BANNER = "Pediatric Liquid Dose Calculator"


class Shell:
    """Reads a menu choice, runs it against the session, repeats until Exit."""

    def __init__(self, session: DoseSession, input_fn: InputFn = input, output_fn: OutputFn = print):
        self.session = session
        self.input = input_fn
        self.output = output_fn
        self.menu = build_menu(session.presets)
        self.handlers: dict[Command, Handler] = {
            Command.DOSE: self._dose,
            Command.ALL_PRESETS: lambda item: self.session.calculate_all(),
            Command.MANUAL: self._manual,
            Command.CHART: self._chart,
            Command.MANUAL_CHART: self._manual_chart,
            Command.WEIGHT_KG: self._weight_kg,
            Command.WEIGHT_LB: self._weight_lb,
            Command.CLEAR: lambda item: self.session.clear_history(),
            Command.EXPORT: lambda item: self.session.export(),
        }

    # --- rendering --------------------------------------------------------
    def render(self) -> None:
        s = self.session
        self.output("")
        self.output(colors.bold(BANNER))
        weight = f"{s.weight_kg:.2f} kg" if s.weight_kg is not None else "not set"
        self.output(f"Patient weight: {weight}")
        self.output(colors.style(s.status))
        self.output(render_menu(self.menu))
        self.output(colors.dim(f"History ({s.history.count()}):"))
        for line in s.history.summaries():
            self.output(f"  {line}")

    # --- loop -------------------------------------------------------------
    def run_once(self) -> bool:
        """Handle one menu selection. Returns False once the user chose Exit."""
        self.render()
        item = select(self.menu, self.input("Select an option: "))
        if item is None:
            self.session.status = Status("Invalid selection. Choose a number from the menu.", Severity.ERROR)
            return True
        if item.command is Command.EXIT:
            return False
        logger.debug("menu %s -> %s", item.key, item.command.value)
        self.handlers[item.command](item)
        return True

    def run(self) -> None:
        while self.run_once():
            pass
        self.output("Goodbye.")

    # --- handlers ---------------------------------------------------------
    def _dose(self, item: MenuItem) -> Status:
        return self.session.calculate(item.profile)

    def _ask_manual_profile(self) -> tuple[str, float, float, float]:
        name = prompt_text("Medication name: ", self.input, self.output)
        strength = prompt_positive("Strength (mg): ", self.input, self.output)
        volume = prompt_positive("Per volume (mL): ", self.input, self.output)
        rate = prompt_positive("Dose rate (mg/kg): ", self.input, self.output)
        return name, strength, volume, rate

    def _manual(self, item: MenuItem) -> Status:
        return self.session.calculate_manual(*self._ask_manual_profile())

    def _ask_range(self) -> tuple[float, float, float]:
        start = prompt_positive("Start weight (kg): ", self.input, self.output)
        end = prompt_positive("End weight (kg): ", self.input, self.output)
        step = prompt_positive("Increment (kg): ", self.input, self.output)
        return start, end, step

    def _chart(self, item: MenuItem) -> Status:
        return self.session.chart(item.profile, *self._ask_range())

    def _manual_chart(self, item: MenuItem) -> Status:
        name, strength, volume, rate = self._ask_manual_profile()
        profile = MedicationProfile(name, strength, volume, rate)
        return self.session.chart(profile, *self._ask_range())

    def _weight_kg(self, item: MenuItem) -> Status:
        cfg = self.session.config
        return self.session.set_weight_kg(
            prompt_weight("Weight (kg): ", cfg.caution_low_kg, cfg.caution_high_kg, self.input, self.output))

    def _weight_lb(self, item: MenuItem) -> Status:
        return self.session.set_weight_lb(prompt_positive("Weight (lb): ", self.input, self.output))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pedidose", description=BANNER)
    parser.add_argument("--config", help="JSON config file (default: $PEDIDOSE_CONFIG or ./pedidose.json)")
    parser.add_argument("--export-dir", help="folder for exported summaries")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if args.no_color:
        colors.set_color(False)

    config = load_config(args.config)
    if args.export_dir:
        config.export_dir = args.export_dir

    shell = Shell(DoseSession(config))
    try:
        shell.run()
    except (KeyboardInterrupt, EOFError):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
