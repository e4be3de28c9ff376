# src/doseviz/console/menu.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from doseengine.types import MedicationProfile, Status


class Command(Enum):
    DOSE = "dose"
    ALL_PRESETS = "all_presets"
    MANUAL = "manual"
    CHART = "chart"
    MANUAL_CHART = "manual_chart"
    WEIGHT_KG = "weight_kg"
    WEIGHT_LB = "weight_lb"
    CLEAR = "clear"
    EXPORT = "export"
    EXIT = "exit"


@dataclass(frozen=True)
class MenuItem:
    """
    One selectable line of the menu.

    key      : what the user types ("1", "2", ... "0")
    command  : which action this is
    label    : text shown in the menu
    profile  : the preset for DOSE / CHART items, otherwise None
    """
    key: str
    command: Command
    label: str
    profile: MedicationProfile | None = None


Handler = Callable[[MenuItem], Status]


def build_menu(presets: Sequence[MedicationProfile]) -> list[MenuItem]:
    """
    Numbered menu for the given presets. With the three built-ins:
      1-3 doses, 4 all presets, 5 manual, 6-8 preset charts, 9 manual chart,
      10 weight (kg), 11 weight (lb), 12 clear, 13 export, 0 exit
    """
    items: list[MenuItem] = []

    def add(command: Command, label: str, profile: MedicationProfile | None = None) -> None:
        items.append(MenuItem(str(len(items) + 1), command, label, profile))

    for p in presets:
        add(Command.DOSE, f"{p.name} ({p.concentration_label}, {p.dose_rate_mg_per_kg:g} mg/kg)", p)
    add(Command.ALL_PRESETS, "Calculate all presets")
    add(Command.MANUAL, "Manual entry")
    for p in presets:
        add(Command.CHART, f"Dosing chart: {p.name}", p)
    add(Command.MANUAL_CHART, "Dosing chart: manual entry")
    add(Command.WEIGHT_KG, "Enter weight (kg)")
    add(Command.WEIGHT_LB, "Enter weight (lb)")
    add(Command.CLEAR, "Clear history")
    add(Command.EXPORT, "Export history")
    items.append(MenuItem("0", Command.EXIT, "Exit"))
    return items


def select(menu: Sequence[MenuItem], choice: str) -> MenuItem | None:
    """Menu item for the typed key, or None if it is not on the menu."""
    choice = choice.strip()
    for item in menu:
        if item.key == choice:
            return item
    return None


def render_menu(menu: Sequence[MenuItem]) -> str:
    return "\n".join(f"{item.key:>3}. {item.label}" for item in menu)
