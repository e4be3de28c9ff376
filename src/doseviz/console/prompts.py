# src/doseviz/console/prompts.py
from __future__ import annotations

from typing import Callable

from doseengine.dosing import weight_caution
from doseengine.types import Severity, Status

from .colors import style

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def prompt_number(prompt: str, input_fn: InputFn = input, output_fn: OutputFn = print) -> float:
    """
    Ask until the answer parses as a number other than 0.
    Negative numbers are returned as-is; callers decide what to do with them.
    """
    while True:
        raw = input_fn(prompt).strip()
        try:
            value = float(raw)
        except ValueError:
            output_fn(style(Status(f"'{raw}' is not a number. Try again.", Severity.ERROR)))
            continue
        if value != value or value in (float("inf"), float("-inf")):
            output_fn(style(Status("Enter a finite number.", Severity.ERROR)))
            continue
        if value == 0:
            output_fn(style(Status("Value cannot be 0. Try again.", Severity.ERROR)))
            continue
        return value


def prompt_positive(prompt: str, input_fn: InputFn = input, output_fn: OutputFn = print) -> float:
    """prompt_number() that also rejects negative values."""
    while True:
        value = prompt_number(prompt, input_fn, output_fn)
        if value > 0:
            return value
        output_fn(style(Status("Value must be greater than 0. Try again.", Severity.ERROR)))


def prompt_weight(prompt: str, low_kg: float = 5.0, high_kg: float = 99.0,
                  input_fn: InputFn = input, output_fn: OutputFn = print) -> float:
    """Positive weight in kg; prints a caution outside [low_kg, high_kg] but still accepts it."""
    weight = prompt_positive(prompt, input_fn, output_fn)
    caution = weight_caution(weight, low_kg, high_kg)
    if caution is not None:
        output_fn(style(caution))
    return weight


def prompt_text(prompt: str, input_fn: InputFn = input, output_fn: OutputFn = print) -> str:
    """Non-blank line of text."""
    while True:
        raw = input_fn(prompt).strip()
        if raw:
            return raw
        output_fn(style(Status("Please enter a value.", Severity.ERROR)))
