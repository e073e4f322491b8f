"""Generation, parsing and storage of pump-probe delay lists."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Iterable, Sequence


class Spacing(Enum):
    LIN = "Lin"
    LOG = "Log"


@dataclass
class DelayRow:
    """One segment of a delay table."""

    start: float = 0.0
    stop: float = 1.0
    number: int = 10
    spacing: Spacing = Spacing.LIN


def _steps(number: int, include: bool) -> float:
    if number < 0:
        raise ValueError("number of points must not be negative")
    return float(number - 1 if include else number)


def linspace(start: float, stop: float, number: int, include: bool) -> list[float]:
    """Evenly spaced values from ``start``; ``include`` puts ``stop`` last."""
    div = _steps(number, include)
    delta = (stop - start) / div if div else 0.0
    return [start + i * delta for i in range(number)]


def logspace(start: float, stop: float, number: int, include: bool) -> list[float]:
    """Logarithmically spaced values between two positive bounds."""
    div = _steps(number, include)
    if start <= 0 or stop <= 0:
        raise ValueError("logarithmic spacing needs positive bounds")
    start_log = math.log10(start)
    stop_log = math.log10(stop)
    delta = (stop_log - start_log) / div if div else 0.0
    return [10.0 ** (start_log + i * delta) for i in range(number)]


def add_times_unique(
    existing_times: Sequence[float], timepiece: Iterable[float]
) -> list[float]:
    """Append new times, skipping any that equal the most recently kept time."""
    times = list(existing_times)
    for new_time in timepiece:
        if not times or times[-1] != new_time:
            times.append(new_time)
    return times


def generate_from_rows(rows: Iterable[DelayRow]) -> list[float]:
    """Concatenate the segments described by each row of a delay table."""
    times: list[float] = []
    for row in rows:
        spacing = Spacing(row.spacing)
        if spacing is Spacing.LIN:
            piece = linspace(row.start, row.stop, row.number, True)
        else:
            piece = logspace(row.start, row.stop, row.number, True)
        times = add_times_unique(times, piece)
    return times


def _to_float(text: str) -> float:
    text = text.strip()
    if "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


def parse_delay_text(text: str) -> list[float]:
    """Read comma-separated delays; unreadable entries become 0.0."""
    simplified = " ".join(text.split())
    return [_to_float(part) for part in simplified.split(",")]


def load_delays(path: str | PathLike[str]) -> list[float]:
    """Read a file of comma-terminated delays."""
    with open(path, encoding="utf-8") as handle:
        content = handle.read()
    parts = content.split(",")
    if parts and parts[-1] == "":
        parts.pop()
    return [_to_float(part) for part in parts]


def save_delays(path: str | PathLike[str], times: Iterable[float]) -> None:
    """Write each delay followed by a comma."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("".join(f"{time:g}," for time in times))