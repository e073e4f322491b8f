"""Pump-probe scan: step through delays, grab frames and append them to a file."""

from __future__ import annotations

from os import PathLike
from typing import Any, Iterable

from .frame import Frame


def _row(values: Iterable[float]) -> str:
    return "".join(f"{value:g}," for value in values)


def save_data(frame: Frame, time: float, path: str | PathLike[str]) -> None:
    """Append the delay followed by the pump-off, pump-on and absorption rows."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{time:g}\n")
        handle.write(_row(frame.pump_off_intensities()) + "\n")
        handle.write(_row(frame.pump_on_intensities()) + "\n")
        handle.write(_row(frame.transient_absorption_intensities()) + "\n")


class Measurement:
    """Drives a delay stage and a camera through a list of delays."""

    def __init__(self, delay_stage: Any, camera: Any) -> None:
        self.delay_stage = delay_stage
        self.camera = camera
        self.running = False

    def run_scan(self, delays: Iterable[float], path: str | PathLike[str]) -> None:
        """Visit each delay in order, saving one frame per delay to ``path``."""
        self.running = True
        try:
            for delay in delays:
                self.delay_stage.go_to_time(delay)
                frame = Frame(self.camera.snap())
                save_data(frame, delay, path)
        finally:
            self.running = False