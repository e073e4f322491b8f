"""Motorised optical delay line driven over a serial port."""

from __future__ import annotations

import time as _time
from typing import Callable, Optional

import serial

SPEED_OF_LIGHT_MM_PER_PS = 0.299792458
BAUD_RATE = 921600

Transport = Callable[[bytes], None]


def _serial_writer(port: str) -> Transport:
    """Return a writer that opens the port, sends one instruction and closes it."""

    def write(instruction: bytes) -> None:
        with serial.Serial(
            port=port,
            baudrate=BAUD_RATE,
            bytesize=serial.EIGHTBITS,
            parity=serial.PARITY_NONE,
            stopbits=serial.STOPBITS_ONE,
        ) as link:
            link.write(instruction)

    return write


class DelayStage:
    """Converts pump-probe delays in picoseconds to stage positions in millimetres.

    The light passes the stage twice, so one picosecond of delay is half the
    distance light travels in that time.
    """

    mm_per_ps = 0.5 * SPEED_OF_LIGHT_MM_PER_PS
    settle_time = 1.0

    def __init__(self, port: str = "COM5", transport: Optional[Transport] = None) -> None:
        self.port = port
        self._send: Transport = transport if transport is not None else _serial_writer(port)
        self.time_zero_position = 0.0
        self.current_position = 0.0
        self.reverse = False

    def _time_to_position(self, time: float) -> float:
        return time * self.mm_per_ps

    def _position_to_time(self, position: float) -> float:
        return position / self.mm_per_ps

    def _write(self, instruction: str) -> None:
        self._send(instruction.encode("ascii"))

    def set_reverse(self, state: bool) -> None:
        self.reverse = bool(state)

    def home(self) -> None:
        """Send the stage to its origin."""
        self._write("1OR\r")
        self.current_position = 0.0

    def go_to_time(self, time: float) -> None:
        """Move to the position giving ``time`` picoseconds after time zero."""
        target = self.time_zero_position + self._time_to_position(time)
        if self.reverse:
            target = -target
        self._write(f"1PA{target:f}\r")
        if self.settle_time > 0:
            _time.sleep(self.settle_time)
        self.current_position = target

    def get_time(self) -> float:
        return self._position_to_time(self.current_position - self.time_zero_position)

    def set_time_zero(self) -> None:
        """Take the current position as zero delay."""
        self.time_zero_position = self.current_position


def _to_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


class StageJogger:
    """Steps a delay stage back and forth by a fixed delay."""

    def __init__(self, stage: DelayStage, jog_size: float = 0.1) -> None:
        self.stage = stage
        self.jog_size = jog_size

    def jog_right(self) -> None:
        self.stage.go_to_time(self.stage.get_time() + self.jog_size)

    def jog_left(self) -> None:
        self.stage.go_to_time(self.stage.get_time() - self.jog_size)

    def set_jog_size(self, text: str) -> None:
        """Set the step from user text; unreadable text gives a step of zero."""
        self.jog_size = _to_float(text)

    def position_text(self) -> str:
        return f"{self.stage.get_time():.4f}"