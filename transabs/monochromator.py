"""Scanning monochromator controlled by text commands over a serial port."""

from __future__ import annotations

import re
from typing import Any, Optional

import serial

BAUD_RATE = 9600

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _second_field(response: str) -> str:
    fields = response.split(" ")
    if len(fields) < 2:
        raise ValueError(f"unexpected reply: {response!r}")
    return fields[1]


class Monochromator:
    """Grating and wavelength control; replies end with a line feed."""

    def __init__(self, port: str = "COM3", transport: Optional[Any] = None) -> None:
        self.port = port
        self._link = transport

    def __enter__(self) -> "Monochromator":
        self.connect()
        return self

    def __exit__(self, *exc: object) -> None:
        self.disconnect()

    @property
    def is_connected(self) -> bool:
        return self._link is not None and bool(getattr(self._link, "is_open", True))

    def connect(self) -> None:
        """Open the port, clear pending data and switch echo off."""
        if self._link is None:
            self._link = serial.Serial(
                port=self.port,
                baudrate=BAUD_RATE,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
            )
        self._link.reset_input_buffer()
        self._link.reset_output_buffer()
        self._write("NO-ECHO\r")
        self._read()

    def disconnect(self) -> None:
        if self._link is not None:
            self._link.close()
        self._link = None

    def _require_link(self) -> Any:
        if not self.is_connected:
            raise ConnectionError("monochromator is not connected")
        return self._link

    def _write(self, instruction: str) -> None:
        self._require_link().write(instruction.encode("ascii"))

    def _read(self) -> str:
        link = self._require_link()
        reply = bytearray()
        while True:
            byte = link.read(1)
            if not byte:
                raise ConnectionError("no reply from monochromator")
            reply += byte
            if byte == b"\n":
                return reply.decode("ascii", errors="replace")

    def _query(self, instruction: str) -> str:
        self._write(instruction)
        return self._read()

    def get_grating(self) -> int:
        field = _second_field(self._query("?GRATING\r"))
        match = _INT.match(field)
        if match is None:
            raise ValueError(f"no grating number in {field!r}")
        return int(match.group(1))

    def set_grating(self, index: int) -> None:
        self._query(f"{index} GRATING\r")

    def get_wavelength(self) -> float:
        field = _second_field(self._query("?NM\r"))
        match = _FLOAT.match(field)
        if match is None:
            raise ValueError(f"no wavelength in {field!r}")
        return float(match.group(1))

    def set_wavelength(self, wavelength: float) -> None:
        """Move to a wavelength in nanometres, sent with three decimals."""
        self._query(f"{wavelength:.3f} GOTO\r")