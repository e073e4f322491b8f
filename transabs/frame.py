"""A camera frame split into pump-off and pump-on acquisitions."""

from __future__ import annotations

import numpy as np

from .spectrum import Spectrum


def _pump_off_indices(length: int) -> np.ndarray:
    count = length // 2
    if count == 0:
        return np.zeros(0, dtype=np.intp)
    if count == 1:
        return np.array([length - 2], dtype=np.intp)
    return np.linspace(0, length - 2, count).astype(np.intp)


class Frame:
    """Interleaved acquisitions: even-placed columns pump off, the next pump on."""

    def __init__(self, image) -> None:
        data = np.asarray(image, dtype=float)
        if data.ndim != 2:
            raise ValueError(f"expected a 2-D image, got {data.ndim} dimensions")

        self.length: int = data.shape[1]
        self.pump_off_indices: np.ndarray = _pump_off_indices(self.length)
        self.pump_on_indices: np.ndarray = self.pump_off_indices + 1

        off = data[:, self.pump_off_indices]
        on = data[:, self.pump_on_indices]

        self.pump_off = Spectrum(off)
        self.pump_on = Spectrum(on)
        with np.errstate(divide="ignore", invalid="ignore"):
            self.transient_absorption = Spectrum(np.log10(off / on))

    def pump_off_intensities(self) -> np.ndarray:
        return self.pump_off.intensities

    def pump_on_intensities(self) -> np.ndarray:
        return self.pump_on.intensities

    def transient_absorption_intensities(self) -> np.ndarray:
        return self.transient_absorption.intensities