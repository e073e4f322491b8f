"""Ring buffer of recent frames, averaged for live display."""

from __future__ import annotations

from typing import Callable

import numpy as np

from .frame import Frame

PIXELS = 8192


class LiveBuffer:
    """Keeps up to ``num_frames`` frames and averages them pixel by pixel."""

    def __init__(self, num_frames: int = 3) -> None:
        if num_frames < 1:
            raise ValueError("buffer must hold at least one frame")
        self.size = num_frames
        self._frames: list[Frame] = []
        self._slot = 0

    @property
    def frames(self) -> tuple[Frame, ...]:
        return tuple(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def _advance(self) -> None:
        if self._slot < len(self._frames) - 1:
            self._slot += 1
        else:
            self._slot = 0

    def update(self, frame: Frame) -> None:
        """Store a frame, appending until full and then overwriting a slot."""
        if len(self._frames) < self.size:
            self._frames.append(frame)
        else:
            self._frames[self._slot] = frame
        self._advance()

    def _average(self, select: Callable[[Frame], np.ndarray]) -> np.ndarray:
        x = np.arange(PIXELS, dtype=float)
        if not self._frames:
            return np.column_stack((x, np.zeros(PIXELS)))
        rows = []
        for frame in self._frames:
            values = select(frame)
            if len(values) < PIXELS:
                raise IndexError(
                    f"frame has {len(values)} pixels, at least {PIXELS} are needed"
                )
            rows.append(values[:PIXELS])
        return np.column_stack((x, np.mean(rows, axis=0)))

    def pump_on(self) -> np.ndarray:
        """Averaged pump-on curve as (pixel, value) rows."""
        return self._average(Frame.pump_on_intensities)

    def pump_off(self) -> np.ndarray:
        """Averaged pump-off curve as (pixel, value) rows."""
        return self._average(Frame.pump_off_intensities)

    def transient_absorption(self) -> np.ndarray:
        """Averaged transient absorption curve as (pixel, value) rows."""
        return self._average(Frame.transient_absorption_intensities)