"""Per-pixel statistics over a stack of camera lines."""

from __future__ import annotations

import numpy as np


class Spectrum:
    """Mean and sample variance of each row, ignoring non-finite entries.

    ``data`` holds one pixel per row and one acquisition per column. Rows
    without any finite value get a mean and a variance of zero.
    """

    def __init__(self, data) -> None:
        values = np.asarray(data, dtype=float)
        if values.ndim == 1:
            values = values.reshape(-1, 1)
        if values.ndim != 2:
            raise ValueError(f"expected a 2-D array, got {values.ndim} dimensions")

        finite = np.isfinite(values)
        counts = finite.sum(axis=1)
        cleaned = np.where(finite, values, 0.0)

        intensities = np.zeros(values.shape[0])
        has_data = counts > 0
        intensities[has_data] = cleaned[has_data].sum(axis=1) / counts[has_data]

        deviations = np.where(finite, values - intensities[:, None], 0.0)
        squares = (deviations**2).sum(axis=1)
        variance = np.zeros(values.shape[0])
        spread = counts > 1
        variance[spread] = squares[spread] / (counts[spread] - 1)

        self.intensities: np.ndarray = intensities
        self.variance: np.ndarray = variance

    def __len__(self) -> int:
        return len(self.intensities)