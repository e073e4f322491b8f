"""Transient absorption spectroscopy: spectra, live averaging, delay schedules and instrument control."""

__version__ = "0.1.0"