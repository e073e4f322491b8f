# transabs

Tools for pump–probe transient absorption measurements: turning raw
line-camera images into pump-off, pump-on and transient absorption spectra,
averaging them for live display, building delay schedules, and driving a
delay stage and a monochromator over a serial line.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Spectra and frames

`Spectrum(data)` takes a 2-D array with one pixel per row and one shot per
column. Its `intensities` and `variance` attributes hold, for each row, the
mean and the sample variance of the finite values only; a row with no finite
value gets zero for both.

A raw camera image is a 2-D array with one column per shot, alternating
pump off and pump on. `Frame` splits the columns into the two sets and builds
a `Spectrum` from each, plus one from `log10(off / on)`:

```python
import numpy as np
from transabs.frame import Frame

image = np.random.uniform(100, 4000, size=(8192, 100))
frame = Frame(image)

off = frame.pump_off_intensities()
on = frame.pump_on_intensities()
ta = frame.transient_absorption_intensities()
```

The column indices used are available as `frame.pump_off_indices` and
`frame.pump_on_indices`.

## Live averaging

`LiveBuffer(num_frames)` keeps up to `num_frames` frames (default 3). Once
full, each `update` overwrites one slot in turn. `pump_off()`, `pump_on()`
and `transient_absorption()` return an array of shape `(8192, 2)`: the pixel
index in the first column and the value averaged over the stored frames in
the second. With no frames stored the values are zero; a frame with fewer
than 8192 pixels raises `IndexError`.

```python
from transabs.live_buffer import LiveBuffer

buffer = LiveBuffer(3)
buffer.update(frame)
points = buffer.transient_absorption()
```

## Delay schedules

`transabs.delays` builds lists of time delays in picoseconds:

```python
from transabs.delays import DelayRow, Spacing, generate_from_rows, save_delays, load_delays

rows = [
    DelayRow(start=0, stop=1, number=10, spacing=Spacing.LIN),
    DelayRow(start=1, stop=100, number=10, spacing=Spacing.LOG),
]
times = generate_from_rows(rows)
save_delays("delays.csv", times)
loaded = load_delays("delays.csv")
```

- `linspace(start, stop, number, include)` and
  `logspace(start, stop, number, include)` give evenly and logarithmically
  spaced values; with `include` true the last value is `stop`. `logspace`
  needs positive bounds and both reject a negative `number` with
  `ValueError`.
- `add_times_unique(existing_times, timepiece)` appends new times, skipping
  one that equals the time kept just before it.
- `generate_from_rows(rows)` joins the segments of the rows in order.
- `parse_delay_text(text)` reads comma-separated delays; unreadable entries
  become `0.0`.
- `save_delays(path, times)` writes each delay followed by a comma, using six
  significant digits, so `load_delays` gives back the rounded values.

## Hardware

`DelayStage(port="COM5", transport=None)` converts delays to stage positions
(the light passes the stage twice) and sends motion commands. `transport` is
a callable that receives each command as bytes; without it the port is
opened at 921600 baud for each command. `go_to_time` waits
`DelayStage.settle_time` seconds (1 s) after sending a move. Other methods:
`home`, `get_time`, `set_time_zero` and `set_reverse`.

`StageJogger(stage, jog_size=0.1)` steps a stage with `jog_left` and
`jog_right`; `set_jog_size(text)` reads the step from text (unreadable text
gives zero) and `position_text()` formats the current delay with four
decimals.

`Monochromator(port="COM3", transport=None)` talks at 9600 baud. `transport`
may be any object with `write`, `read`, `reset_input_buffer`,
`reset_output_buffer` and `close`, such as an open `serial.Serial`. Use it
as a context manager, or call `connect` and `disconnect`; then
`get_grating`, `set_grating`, `get_wavelength` and `set_wavelength`
(nanometres). Commands sent while not connected, or replies that never
arrive, raise `ConnectionError`.

## Scans

`Measurement(delay_stage, camera)` steps through delays with
`run_scan(delays, path)`: at each delay it moves the stage, calls
`camera.snap()` for a 2-D image, builds a `Frame` and appends it to `path`.
`save_data(frame, time, path)` writes one such record: a line with the
delay, then the pump-off, pump-on and transient absorption values, each line
of values comma-terminated.

## What this package does not do

There is no graphical interface, no live plotting and no command to run.
There is no camera driver: `Measurement` needs a camera object supplied by
the caller that provides `snap()`.