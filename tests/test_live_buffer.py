import numpy as np
import pytest

from transabs.frame import Frame
from transabs.live_buffer import PIXELS, LiveBuffer


def _frame(off_value, on_value, rows=PIXELS):
    image = np.empty((rows, 2))
    image[:, 0] = off_value
    image[:, 1] = on_value
    return Frame(image)


def test_empty_buffer_gives_zero_curves():
    buffer = LiveBuffer(3)
    for curve in (buffer.pump_on(), buffer.pump_off(), buffer.transient_absorption()):
        assert curve.shape == (PIXELS, 2)
        assert np.array_equal(curve[:, 0], np.arange(PIXELS))
        assert np.all(curve[:, 1] == 0.0)


def test_average_over_frames():
    buffer = LiveBuffer(3)
    buffer.update(_frame(2.0, 1.0))
    buffer.update(_frame(4.0, 3.0))
    assert buffer.pump_off()[:, 1].tolist() == [3.0] * PIXELS
    assert buffer.pump_on()[:, 1].tolist() == [2.0] * PIXELS


def test_transient_absorption_average():
    buffer = LiveBuffer(2)
    buffer.update(_frame(10.0, 1.0))
    buffer.update(_frame(1.0, 1.0))
    assert buffer.transient_absorption()[:, 1] == pytest.approx(
        np.full(PIXELS, np.log10(10.0) / 2)
    )


def test_buffer_does_not_grow_past_size():
    buffer = LiveBuffer(2)
    for value in (1.0, 2.0, 3.0, 4.0, 5.0):
        buffer.update(_frame(value, value))
    assert len(buffer) == 2


def test_slot_rotation_when_full():
    buffer = LiveBuffer(2)
    first, second, third, fourth = (_frame(v, v) for v in (1.0, 2.0, 3.0, 4.0))
    buffer.update(first)
    buffer.update(second)
    buffer.update(third)
    assert buffer.frames == (first, third)
    buffer.update(fourth)
    assert buffer.frames == (fourth, third)


def test_default_size_is_three():
    buffer = LiveBuffer()
    for value in (1.0, 2.0, 3.0, 4.0):
        buffer.update(_frame(value, value))
    assert buffer.size == 3
    assert len(buffer) == 3


def test_short_frame_raises_index_error():
    buffer = LiveBuffer(1)
    buffer.update(_frame(1.0, 1.0, rows=10))
    with pytest.raises(IndexError):
        buffer.pump_off()


def test_rejects_empty_size():
    with pytest.raises(ValueError):
        LiveBuffer(0)