"""Tests for framebuffer rendering."""

import numpy as np
import pytest

from chax import frame_to_rgb, color_scheme


def test_frame_orientation():
    pixels = np.zeros((64, 32), dtype=bool)
    pixels[63, 0] = True

    frame = frame_to_rgb(pixels, on_color=(1, 2, 3), off_color=(9, 9, 9))

    assert frame.shape == (32, 64, 3)
    assert frame.dtype == np.uint8
    assert tuple(frame[0, 63]) == (1, 2, 3)
    assert tuple(frame[0, 0]) == (9, 9, 9)


def test_frame_scaling():
    pixels = np.zeros((64, 32), dtype=bool)
    pixels[1, 1] = True
    frame = frame_to_rgb(pixels, scale=4)
    assert frame.shape == (128, 256, 3)
    assert frame[4:8, 4:8].min() == 255
    assert frame[:4, :4].max() == 0


def test_invalid_scale():
    with pytest.raises(ValueError):
        frame_to_rgb(np.zeros((64, 32), dtype=bool), scale=0)


def test_color_schemes():
    assert color_scheme("classic") == ((255, 255, 255), (0, 0, 0))
    with pytest.raises(ValueError):
        color_scheme("nope")
