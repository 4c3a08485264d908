"""Tests for display operations (DXYN) and the Display collaborator."""

import jax.numpy as jnp
import pytest

from chax import execute, Display, MemoryAccessError
from conftest import setup_sprite_in_memory, set_registers


class TestBasicSprites:
    """Test basic sprite drawing."""

    def test_basic_sprite_draw(self, fresh_state):
        """Test basic sprite drawing without collision."""
        sprite = [0xC0, 0xC0]  # 11000000, 11000000
        state = setup_sprite_in_memory(fresh_state, 0x300, sprite)

        state = execute(state, 0x600A)  # V0 = 10
        state = execute(state, 0x6105)  # V1 = 5
        state = execute(state, 0xA300)  # I = 0x300
        state = execute(state, 0xD012)

        pixels = state.display.pixels
        assert pixels[10, 5] and pixels[11, 5]
        assert pixels[10, 6] and pixels[11, 6]
        assert not pixels[12, 5]
        assert state.V[15] == 0
        assert state.pc == 0x208

    def test_collision_detection(self, fresh_state):
        """Drawing the same sprite twice erases it and reports collision."""
        state = setup_sprite_in_memory(fresh_state, 0x400, [0x80])
        state = set_registers(state, {0: 20, 1: 10})
        state = execute(state, 0xA400)

        state = execute(state, 0xD011)
        assert state.display.pixel(20, 10)
        assert state.V[15] == 0

        state = execute(state, 0xD011)
        assert not state.display.pixel(20, 10)
        assert state.V[15] == 1

    def test_coordinates_wrap(self, fresh_state):
        """VX/VY beyond the screen start drawing at VX mod 64, VY mod 32."""
        state = setup_sprite_in_memory(fresh_state, 0x300, [0x80])
        state = set_registers(state, {0: 64 + 3, 1: 32 + 4})
        state = execute(state, 0xA300)
        state = execute(state, 0xD011)
        assert state.display.pixel(3, 4)

    def test_sprite_out_of_memory(self, fresh_state):
        state = execute(fresh_state, 0xAFFD)
        with pytest.raises(MemoryAccessError):
            execute(state, 0xD005)

    def test_zero_height_sprite(self, fresh_state):
        state = set_registers(fresh_state, {15: 1})
        state = execute(state, 0xD010)
        assert state.V[15] == 0
        assert jnp.sum(state.display.pixels) == 0


class TestDisplayCollaborator:
    """Test Display directly."""

    def test_draw_wraps_at_edges(self):
        display = Display()
        collision = display.draw(62, 31, [0xF0, 0x80])

        assert not collision
        assert display.pixel(62, 31) and display.pixel(63, 31)
        assert display.pixel(0, 31) and display.pixel(1, 31)
        assert display.pixel(62, 0)
        assert jnp.sum(display.pixels) == 5

    def test_xor_behavior(self):
        display = Display()
        display.draw(0, 0, [0xF0])
        collision = display.draw(2, 0, [0xF0])

        assert collision
        row = [display.pixel(x, 0) for x in range(8)]
        assert row == [True, True, False, False, True, True, False, False]

    def test_clear(self):
        display = Display()
        display.draw(5, 5, [0xFF] * 5)
        display.clear()
        assert not jnp.any(display.pixels)

    def test_present_renders_to_sink(self):
        frames = []
        display = Display(scale=2, sink=frames.append)
        display.draw(0, 0, [0x80])

        frame = display.present()

        assert frame.shape == (64, 128, 3)
        assert frames and frames[0] is frame
        assert tuple(frame[0, 0]) == (255, 255, 255)
        assert tuple(frame[1, 1]) == (255, 255, 255)
        assert tuple(frame[0, 2]) == (0, 0, 0)
