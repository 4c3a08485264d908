"""Tests for miscellaneous instructions (Fxxx)."""

import pytest
from chax import execute, MemoryAccessError, FONT_DATA
from chax.state import as_index
from conftest import set_registers


class TestTimers:
    """Test timer-related instructions."""

    def test_misc_timer_instructions(self, fresh_state):
        state = fresh_state

        state = execute(state, 0x6030)  # V0 = 48
        state = execute(state, 0xF015)  # Set delay timer to V0
        assert state.delay_timer == 48

        state = execute(state, 0x6120)  # V1 = 32
        state = execute(state, 0xF118)  # Set sound timer to V1
        assert state.sound_timer == 32

        state = execute(state, 0xF207)  # V2 = delay timer
        assert state.V[2] == 48


class TestIndexArithmetic:
    """Test FX1E and FX29."""

    def test_add_to_index(self, fresh_state):
        state = set_registers(fresh_state, {3: 0x10})
        state = execute(state, 0xA300)
        state = execute(state, 0xF31E)
        assert state.I == 0x310

    def test_add_to_index_sets_no_flag(self, fresh_state):
        state = set_registers(fresh_state, {3: 0xFF, 15: 0x00})
        state = execute(state, 0xAFFF)
        state = execute(state, 0xF31E)
        assert state.I == 0x10FE
        assert state.V[15] == 0

    def test_add_to_index_past_16_bits_faults_on_use(self, fresh_state):
        """I is not wrapped; a store after overflowing 0xFFFF is out of range."""
        state = set_registers(fresh_state.replace(I=as_index(0xFFF0)), {0: 0x20})
        state = execute(state, 0xF01E)
        assert state.I == 0x10010

        with pytest.raises(MemoryAccessError) as excinfo:
            execute(state, 0xF155)
        assert excinfo.value.address == 0x10010

    def test_repeated_add_to_index_never_returns_to_font(self, fresh_state):
        state = set_registers(fresh_state.replace(I=as_index(0xFF00)), {0: 0xFF})
        state = execute(state, 0xF01E)
        state = execute(state, 0xF01E)
        assert state.I == 0xFF00 + 2 * 0xFF

        with pytest.raises(MemoryAccessError):
            execute(state, 0xF055)
        with pytest.raises(MemoryAccessError):
            execute(state, 0xF065)
        with pytest.raises(MemoryAccessError):
            execute(state, 0xF033)

    @pytest.mark.parametrize("digit", range(16))
    def test_font_character(self, fresh_state, digit):
        state = set_registers(fresh_state, {4: digit})
        state = execute(state, 0xF429)
        assert state.I == digit * 5
        sprite = [int(b) for b in state.memory[int(state.I):int(state.I) + 5]]
        assert sprite == FONT_DATA[digit * 5:digit * 5 + 5]


class TestBCD:
    """Test BCD conversion."""

    @pytest.mark.parametrize("value, digits", [(234, [2, 3, 4]), (156, [1, 5, 6]), (0, [0, 0, 0]), (255, [2, 5, 5]), (7, [0, 0, 7])])
    def test_bcd_conversion(self, fresh_state, value, digits):
        state = set_registers(fresh_state, {0: value})
        state = execute(state, 0xA300)  # I = 0x300
        state = execute(state, 0xF033)

        assert [int(b) for b in state.memory[0x300:0x303]] == digits
        assert state.I == 0x300

    def test_bcd_out_of_bounds(self, fresh_state):
        state = execute(fresh_state, 0xAFFE)
        with pytest.raises(MemoryAccessError) as excinfo:
            execute(state, 0xF033)
        assert excinfo.value.address == 0xFFE


class TestRegisterBlocks:
    """Test FX55 / FX65."""

    def test_store_registers(self, fresh_state):
        state = set_registers(fresh_state, {0: 0x11, 1: 0x22, 2: 0x33, 3: 0x44})
        state = execute(state, 0xA400)
        state = execute(state, 0xF255)

        assert [int(b) for b in state.memory[0x400:0x404]] == [0x11, 0x22, 0x33, 0x00]
        assert state.I == 0x403

    def test_load_registers(self, fresh_state):
        state = fresh_state.replace(memory=fresh_state.memory.at[0x500:0x503].set(
            fresh_state.memory[0:3]))  # font bytes F0 90 90
        state = set_registers(state, {3: 0x99})
        state = execute(state, 0xA500)
        state = execute(state, 0xF265)

        assert [int(v) for v in state.V[:4]] == [0xF0, 0x90, 0x90, 0x99]
        assert state.I == 0x503

    def test_store_then_load_round_trip(self, fresh_state):
        values = {i: (i * 37 + 5) % 256 for i in range(16)}
        state = set_registers(fresh_state, values)
        state = execute(state, 0xA600)
        state = execute(state, 0xFF55)
        assert state.I == 0x610

        state = set_registers(state, {i: 0 for i in range(16)})
        state = execute(state, 0xA600)
        state = execute(state, 0xFF65)

        assert [int(v) for v in state.V] == [values[i] for i in range(16)]
        assert state.I == 0x610

    def test_store_advances_index_to_end_of_memory(self, fresh_state):
        """I + X + 1 may point one past memory; the next access faults."""
        state = execute(fresh_state, 0xAFF0)
        state = execute(state, 0xFF55)
        assert state.I == 0x1000

        with pytest.raises(MemoryAccessError) as excinfo:
            execute(state, 0xF055)
        assert excinfo.value.address == 0x1000

    def test_store_out_of_bounds(self, fresh_state):
        state = execute(fresh_state, 0xAFF8)
        with pytest.raises(MemoryAccessError):
            execute(state, 0xFF55)


class TestWaitForKey:
    """Test FX0A."""

    def test_no_key_leaves_pc(self, fresh_state):
        state = execute(fresh_state, 0xF30A)
        assert state.pc == fresh_state.pc
        assert state.awaiting_key == 3

    def test_lowest_pressed_key_wins(self, fresh_state):
        fresh_state.keypad.set_key_state(0xC, True)
        fresh_state.keypad.set_key_state(0x5, True)

        state = execute(fresh_state, 0xF30A)

        assert state.V[3] == 0x5
        assert state.pc == fresh_state.pc + 2
        assert state.awaiting_key == -1


def test_unknown_misc_instruction(fresh_state):
    state = execute(fresh_state, 0xF0FF)
    assert state.pc == fresh_state.pc + 2
