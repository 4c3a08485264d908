"""Test configuration and fixtures for CHIP-8 interpreter tests."""

import pytest
import jax.numpy as jnp

from chax import Interpreter, InterpreterConfig, create_state, get_logger, set_log_level


@pytest.fixture(autouse=True)
def clear_unknown_opcode_history():
    """Unknown-opcode history and the level live on the shared logger."""
    get_logger().clear_history()
    yield
    get_logger().clear_history()
    set_log_level("INFO")


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state for each test."""
    return create_state()


@pytest.fixture
def interpreter():
    """Provide an unthrottled interpreter."""
    return Interpreter(config=InterpreterConfig(throttle=False))


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def set_registers(state, values):
    """Helper to set several V registers from a {index: value} dict."""
    V = state.V
    for index, value in values.items():
        V = V.at[index].set(value)
    return state.replace(V=V)


def assemble(*instructions):
    """Pack 16-bit instructions into big-endian program bytes."""
    return b"".join(i.to_bytes(2, "big") for i in instructions)
