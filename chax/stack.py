"""CHIP-8 stack operations."""

import jax.numpy as jnp

from chax.constants import STACK_SIZE, ADDRESS_MASK
from chax.errors import StackOverflowError, StackUnderflowError
from chax.state import StackState


def push(stack: StackState, address: int) -> StackState:
    """Push a return address; raises StackOverflowError when all slots are used."""
    if stack.pointer >= STACK_SIZE:
        raise StackOverflowError(int(address))
    masked_address = jnp.asarray(int(address) & ADDRESS_MASK, dtype=jnp.uint16)
    new_data = stack.data.at[stack.pointer].set(masked_address)
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState, pc: int = 0) -> tuple[StackState, int]:
    """Pop a return address; raises StackUnderflowError on an empty stack."""
    if stack.pointer <= 0:
        raise StackUnderflowError(int(pc))
    new_pointer = stack.pointer - 1
    popped_address = int(stack.data[new_pointer])
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
