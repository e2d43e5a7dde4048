import numpy as np
from .params import DTYPE
from .stream import open_streams, shift
from .key_schedule import recover_cursors
from .serialization import bytes_to_bits, bits_to_bytes

# -----------------------------
# Swap Target
# -----------------------------
def swap_target(current: int, offset: int, is_up: bool, length: int) -> int:
    if is_up:
        return (current + offset) % length
    target = current - offset
    if target < 0:
        target = length - ((-target) % length)
    # offset a multiple of length lands exactly on `length`
    if target > length - 1:
        target = (-target) % length
    return target

# -----------------------------
# Generic Passes
# -----------------------------
def _forward_pass(x: np.ndarray, streams, flip: bool) -> np.ndarray:
    work = x.tolist()
    n = len(work)
    cursors = open_streams(streams)
    is_up = False
    for i in range(n):
        offset = shift(*[c.next_forward() for c in cursors])
        target = swap_target(i, offset, is_up, n)
        if flip:
            work[i] ^= 1
        work[i], work[target] = work[target], work[i]
        is_up = not is_up
    return np.array(work, dtype=DTYPE)

def _inverse_pass(x: np.ndarray, streams, flip: bool) -> np.ndarray:
    work = x.tolist()
    n = len(work)
    state = recover_cursors(n, [len(s) for s in streams])
    cursors = open_streams(streams, state.positions)
    is_up = state.is_up
    for i in range(n - 1, -1, -1):
        offset = shift(*[c.next_backward() for c in cursors])
        target = swap_target(i, offset, is_up, n)
        work[i], work[target] = work[target], work[i]
        if flip:
            work[i] ^= 1
        is_up = not is_up
    return np.array(work, dtype=DTYPE)

# -----------------------------
# Byte Layer
# -----------------------------
def byte_pass_forward(x: np.ndarray, streams) -> np.ndarray:
    return _forward_pass(x, streams, flip=False)

def byte_pass_inverse(x: np.ndarray, streams) -> np.ndarray:
    return _inverse_pass(x, streams, flip=False)

# -----------------------------
# Bit Layer
# -----------------------------
def bit_pass_forward(x: np.ndarray, streams) -> np.ndarray:
    """Flip-then-swap over every bit of the buffer."""
    bits = _forward_pass(bytes_to_bits(x), streams, flip=True)
    return bits_to_bytes(bits, x.shape[0])

def bit_pass_inverse(x: np.ndarray, streams) -> np.ndarray:
    """Swap-then-flip, replaying the forward sequence from the last bit back."""
    bits = _inverse_pass(bytes_to_bits(x), streams, flip=True)
    return bits_to_bytes(bits, x.shape[0])
