import numpy as np
from typing import Optional
from .params import DTYPE
from .errors import LengthMismatchOnBitPacking

# -----------------------------
# Buffer Helpers
# -----------------------------
def bytes_to_buffer(b: bytes) -> np.ndarray:
    return np.frombuffer(bytes(b), dtype=DTYPE).copy()

def buffer_to_bytes(x: np.ndarray) -> bytes:
    return x.astype(DTYPE).tobytes()

def bytes_to_bits(x: np.ndarray) -> np.ndarray:
    """Bit 8k+j of the result is bit j (LSB first) of byte k."""
    return np.unpackbits(x.astype(DTYPE), bitorder="little")

def bits_to_bytes(bits: np.ndarray, byte_count: Optional[int] = None) -> np.ndarray:
    """Pack little-endian bits back into bytes, zero-padding the final byte."""
    needed = (bits.shape[0] + 7) // 8
    if byte_count is not None and byte_count != needed:
        raise LengthMismatchOnBitPacking(bits.shape[0], byte_count)
    return np.packbits(bits.astype(DTYPE), bitorder="little")

# -----------------------------
# File Helpers
# -----------------------------
def read_material(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()

def write_output(path: str, data: bytes):
    with open(path, "wb") as f:
        f.write(data)
