# crystalline/utils.py
import secrets
from .params import DEFAULT_MATERIAL_LEN

def generate_material(length: int = DEFAULT_MATERIAL_LEN) -> bytes:
    """Random key/salt stream for testing or first-time setup."""
    if length <= 0:
        raise ValueError("Material length must be positive")
    return secrets.token_bytes(length)

def hamming_distance(a: bytes, b: bytes) -> int:
    if len(a) != len(b):
        raise ValueError("Inputs must have equal length")
    return sum(bin(x ^ y).count("1") for x, y in zip(a, b))
