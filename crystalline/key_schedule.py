from dataclasses import dataclass
from .params import MIN_DERIVED_ROUNDS, DERIVED_ROUND_SPAN
from .stream import validate_streams

@dataclass
class DecodeState:
    positions: list[int]   # per-stream cursor the backward pass starts from
    is_up: bool            # initial swap direction of the backward pass

def recover_cursors(data_length: int, stream_lengths) -> DecodeState:
    """
    Rebuild the cursor state a forward pass of `data_length` steps reached just
    before its last element, so a backward pass consumes the same stream bytes
    in reverse order.
    """
    steps = max(data_length - 1, 0)
    positions = []
    for length in stream_lengths:
        assert length > 0, "stream length must be positive"
        positions.append(steps % length)
    # Forward starts down and toggles once per element.
    is_up = data_length % 2 == 0
    return DecodeState(positions=positions, is_up=is_up)

def derive_rounds(key: bytes, salt: bytes, iv: bytes = b"") -> int:
    validate_streams([key, salt])
    sample = [key[0], key[-1], salt[0], salt[-1]]
    if iv:
        sample += [iv[0], iv[-1]]
    return MIN_DERIVED_ROUNDS + sum(sample) % DERIVED_ROUND_SPAN
