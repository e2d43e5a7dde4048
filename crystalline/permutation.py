from .params import BIT, BYTE, CRYSTALLINE
from .errors import NegativeRounds
from .stream import validate_streams
from .serialization import bytes_to_buffer, buffer_to_bytes
from .shuffle import byte_pass_forward, byte_pass_inverse, bit_pass_forward, bit_pass_inverse

FORWARD_PASSES = {BIT: bit_pass_forward, BYTE: byte_pass_forward}
INVERSE_PASSES = {BIT: bit_pass_inverse, BYTE: byte_pass_inverse}

def _check(streams, rounds: int, pass_order):
    validate_streams(streams)
    if rounds < 0:
        raise NegativeRounds(rounds)
    assert len(pass_order) > 0, "pass_order must name at least one pass"
    for kind in pass_order:
        if kind not in FORWARD_PASSES:
            raise ValueError(f"Unknown pass kind {kind!r}; expected one of {sorted(FORWARD_PASSES)}")

# -----------------------------
# Round Driver
# -----------------------------
def permute_forward(data: bytes, streams, rounds: int, pass_order=CRYSTALLINE.pass_order) -> bytes:
    _check(streams, rounds, pass_order)
    y = bytes_to_buffer(data)
    # rounds counts down to 0 inclusive
    for _ in range(rounds + 1):
        for kind in pass_order:
            y = FORWARD_PASSES[kind](y, streams)
    return buffer_to_bytes(y)

def permute_inverse(data: bytes, streams, rounds: int, pass_order=CRYSTALLINE.pass_order) -> bytes:
    _check(streams, rounds, pass_order)
    y = bytes_to_buffer(data)
    for _ in range(rounds + 1):
        for kind in reversed(pass_order):
            y = INVERSE_PASSES[kind](y, streams)
    return buffer_to_bytes(y)
