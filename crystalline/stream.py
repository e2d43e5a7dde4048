import math
from dataclasses import dataclass
from .errors import InvalidKeyMaterial

# -----------------------------
# Index Stream (cyclic cursor over key/salt bytes)
# -----------------------------
@dataclass
class IndexStream:
    data: bytes
    position: int = 0

    def __post_init__(self):
        if len(self.data) == 0:
            raise InvalidKeyMaterial("stream")
        assert 0 <= self.position < len(self.data), f"Cursor {self.position} outside stream of length {len(self.data)}"

    def next_forward(self) -> int:
        value = self.data[self.position]
        self.position += 1
        if self.position == len(self.data):
            self.position = 0
        return value

    def next_backward(self) -> int:
        value = self.data[self.position]
        self.position -= 1
        if self.position == -1:
            self.position = len(self.data) - 1
        return value

def open_streams(streams, positions=None) -> list[IndexStream]:
    if positions is None:
        positions = [0] * len(streams)
    return [IndexStream(bytes(s), p) for s, p in zip(streams, positions)]

# -----------------------------
# Offset
# -----------------------------
def shift(*operands: int) -> int:
    """Swap distance for one position: the product of the current stream bytes."""
    return math.prod(operands)

def validate_streams(streams, names=("key", "salt", "salt2")):
    if len(streams) == 0:
        raise InvalidKeyMaterial("key")
    for i, s in enumerate(streams):
        if len(s) == 0:
            raise InvalidKeyMaterial(names[i] if i < len(names) else f"salt{i}")
