from .params import bcolors

# -----------------------------
# Errors
# -----------------------------
class CrystallineError(ValueError):
    """Base class for every error raised by the cipher."""

class InvalidKeyMaterial(CrystallineError):
    def __init__(self, name: str):
        super().__init__(f"{bcolors.FAIL}{name} must not be empty{bcolors.ENDC}")
        self.name = name

class NegativeRounds(CrystallineError):
    def __init__(self, rounds: int):
        super().__init__(f"{bcolors.FAIL}rounds must be >= 0, got {rounds}{bcolors.ENDC}")
        self.rounds = rounds

class LengthMismatchOnBitPacking(CrystallineError):
    def __init__(self, bit_count: int, byte_count: int):
        super().__init__(
            f"{bcolors.FAIL}{bit_count} bits cannot be packed into {byte_count} bytes{bcolors.ENDC}"
        )
        self.bit_count = bit_count
        self.byte_count = byte_count
