from dataclasses import dataclass
import numpy as np

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'

DTYPE = np.uint8

BIT = "bit"
BYTE = "byte"

DEFAULT_ROUNDS = 8          # fixed depth of the 2-stream cipher
DEFAULT_MATERIAL_LEN = 256  # bytes per generated key/salt stream

# Derived depth: MIN_DERIVED_ROUNDS .. MIN_DERIVED_ROUNDS + DERIVED_ROUND_SPAN - 1
MIN_DERIVED_ROUNDS = 8
DERIVED_ROUND_SPAN = 24

@dataclass
class CrystallineParams:
    variant: str = "crystalline"
    rounds: int = DEFAULT_ROUNDS
    pass_order: tuple = (BIT, BYTE)
    streams: int = 2

CRYSTALLINE = CrystallineParams()
CRYSTALLINE3 = CrystallineParams(variant="crystalline3", pass_order=(BYTE, BIT, BYTE), streams=3)

VARIANTS = {
    "crystalline": CRYSTALLINE,
    "crystalline3": CRYSTALLINE3,
}
