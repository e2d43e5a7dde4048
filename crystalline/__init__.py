# crystalline/__init__.py
from .params import (
    DTYPE, BIT, BYTE, DEFAULT_ROUNDS, CrystallineParams,
    CRYSTALLINE, CRYSTALLINE3, VARIANTS,
)
from .errors import CrystallineError, InvalidKeyMaterial, NegativeRounds, LengthMismatchOnBitPacking
from .stream import IndexStream, open_streams, shift, validate_streams
from .key_schedule import DecodeState, recover_cursors, derive_rounds
from .serialization import bytes_to_buffer, buffer_to_bytes, bytes_to_bits, bits_to_bytes, read_material, write_output
from .shuffle import swap_target, byte_pass_forward, byte_pass_inverse, bit_pass_forward, bit_pass_inverse
from .permutation import permute_forward, permute_inverse
from .keystore import create_keystore, load_keystore, store_material_in_keystore, retrieve_material_from_keystore
from .utils import generate_material, hamming_distance
from .public_api import (
    encrypt, decrypt,
    encrypt3, decrypt3,
    encrypt_derived, decrypt_derived,
    encrypt_file, decrypt_file,
)
