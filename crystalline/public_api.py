# crystalline/public_api.py
from typing import Optional
from .params import CRYSTALLINE, CRYSTALLINE3, DEFAULT_ROUNDS, CrystallineParams
from .key_schedule import derive_rounds
from .permutation import permute_forward, permute_inverse
from .serialization import read_material, write_output

# -----------------------------
# Two-stream cipher
# -----------------------------
def encrypt(plaintext: bytes, key: bytes, salt: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
    return permute_forward(plaintext, [key, salt], rounds, CRYSTALLINE.pass_order)

def decrypt(ciphertext: bytes, key: bytes, salt: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
    return permute_inverse(ciphertext, [key, salt], rounds, CRYSTALLINE.pass_order)

# -----------------------------
# Three-stream cipher (byte, bit, byte)
# -----------------------------
def encrypt3(plaintext: bytes, key: bytes, salt: bytes, salt2: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
    return permute_forward(plaintext, [key, salt, salt2], rounds, CRYSTALLINE3.pass_order)

def decrypt3(ciphertext: bytes, key: bytes, salt: bytes, salt2: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
    return permute_inverse(ciphertext, [key, salt, salt2], rounds, CRYSTALLINE3.pass_order)

# -----------------------------
# Derived-depth cipher
# -----------------------------
def encrypt_derived(plaintext: bytes, key: bytes, salt: bytes, iv: bytes = b"") -> bytes:
    return encrypt(plaintext, key, salt, derive_rounds(key, salt, iv))

def decrypt_derived(ciphertext: bytes, key: bytes, salt: bytes, iv: bytes = b"") -> bytes:
    return decrypt(ciphertext, key, salt, derive_rounds(key, salt, iv))

# -----------------------------
# File workflow
# -----------------------------
def _streams_for(params: CrystallineParams, key: bytes, salt: bytes, salt2: Optional[bytes]) -> list:
    if params.streams == 3:
        if salt2 is None:
            raise ValueError(f"{params.variant} requires a second salt")
        return [key, salt, salt2]
    return [key, salt]

def encrypt_file(in_path: str, out_path: str, key: bytes, salt: bytes, salt2: Optional[bytes] = None, params: CrystallineParams = CRYSTALLINE) -> str:
    data = read_material(in_path)
    streams = _streams_for(params, key, salt, salt2)
    write_output(out_path, permute_forward(data, streams, params.rounds, params.pass_order))
    print(f"Encrypted {len(data)} bytes to {out_path} ({params.variant}, rounds={params.rounds})")
    return out_path

def decrypt_file(in_path: str, out_path: str, key: bytes, salt: bytes, salt2: Optional[bytes] = None, params: CrystallineParams = CRYSTALLINE) -> str:
    data = read_material(in_path)
    streams = _streams_for(params, key, salt, salt2)
    write_output(out_path, permute_inverse(data, streams, params.rounds, params.pass_order))
    print(f"Decrypted {len(data)} bytes to {out_path} ({params.variant}, rounds={params.rounds})")
    return out_path
