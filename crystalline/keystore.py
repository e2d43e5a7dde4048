import json
import secrets
from typing import Optional
from base64 import b64encode, b64decode
from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives import hashes
from .params import bcolors

KDF_ITERATIONS = 100000

# -----------------------------
# Key Material Storage
# -----------------------------
def _fernet_for(passphrase: str, salt: bytes) -> Fernet:
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=KDF_ITERATIONS,
    )
    return Fernet(b64encode(kdf.derive(passphrase.encode())))

def _write(keystore: dict, keystore_file: str):
    with open(keystore_file, "w") as kf:
        json.dump(keystore, kf)

def create_keystore(passphrase: str, keystore_file: str):
    salt = secrets.token_bytes(16)
    _fernet_for(passphrase, salt)
    _write({"salt": b64encode(salt).decode(), "keys": {}}, keystore_file)
    print(f"Keystore created at {keystore_file}")

def load_keystore(passphrase: str, keystore_file: str):
    with open(keystore_file, "r") as kf:
        keystore = json.load(kf)
    return keystore, _fernet_for(passphrase, b64decode(keystore["salt"]))

def store_material_in_keystore(passphrase: str, key_name: str, key: bytes, salt: bytes, salt2: Optional[bytes], keystore_file: str):
    keystore, fernet = load_keystore(passphrase, keystore_file)
    material = {"key": b64encode(key).decode(), "salt": b64encode(salt).decode()}
    if salt2 is not None:
        material["salt2"] = b64encode(salt2).decode()
    keystore["keys"][key_name] = fernet.encrypt(json.dumps(material).encode()).decode()
    _write(keystore, keystore_file)

def retrieve_material_from_keystore(passphrase: str, key_name: str, keystore_file: str) -> dict:
    """Returns {"key": bytes, "salt": bytes, "salt2": bytes | None}."""
    keystore, fernet = load_keystore(passphrase, keystore_file)
    if key_name not in keystore["keys"]:
        raise ValueError(f"{bcolors.FAIL}Key {key_name} not found in keystore{bcolors.ENDC}")
    try:
        material = json.loads(fernet.decrypt(keystore["keys"][key_name].encode()).decode())
    except InvalidToken:
        raise ValueError(f"{bcolors.FAIL}Failed to decrypt key. Wrong passphrase?{bcolors.ENDC}")
    return {
        "key": b64decode(material["key"]),
        "salt": b64decode(material["salt"]),
        "salt2": b64decode(material["salt2"]) if "salt2" in material else None,
    }
