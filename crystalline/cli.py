import sys
import argparse
from base64 import b64decode
from dataclasses import replace
from .params import CrystallineParams, VARIANTS, DEFAULT_MATERIAL_LEN, bcolors
from .key_schedule import derive_rounds
from .keystore import create_keystore, store_material_in_keystore, retrieve_material_from_keystore
from .serialization import read_material, write_output
from .public_api import encrypt_file, decrypt_file
from .utils import generate_material

# -----------------------------
# CLI helpers
# -----------------------------
def load_material(args):
    if args.keystore and args.passphrase and args.key_name:
        material = retrieve_material_from_keystore(args.passphrase, args.key_name, args.keystore)
        return material["key"], material["salt"], material["salt2"]
    if not (args.key_file and args.salt_file):
        raise ValueError(f"{bcolors.FAIL}Provide --key_file/--salt_file or --keystore/--passphrase/--key_name{bcolors.ENDC}")
    salt2 = read_material(args.salt2_file) if args.salt2_file else None
    return read_material(args.key_file), read_material(args.salt_file), salt2

def params_from_args(args, key: bytes, salt: bytes) -> CrystallineParams:
    if args.variant == "derived":
        iv = b64decode(args.iv) if args.iv else b""
        return CrystallineParams(variant="derived", rounds=derive_rounds(key, salt, iv))
    base = VARIANTS[args.variant]
    return replace(base, rounds=base.rounds if args.rounds is None else args.rounds)

def add_material_args(p):
    p.add_argument("--key_file", help="Key stream file")
    p.add_argument("--salt_file", help="Salt stream file")
    p.add_argument("--salt2_file", help="Second salt stream file (crystalline3)")
    p.add_argument("--keystore", help="Keystore filename")
    p.add_argument("--passphrase", help="Keystore passphrase")
    p.add_argument("--key_name", help="Entry name in keystore")

def add_cipher_args(p, default_out: str):
    p.add_argument("--in_path", required=True, help="Input file path")
    p.add_argument("--out_file", default=default_out, help="Output file")
    p.add_argument("--variant", choices=sorted(VARIANTS) + ["derived"], default="crystalline", help="Cipher variant")
    p.add_argument("--rounds", type=int, default=None, help=f"Number of rounds (default {CrystallineParams.rounds})")
    p.add_argument("--iv", help="IV for the derived variant (base64)")
    add_material_args(p)

# -----------------------------
# CLI Main
# -----------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Crystalline - positional permutation cipher")
    subparsers = parser.add_subparsers(dest="command")

    create_keystore_parser = subparsers.add_parser("create_keystore", help="Create encrypted keystore")
    create_keystore_parser.add_argument("--passphrase", required=True, help="Keystore passphrase")
    create_keystore_parser.add_argument("--keystore_file", default="keystore.json", help="Keystore filename")

    generate_parser = subparsers.add_parser("generate", help="Generate random key/salt streams")
    generate_parser.add_argument("--length", type=int, default=DEFAULT_MATERIAL_LEN, help="Bytes per stream")
    generate_parser.add_argument("--salt2", action="store_true", help="Also generate a second salt")
    generate_parser.add_argument("--key_file", default="key.rng", help="Key output file")
    generate_parser.add_argument("--salt_file", default="salt.rng", help="Salt output file")
    generate_parser.add_argument("--salt2_file", default="salt2.rng", help="Second salt output file")
    generate_parser.add_argument("--keystore", help="Store in this keystore instead of files")
    generate_parser.add_argument("--passphrase", help="Keystore passphrase")
    generate_parser.add_argument("--key_name", help="Entry name in keystore")

    encrypt_parser = subparsers.add_parser("encrypt", help="Encrypt a file")
    add_cipher_args(encrypt_parser, "ciphertext.bin")

    decrypt_parser = subparsers.add_parser("decrypt", help="Decrypt a file")
    add_cipher_args(decrypt_parser, "plaintext.bin")

    args = parser.parse_known_args(argv)[0]

    try:
        match args.command:
            case "create_keystore":
                create_keystore(args.passphrase, args.keystore_file)
            case "generate":
                key = generate_material(args.length)
                salt = generate_material(args.length)
                salt2 = generate_material(args.length) if args.salt2 else None
                if args.keystore and args.passphrase and args.key_name:
                    store_material_in_keystore(args.passphrase, args.key_name, key, salt, salt2, args.keystore)
                    print(f"Key material stored in keystore as {args.key_name}")
                else:
                    write_output(args.key_file, key)
                    write_output(args.salt_file, salt)
                    written = [args.key_file, args.salt_file]
                    if salt2 is not None:
                        write_output(args.salt2_file, salt2)
                        written.append(args.salt2_file)
                    print(f"Key material written: {', '.join(written)}")
            case "encrypt" | "decrypt":
                key, salt, salt2 = load_material(args)
                params = params_from_args(args, key, salt)
                run = encrypt_file if args.command == "encrypt" else decrypt_file
                run(args.in_path, args.out_file, key, salt, salt2, params)
            case _:
                parser.print_help()
    except Exception as e:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        sys.exit(1)

if __name__ == "__main__":
    main()
