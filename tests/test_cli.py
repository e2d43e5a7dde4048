import pytest
from crystalline.cli import main

def run(*argv):
    main(list(argv))

def test_generate_encrypt_decrypt_files(tmp_path, capsys):
    key, salt = tmp_path / "key.rng", tmp_path / "salt.rng"
    plain, ct, out = tmp_path / "plain.txt", tmp_path / "ct.bin", tmp_path / "out.txt"
    plain.write_bytes(b"Encrypting plain text...")
    run("generate", "--length", "32", "--key_file", str(key), "--salt_file", str(salt))
    assert len(key.read_bytes()) == 32
    run("encrypt", "--in_path", str(plain), "--out_file", str(ct), "--key_file", str(key), "--salt_file", str(salt), "--rounds", "2")
    assert ct.read_bytes() != plain.read_bytes()
    run("decrypt", "--in_path", str(ct), "--out_file", str(out), "--key_file", str(key), "--salt_file", str(salt), "--rounds", "2")
    assert out.read_bytes() == plain.read_bytes()
    assert "Decrypted 24 bytes" in capsys.readouterr().out

def test_crystalline3_via_keystore(tmp_path):
    ks = tmp_path / "keystore.json"
    plain, ct, out = tmp_path / "plain.txt", tmp_path / "ct.bin", tmp_path / "out.txt"
    plain.write_bytes(b"three salts")
    run("create_keystore", "--passphrase", "pw", "--keystore_file", str(ks))
    run("generate", "--length", "16", "--salt2", "--keystore", str(ks), "--passphrase", "pw", "--key_name", "k")
    common = ["--variant", "crystalline3", "--rounds", "1", "--keystore", str(ks), "--passphrase", "pw", "--key_name", "k"]
    run("encrypt", "--in_path", str(plain), "--out_file", str(ct), *common)
    run("decrypt", "--in_path", str(ct), "--out_file", str(out), *common)
    assert out.read_bytes() == b"three salts"

def test_derived_variant(tmp_path):
    key, salt = tmp_path / "key.rng", tmp_path / "salt.rng"
    key.write_bytes(b"\x01\x02\x03")
    salt.write_bytes(b"\x04\x05")
    plain, ct, out = tmp_path / "plain.txt", tmp_path / "ct.bin", tmp_path / "out.txt"
    plain.write_bytes(b"derived depth")
    common = ["--variant", "derived", "--iv", "ECAw", "--key_file", str(key), "--salt_file", str(salt)]
    run("encrypt", "--in_path", str(plain), "--out_file", str(ct), *common)
    run("decrypt", "--in_path", str(ct), "--out_file", str(out), *common)
    assert out.read_bytes() == b"derived depth"

def test_missing_salt2_exits_with_error(tmp_path, capsys):
    key, salt, plain = tmp_path / "key.rng", tmp_path / "salt.rng", tmp_path / "plain.txt"
    key.write_bytes(b"\x01")
    salt.write_bytes(b"\x02")
    plain.write_bytes(b"data")
    with pytest.raises(SystemExit) as exc:
        run("encrypt", "--in_path", str(plain), "--variant", "crystalline3", "--key_file", str(key), "--salt_file", str(salt), "--out_file", str(tmp_path / "ct"))
    assert exc.value.code == 1
    assert "requires a second salt" in capsys.readouterr().out

def test_empty_key_file_exits_with_error(tmp_path, capsys):
    key, salt, plain = tmp_path / "key.rng", tmp_path / "salt.rng", tmp_path / "plain.txt"
    key.write_bytes(b"")
    salt.write_bytes(b"\x02")
    plain.write_bytes(b"data")
    with pytest.raises(SystemExit):
        run("encrypt", "--in_path", str(plain), "--key_file", str(key), "--salt_file", str(salt), "--out_file", str(tmp_path / "ct"))
    assert "must not be empty" in capsys.readouterr().out
