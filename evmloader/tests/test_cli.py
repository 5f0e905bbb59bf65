import json

from evmloader.cli import main

USDT = "0x5f0155d08eF4aaE2B500AefB64A3419dA8bB611a"


def _run(capsys, argv):
    code = main(argv)
    out = capsys.readouterr().out
    return code, json.loads(out) if code == 0 else None


def test_contract(capsys):
    code, out = _run(capsys, ["contract", USDT])
    assert code == 0
    assert out["address"] == "GHuABgXXF37MqV9WyqJXwvzA2eLkcxKf2t8WbiVzBLnU"
    assert out["seeds"][-1] == bytes([out["bump"]]).hex()


def test_spl_token(capsys):
    seed = "0x00000000000000000000000035B6C40e3873F361c43c073154BF8b37C1f34Cd7"
    code, out = _run(capsys, ["spl-token", USDT, seed])
    assert code == 0
    assert out["address"] == "12HWB2U31J5AMgDTaaXBdNGN8jAeJNiwpgkewCNVNKyU"


def test_authority_with_program_id(capsys):
    code, out = _run(
        capsys,
        ["--program-id", "NeonVMyRX5GbCrsAHnUwx1nYYoJAtskU1bWUo6JGNyG", "authority"],
    )
    assert code == 0
    assert out["address"] == "CUU8HLwbSc2zFEDenmauiEJbCGCNy4eAHAmznZcjB6Nn"
    assert out["seeds"][0] == b"Deposit".hex()


def test_treasury_and_balance(capsys):
    code, out = _run(capsys, ["--env", "devnet", "treasury", "3"])
    assert code == 0
    assert out["seeds"][1] == "03000000"

    code, out = _run(capsys, ["balance", USDT, "--chain-id", "245022934"])
    assert code == 0
    assert len(out["seeds"]) == 4


def test_malformed_address(capsys):
    assert main(["contract", "0x1234"]) == 2
    assert "error:" in capsys.readouterr().err


def test_bad_program_id(capsys):
    assert main(["--program-id", "notbase58!!", "authority"]) == 2
    assert "error:" in capsys.readouterr().err


def test_seed_too_long(capsys):
    assert main(["spl-token", USDT, "00" * 33]) == 2
    err = capsys.readouterr().err
    assert "error:" in err
    assert "seed 3" in err


def test_transfer_and_main_treasury(capsys):
    code, out = _run(capsys, ["transfer", USDT, "01" * 32])
    assert code == 0
    assert out["seeds"][1] == b"AUTH".hex()

    code, out = _run(capsys, ["main-treasury"])
    assert code == 0
    assert out["seeds"][0] == b"treasury_pool".hex()
