"""Command-line tool that prints derived addresses for EVM loader accounts."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from evmloader.address import Address
from evmloader.config import PROGRAM_IDS
from evmloader.errors import MalformedInputError, PdaError
from evmloader.pda import (
    derive_authority_pda,
    derive_balance_pda,
    derive_contract_pda,
    derive_main_treasury_pda,
    derive_spl_token_pda,
    derive_transfer_pda,
    derive_treasury_pda,
)


def _seed_hex(s: str) -> bytes:
    h = s[2:] if s[:2] in ("0x", "0X") else s
    try:
        return bytes.fromhex(h)
    except ValueError:
        raise MalformedInputError(f"invalid seed hex: {s!r}") from None


def _address(args: argparse.Namespace) -> Address:
    return Address.from_hex(args.address)


DERIVE_BY_KIND = {
    "authority": lambda pid, args: derive_authority_pda(pid),
    "main-treasury": lambda pid, args: derive_main_treasury_pda(pid),
    "treasury": lambda pid, args: derive_treasury_pda(pid, args.index),
    "balance": lambda pid, args: derive_balance_pda(pid, _address(args), args.chain_id),
    "contract": lambda pid, args: derive_contract_pda(pid, _address(args)),
    "spl-token": lambda pid, args: derive_spl_token_pda(
        pid, _address(args), _seed_hex(args.seed)
    ),
    "transfer": lambda pid, args: derive_transfer_pda(
        pid, _address(args), _seed_hex(args.seed)
    ),
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="evmloader-pda", description="Derive EVM loader program addresses"
    )
    ap.add_argument(
        "--env",
        default="mainnet-beta",
        choices=PROGRAM_IDS.keys(),
        help="Environment whose program id to use",
    )
    ap.add_argument("--program-id", help="Program id override (base58)")
    ap.add_argument("--verbose", action="store_true", help="log derivations to stderr")

    sub = ap.add_subparsers(dest="kind", required=True)
    sub.add_parser("authority", help="deposit authority")
    sub.add_parser("main-treasury", help="main treasury pool")

    treasury = sub.add_parser("treasury", help="treasury pool by index")
    treasury.add_argument("index", type=int)

    balance = sub.add_parser("balance", help="user balance account")
    balance.add_argument("address")
    balance.add_argument("--chain-id", type=int, required=True)

    contract = sub.add_parser("contract", help="contract storage account")
    contract.add_argument("address")

    for name, help_text in (
        ("spl-token", "token delegation account"),
        ("transfer", "transfer authorization account"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("address")
        p.add_argument("seed", help="seed bytes as hex")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        program_id = Pubkey.from_string(args.program_id or PROGRAM_IDS[args.env])
        pda = DERIVE_BY_KIND[args.kind](program_id, args)
    except (PdaError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # stdout: machine-readable only
    print(
        json.dumps(
            {
                "address": str(pda.address),
                "bump": pda.bump,
                "seeds": [s.hex() for s in pda.seeds],
            },
            indent=2,
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
