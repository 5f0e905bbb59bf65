"""PDA derivation for EVM loader program accounts."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from evmloader.address import Address, chain_id_bytes, treasury_index_bytes
from evmloader.errors import (
    BumpExhaustedError,
    MalformedInputError,
    SeedOverflowError,
)
from evmloader.seeds import (
    AUTHORITY_SEEDS,
    balance_account_seeds,
    contract_account_seeds,
    main_treasury_seeds,
    spl_token_seeds,
    transfer_seeds,
    treasury_seeds,
)

logger = logging.getLogger(__name__)

MAX_SEEDS = 16
MAX_SEED_LEN = 32
MAX_BUMP = 0xFF


@dataclass(frozen=True)
class DerivedAddress:
    """A canonical PDA together with the seeds (bump last) that sign for it."""

    address: Pubkey
    bump: int
    seeds: tuple[bytes, ...]


def _check_seeds(seeds: Sequence[bytes]) -> None:
    if len(seeds) > MAX_SEEDS:
        raise SeedOverflowError(f"too many seeds: {len(seeds)}, max {MAX_SEEDS}")
    for i, seed in enumerate(seeds):
        if len(seed) > MAX_SEED_LEN:
            raise SeedOverflowError(
                f"seed {i} is {len(seed)} bytes, max {MAX_SEED_LEN}"
            )


def _create_program_address(
    seeds: Sequence[bytes], program_id: Pubkey
) -> Pubkey | None:
    # Seeds are already within limits here, so the PubkeyError solders raises
    # means the hash landed on the curve. solders does not export that class.
    try:
        return Pubkey.create_program_address(list(seeds), program_id)
    except Exception as e:
        if type(e).__name__ != "PubkeyError":
            raise
        return None


def try_create_program_address(
    seeds: Sequence[bytes], program_id: Pubkey
) -> Pubkey | None:
    """Create a program address from seeds. Returns None if it lands on the curve."""
    _check_seeds(seeds)
    return _create_program_address(seeds, program_id)


def find_program_address(
    seeds: Sequence[bytes], program_id: Pubkey
) -> tuple[Pubkey, int]:
    """Find the canonical PDA for seeds, searching bumps from 255 down to 0."""
    # The bump takes one of the MAX_SEEDS slots.
    _check_seeds([*seeds, b""])
    for bump in range(MAX_BUMP, -1, -1):
        address = _create_program_address([*seeds, bytes([bump])], program_id)
        if address is not None:
            logger.debug(f"Derived {address} with bump {bump} for program {program_id}")
            return address, bump
    raise BumpExhaustedError(
        f"no off-curve address for {len(seeds)} seeds under program {program_id}"
    )


def find_program_address_with_seeds(
    seeds: Sequence[bytes], program_id: Pubkey
) -> DerivedAddress:
    address, bump = find_program_address(seeds, program_id)
    return DerivedAddress(address, bump, (*seeds, bytes([bump])))


def verify_program_address(
    address: Pubkey, seeds: Sequence[bytes], program_id: Pubkey
) -> bool:
    """Check that seeds, bump included, recreate address under program_id."""
    return try_create_program_address(seeds, program_id) == address


def derive_authority_pda(program_id: Pubkey) -> DerivedAddress:
    return find_program_address_with_seeds(AUTHORITY_SEEDS, program_id)


def derive_balance_pda(
    program_id: Pubkey, address: Address, chain_id: int | bytes
) -> DerivedAddress:
    if isinstance(chain_id, int):
        chain_id = chain_id_bytes(chain_id)
    # An empty chain id would hash to the same bytes as the contract seeds.
    if not chain_id:
        raise MalformedInputError("chain id must not be empty")
    return find_program_address_with_seeds(
        balance_account_seeds(address, chain_id), program_id
    )


def derive_contract_pda(program_id: Pubkey, address: Address) -> DerivedAddress:
    return find_program_address_with_seeds(contract_account_seeds(address), program_id)


def derive_spl_token_pda(
    program_id: Pubkey, address: Address, seed: bytes
) -> DerivedAddress:
    return find_program_address_with_seeds(spl_token_seeds(address, seed), program_id)


def derive_transfer_pda(
    program_id: Pubkey, address: Address, seed: bytes
) -> DerivedAddress:
    return find_program_address_with_seeds(transfer_seeds(address, seed), program_id)


def derive_treasury_pda(program_id: Pubkey, index: int) -> DerivedAddress:
    return find_program_address_with_seeds(
        treasury_seeds(treasury_index_bytes(index)), program_id
    )


def derive_main_treasury_pda(program_id: Pubkey) -> DerivedAddress:
    return find_program_address_with_seeds(main_treasury_seeds(), program_id)
