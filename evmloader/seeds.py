"""Seed composition for EVM loader program accounts.

Every function returns the ordered seed list for one account kind. The
ordering, the tags and the leading version byte are part of the address
contract: changing any of them reassigns addresses for existing accounts.
"""

from evmloader.address import Address
from evmloader.config import ACCOUNT_SEED_VERSION, TREASURY_POOL_SEED

SEED_CONTRACT_DATA = b"ContractData"
SEED_AUTH = b"AUTH"

AUTHORITY_SEEDS = (b"Deposit",)


def _version(version: int) -> bytes:
    return bytes([version])


def balance_account_seeds(
    address: Address, chain_id: bytes, *, version: int = ACCOUNT_SEED_VERSION
) -> list[bytes]:
    return [_version(version), bytes(address), chain_id]


def balance_account_seeds_bump_seed(
    address: Address,
    chain_id: bytes,
    bump: int,
    *,
    version: int = ACCOUNT_SEED_VERSION,
) -> list[bytes]:
    return [*balance_account_seeds(address, chain_id, version=version), bytes([bump])]


def contract_account_seeds(
    address: Address, *, version: int = ACCOUNT_SEED_VERSION
) -> list[bytes]:
    return [_version(version), bytes(address)]


def contract_account_seeds_bump_seed(
    address: Address, bump: int, *, version: int = ACCOUNT_SEED_VERSION
) -> list[bytes]:
    return [*contract_account_seeds(address, version=version), bytes([bump])]


def contract_account_signer_seeds(
    address: Address, bump: int, *, version: int = ACCOUNT_SEED_VERSION
) -> list[list[bytes]]:
    """Signer seeds for acting on behalf of a contract account.

    Wraps the bump-seeded contract seeds in an outer list, one entry per
    signing PDA.
    """
    return [contract_account_seeds_bump_seed(address, bump, version=version)]


def spl_token_seeds(
    address: Address, seed: bytes, *, version: int = ACCOUNT_SEED_VERSION
) -> list[bytes]:
    return [_version(version), SEED_CONTRACT_DATA, bytes(address), seed]


def transfer_seeds(
    address: Address, seed: bytes, *, version: int = ACCOUNT_SEED_VERSION
) -> list[bytes]:
    return [_version(version), SEED_AUTH, bytes(address), seed]


# Treasury seeds form their own namespace and carry no version byte.


def treasury_seeds(index: bytes) -> list[bytes]:
    return [TREASURY_POOL_SEED, index]


def treasury_seeds_bump_seed(index: bytes, bump: int) -> list[bytes]:
    return [TREASURY_POOL_SEED, index, bytes([bump])]


def main_treasury_seeds() -> list[bytes]:
    return [TREASURY_POOL_SEED]


def main_treasury_seeds_bump_seed(bump: int) -> list[bytes]:
    return [TREASURY_POOL_SEED, bytes([bump])]
