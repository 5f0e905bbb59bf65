from evmloader.address import Address, chain_id_bytes, treasury_index_bytes
from evmloader.config import (
    ACCOUNT_SEED_VERSION,
    PROGRAM_IDS,
    TREASURY_POOL_SEED,
)
from evmloader.errors import (
    BumpExhaustedError,
    MalformedInputError,
    PdaError,
    SeedOverflowError,
)
from evmloader.pda import (
    MAX_SEED_LEN,
    MAX_SEEDS,
    DerivedAddress,
    derive_authority_pda,
    derive_balance_pda,
    derive_contract_pda,
    derive_main_treasury_pda,
    derive_spl_token_pda,
    derive_transfer_pda,
    derive_treasury_pda,
    find_program_address,
    find_program_address_with_seeds,
    try_create_program_address,
    verify_program_address,
)
from evmloader.seeds import (
    AUTHORITY_SEEDS,
    balance_account_seeds,
    balance_account_seeds_bump_seed,
    contract_account_seeds,
    contract_account_seeds_bump_seed,
    contract_account_signer_seeds,
    main_treasury_seeds,
    main_treasury_seeds_bump_seed,
    spl_token_seeds,
    transfer_seeds,
    treasury_seeds,
    treasury_seeds_bump_seed,
)

__all__ = [
    "ACCOUNT_SEED_VERSION",
    "AUTHORITY_SEEDS",
    "Address",
    "BumpExhaustedError",
    "DerivedAddress",
    "MAX_SEEDS",
    "MAX_SEED_LEN",
    "MalformedInputError",
    "PROGRAM_IDS",
    "PdaError",
    "SeedOverflowError",
    "TREASURY_POOL_SEED",
    "balance_account_seeds",
    "balance_account_seeds_bump_seed",
    "chain_id_bytes",
    "contract_account_seeds",
    "contract_account_seeds_bump_seed",
    "contract_account_signer_seeds",
    "derive_authority_pda",
    "derive_balance_pda",
    "derive_contract_pda",
    "derive_main_treasury_pda",
    "derive_spl_token_pda",
    "derive_transfer_pda",
    "derive_treasury_pda",
    "find_program_address",
    "find_program_address_with_seeds",
    "main_treasury_seeds",
    "main_treasury_seeds_bump_seed",
    "spl_token_seeds",
    "transfer_seeds",
    "treasury_index_bytes",
    "treasury_seeds",
    "treasury_seeds_bump_seed",
    "try_create_program_address",
    "verify_program_address",
]
