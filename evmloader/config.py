"""Network and seed configuration for the EVM loader program."""

import os

PROGRAM_IDS = {
    "mainnet-beta": "NeonVMyRX5GbCrsAHnUwx1nYYoJAtskU1bWUo6JGNyG",
    "devnet": "eeLSJgWzzxrqKv1UxtRVVH8FX3qCQWUs9QuAjJpETGU",
}

TREASURY_POOL_SEED = b"treasury_pool"

DEFAULT_ACCOUNT_SEED_VERSION = 3


def _load_account_seed_version() -> int:
    raw = os.environ.get("NEON_ACCOUNT_SEED_VERSION")
    if raw is None:
        return DEFAULT_ACCOUNT_SEED_VERSION
    try:
        version = int(raw, 0)
    except ValueError:
        raise ValueError(f"NEON_ACCOUNT_SEED_VERSION is not an integer: {raw!r}") from None
    if not 0 <= version <= 0xFF:
        raise ValueError(f"NEON_ACCOUNT_SEED_VERSION out of range 0..255: {version}")
    return version


# Read once at import; every versioned seed set starts with this byte.
ACCOUNT_SEED_VERSION = _load_account_seed_version()
