"""
Cardano lookup tables.

Read-only constants built once at import time.
"""

from types import MappingProxyType

# Conway-era transaction body keys
BODY_FIELD_NAMES = MappingProxyType({
    0: "inputs",
    1: "outputs",
    2: "fee",
    3: "ttl",
    4: "certs",
    5: "withdrawals",
    6: "update",
    7: "auxiliary_data_hash",
    8: "validity_start_interval",
    9: "mint",
    10: "script_data_hash",
    11: "collateral",
    12: "required_signers",
    13: "network_id",
    14: "collateral_return",
    15: "total_collateral",
    16: "reference_inputs",
    17: "voting_procedures",
    18: "voting_proposals",
    19: "donation",
    20: "current_treasury_value",
})

# Same table keyed by the stringified map key
BODY_FIELD_NAMES_BY_KEY = MappingProxyType({str(k): v for k, v in BODY_FIELD_NAMES.items()})

NETWORK_LABELS = MappingProxyType({
    0: "Testnet",
    1: "Mainnet",
})

MAINNET_NETWORK_ID = 1

# Address header kinds (high nibble) for reward accounts
REWARD_ADDRESS_KINDS = frozenset({14, 15})

CERT_STAKE_REGISTRATION = 0
CERT_STAKE_DEREGISTRATION = 1
CERT_STAKE_DELEGATION = 2
CERT_VOTE_DELEGATION = 9
CERT_VOTE_DELEGATION_ALT = 15

CREDENTIAL_KEY_HASH = 0

DREP_KEY_HASH = 0
DREP_ALWAYS_ABSTAIN = 1
DREP_ALWAYS_NO_CONFIDENCE = 2

# CIP-0129 header: key type DRep (0b0010) << 4 | credential type key hash (0b0010)
CIP129_DREP_KEY_HASH_HEADER = 0x22

# CBOR tags
TAG_SET = 258
TAG_POSITIVE_BIGNUM = 2
TAG_NEGATIVE_BIGNUM = 3

POOL_KEY_HASH_SIZES = frozenset({28, 29})

LOVELACE_PER_ADA = 1_000_000
ADA_DECIMALS = 6
