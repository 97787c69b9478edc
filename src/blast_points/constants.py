"""Endpoints and timing constants for the Blast points API."""

BLAST_MAINNET_POINTS_URL = "https://waitlist-api.prod.blast.io"
BLAST_TESTNET_POINTS_URL = "https://waitlist-api.develop.testblast.io"

# Server-side tokens live 60 minutes; refresh one minute early.
BEARER_TOKEN_VALIDITY_SECONDS = 59 * 60

CHALLENGE_PATH = "/v1/dapp-auth/challenge"
SOLVE_PATH = "/v1/dapp-auth/solve"


def point_balances_path(contract_address: str) -> str:
    return f"/v1/contracts/{contract_address}/point-balances"


def batches_path(contract_address: str) -> str:
    return f"/v1/contracts/{contract_address}/batches"


def batch_path(contract_address: str, batch_id: str) -> str:
    return f"/v1/contracts/{contract_address}/batches/{batch_id}"


__all__ = [
    "BEARER_TOKEN_VALIDITY_SECONDS",
    "BLAST_MAINNET_POINTS_URL",
    "BLAST_TESTNET_POINTS_URL",
    "CHALLENGE_PATH",
    "SOLVE_PATH",
    "batch_path",
    "batches_path",
    "point_balances_path",
]
