"""Fetch the calldata of a mined transaction from a JSON-RPC node."""

import logging

from web3 import Web3

from ..errors import TransactionFetchError

logger = logging.getLogger(__name__)


def fetch_transaction_input(tx_hash: str, rpc_url: str, timeout: float = 10) -> str:
    """
    Return the 0x-prefixed input data of `tx_hash`.

    Raises:
        TransactionFetchError: if the node cannot be reached or the hash is unknown
    """
    if not rpc_url:
        raise TransactionFetchError("An RPC URL is required to fetch transactions by hash")

    w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={'timeout': timeout}))
    try:
        tx = w3.eth.get_transaction(tx_hash)
    except Exception as e:
        raise TransactionFetchError(f"Failed to fetch transaction {tx_hash}: {e}") from e

    tx_input = tx.get('input')
    if tx_input is None:
        raise TransactionFetchError(f"Transaction {tx_hash} has no input data")
    if isinstance(tx_input, (bytes, bytearray)):
        tx_input = '0x' + bytes(tx_input).hex()

    logger.info(f"✓ Fetched input for {tx_hash} ({len(tx_input)} chars)")
    return tx_input
