"""
Uniswap V2 style router adapter.

Prices a token path with a read-only getAmountsOut() call against the
venue's router contract. One RPC round-trip per call, no retries.
"""

from typing import List

import requests
from web3 import Web3
from web3.exceptions import (
    BadFunctionCallOutput,
    ContractLogicError,
    Web3Exception,
)

from ..exceptions import ProtocolError, RpcError, RpcTimeoutError
from ..types import TokenPath, Venue
from ..utils import get_logger

logger = get_logger(__name__)

# Uniswap V2 Router ABI (minimal)
UNISWAP_V2_ROUTER_ABI = [
    {
        "constant": True,
        "inputs": [
            {"name": "amountIn", "type": "uint256"},
            {"name": "path", "type": "address[]"},
        ],
        "name": "getAmountsOut",
        "outputs": [{"name": "amounts", "type": "uint256[]"}],
        "stateMutability": "view",
        "type": "function",
    },
]


def _endpoint_of(web3: Web3) -> str:
    """Best-effort endpoint URI of the web3 provider, for error messages."""
    return str(getattr(web3.provider, "endpoint_uri", "") or "")


class RouterQuoteSource:
    """
    QuoteSource backed by a V2 router contract over web3.

    Attributes:
        web3: Connected Web3 instance
        venue: Venue whose router is called
    """

    def __init__(self, web3: Web3, venue: Venue):
        if not Web3.is_checksum_address(venue.router):
            raise ValueError(f"Invalid router address: {venue.router}")

        self.web3 = web3
        self.venue = venue
        self.router = web3.eth.contract(
            address=venue.router, abi=UNISWAP_V2_ROUTER_ABI
        )

    def get_amounts_out(self, amount_in: int, path: TokenPath) -> List[int]:
        """
        Call getAmountsOut(amount_in, path) on the router.

        Args:
            amount_in: Input amount in smallest units
            path: Checksummed token addresses

        Returns:
            Amounts returned by the router, one per path position

        Raises:
            RpcTimeoutError: If the RPC call times out
            RpcError: On connection failure, node error or revert
            ProtocolError: If the router address returns no data
        """
        endpoint = _endpoint_of(self.web3)
        try:
            amounts = self.router.functions.getAmountsOut(
                amount_in, list(path)
            ).call()
        except ContractLogicError as e:
            raise RpcError(
                f"{self.venue.name} router reverted getAmountsOut: {e}",
                endpoint=endpoint,
                reason="revert",
            ) from e
        except BadFunctionCallOutput as e:
            # Empty return data: no contract deployed or wrong ABI
            raise ProtocolError(
                f"{self.venue.name} router at {self.venue.router} returned no data: {e}",
                venue=self.venue.name,
            ) from e
        except (requests.exceptions.Timeout, TimeoutError) as e:
            raise RpcTimeoutError(
                f"getAmountsOut on {self.venue.name} timed out: {e}",
                endpoint=endpoint,
            ) from e
        except (requests.exceptions.RequestException, Web3Exception, OSError) as e:
            raise RpcError(
                f"getAmountsOut on {self.venue.name} failed: {e}",
                endpoint=endpoint,
                reason="transport",
            ) from e
        except ValueError as e:
            # Node-side JSON-RPC error responses
            raise RpcError(
                f"getAmountsOut on {self.venue.name} failed: {e}",
                endpoint=endpoint,
                reason="node",
            ) from e

        logger.debug(f"{self.venue.name} getAmountsOut({amount_in}) -> {amounts}")
        return list(amounts)
