"""
Evaluation cycle runner.

Connects to the RPC endpoint, then runs Fetch -> Fetch -> Evaluate ->
Classify once per cycle and prints the result in a console-friendly
format (or as one JSON object per cycle).
"""

import asyncio
import sys
import time
from typing import Callable, List, Optional, TextIO, Tuple

import requests
from web3 import Web3
from web3.exceptions import Web3Exception

from .adapters.router import RouterQuoteSource
from .config import ArbConfig
from .evaluator import classify, evaluate, pick_direction
from .exceptions import QuoteArbError, RpcError, RpcTimeoutError
from .interfaces import QuoteSource
from .quotes import fetch_quote_pair, fetch_quote_pair_async
from .types import CycleReport, Quote
from .units import to_raw
from .utils import format_amount, get_logger, safe_json_dump

logger = get_logger(__name__)

CHAIN_NAMES = {
    1: "Ethereum Mainnet",
    10: "Optimism",
    56: "BSC",
    137: "Polygon",
    8453: "Base",
    42161: "Arbitrum",
}


# ANSI color codes for pretty output
class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"


class QuoteArbRunner:
    """
    Two-venue quote arbitrage checker.

    Holds no state between cycles besides the cycle counter; every cycle
    fetches fresh quotes.
    """

    def __init__(
        self,
        config: ArbConfig,
        json_output: bool = False,
        out: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize runner with config.

        Args:
            config: Validated ArbConfig instance
            json_output: If True, print one JSON object per cycle
            out: Output stream (default: sys.stdout)
            sleep: Sleep function used between cycles
        """
        self.config = config
        self.json_output = json_output
        self.out = out
        self.sleep = sleep

        self.web3: Optional[Web3] = None
        self.sources: List[QuoteSource] = []
        self.cycle_count = 0

    def connect(self) -> None:
        """
        Connect to the RPC endpoint and bind both venues.

        Raises:
            RpcError: If the endpoint cannot be queried
        """
        rpc_url = self.config.rpc_url
        logger.info(f"Connecting to RPC: {rpc_url}")

        self.web3 = Web3(
            Web3.HTTPProvider(
                rpc_url,
                request_kwargs={"timeout": self.config.rpc_timeout_sec},
                # No transport retries: one round-trip per RPC call
                exception_retry_configuration=None,
            )
        )

        # Verify we can query the chain (is_connected() swallows the reason)
        chain_id = self._rpc(lambda: self.web3.eth.chain_id)
        block = self._rpc(lambda: self.web3.eth.block_number)

        chain_name = CHAIN_NAMES.get(chain_id, f"Chain {chain_id}")
        logger.info(f"Connected to {chain_name} (block #{block:,})")

        self.sources = [RouterQuoteSource(self.web3, v) for v in self.config.venues]

    def _rpc(self, call: Callable):
        """Run a plain web3 read, mapping transport failures to RpcError."""
        endpoint = self.config.rpc_url
        try:
            return call()
        except (requests.exceptions.Timeout, TimeoutError) as e:
            raise RpcTimeoutError(f"RPC request timed out: {e}", endpoint=endpoint) from e
        except (requests.exceptions.RequestException, Web3Exception, OSError, ValueError) as e:
            raise RpcError(
                f"RPC request failed: {e}", endpoint=endpoint, reason="transport"
            ) from e

    def block_number(self) -> Optional[int]:
        """Current block height, or None when running without a web3 connection."""
        if self.web3 is None:
            return None
        return self._rpc(lambda: self.web3.eth.block_number)

    def _quote_args(self) -> Tuple[int, tuple, int, int]:
        cfg = self.config
        amount_in = to_raw(cfg.quote_amount, cfg.input_token.decimals)
        return (
            amount_in,
            cfg.path,
            cfg.input_token.decimals,
            cfg.output_token.decimals,
        )

    def fetch_quotes(self) -> Tuple[Quote, Quote]:
        """
        Fetch one quote per venue.

        Raises:
            RuntimeError: If connect() has not been called
            RpcError / ProtocolError: From the first failing venue
        """
        if len(self.sources) != 2:
            raise RuntimeError("Venues not bound. Call connect() before running.")

        source_a, source_b = self.sources
        args = self._quote_args()

        if self.config.concurrent:
            return asyncio.run(fetch_quote_pair_async(source_a, source_b, *args))
        return fetch_quote_pair(source_a, source_b, *args)

    def run_cycle(self) -> CycleReport:
        """
        Run one Fetch -> Fetch -> Evaluate -> Classify cycle.

        Returns:
            CycleReport for this cycle

        Raises:
            QuoteArbError: Any failure aborts the cycle without a report
        """
        self.cycle_count += 1
        cfg = self.config

        block = self.block_number()
        quote_a, quote_b = self.fetch_quotes()

        price_a = quote_a.unit_price
        price_b = quote_b.unit_price
        profit = evaluate(price_a, price_b, cfg.trade_size, cfg.gas_cost)
        classification = classify(profit, cfg.min_profit)

        names = {"a": quote_a.venue.name, "b": quote_b.venue.name}
        buy, sell = pick_direction(price_a, price_b)

        logger.debug(
            f"Cycle {self.cycle_count}: {names['a']}={price_a:.6f} "
            f"{names['b']}={price_b:.6f} profit={profit:.6f}"
        )

        return CycleReport(
            block_number=block,
            quote_a=quote_a,
            quote_b=quote_b,
            profit=profit,
            classification=classification,
            buy_venue=names[buy],
            sell_venue=names[sell],
        )

    def print_report(self, report: CycleReport) -> None:
        """Print one cycle's result as text or JSON."""
        out = self.out or sys.stdout

        if self.json_output:
            print(safe_json_dump(report.to_dict()), file=out)
            return

        c = Colors
        cfg = self.config
        in_sym = cfg.input_token.symbol
        out_sym = cfg.output_token.symbol
        qty = f"{cfg.quote_amount:g}"

        if report.block_number is not None:
            print(f"{c.DIM}Block #{report.block_number:,}{c.RESET}", file=out)
        for quote in (report.quote_a, report.quote_b):
            print(
                f"{quote.venue.name}: {qty} {in_sym} = "
                f"{format_amount(quote.unit_price * cfg.quote_amount, out_sym)}",
                file=out,
            )

        profit = format_amount(report.profit, out_sym)
        if report.classification.is_opportunity:
            print(
                f"{c.GREEN}{c.BOLD}Arbitrage Opportunity!{c.RESET} Profit: {profit} "
                f"(buy on {report.buy_venue}, sell on {report.sell_venue})",
                file=out,
            )
        else:
            print(
                f"{c.YELLOW}No arbitrage opportunity yet.{c.RESET} (Profit = {profit})",
                file=out,
            )

    def run(self) -> None:
        """
        Main loop: cycle, print, sleep.

        Runs a single cycle when config.once is set (errors propagate).
        Otherwise repeats every poll_sec seconds; a failed cycle is logged
        and the next one starts on schedule.
        """
        while True:
            try:
                report = self.run_cycle()
                self.print_report(report)
            except QuoteArbError as e:
                if self.config.once:
                    raise
                logger.error(f"Cycle {self.cycle_count} failed: {e}")

            if self.config.once:
                break

            self.sleep(self.config.poll_sec)
