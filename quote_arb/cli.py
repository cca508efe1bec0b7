"""
Command line entry point for the router quote arbitrage checker.

Usage:
    quote-arb
    quote-arb --config configs/polygon_weth_usdc.yaml
    quote-arb --config configs/polygon_weth_usdc.yaml --loop --json
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from . import logging_config
from .config import load_config
from .exceptions import ConfigError, ProtocolError, RpcError
from .runner import QuoteArbRunner

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_RPC = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Cross-DEX router quote arbitrage checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single cycle with default config
  quote-arb

  # Poll every poll_sec seconds, JSON lines on stdout
  quote-arb --config configs/polygon_weth_usdc.yaml --loop --json

Environment:
  RPC_URL overrides rpc_url from the config (a .env file is read if present)
        """,
    )

    parser.add_argument(
        "--config",
        default="configs/polygon_weth_usdc.yaml",
        help="Path to config YAML file (default: configs/polygon_weth_usdc.yaml)",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--once",
        action="store_true",
        help="Run a single cycle and exit (overrides config setting)",
    )
    mode.add_argument(
        "--loop",
        action="store_true",
        help="Keep polling every poll_sec seconds (overrides config setting)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per cycle instead of text",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Query the venues one after the other instead of concurrently",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 success, 1 config error, 2 RPC/protocol failure)
    """
    args = parse_args(argv)
    logging_config.setup(getattr(logging, args.log_level))
    load_dotenv()

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"❌ Config error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    if args.once:
        config.once = True
    elif args.loop:
        config.once = False
    if args.sequential:
        config.concurrent = False

    runner = QuoteArbRunner(config, json_output=args.json)

    try:
        runner.connect()
        runner.run()
    except KeyboardInterrupt:
        print("\n\n⏸ Stopped by user")
        return EXIT_OK
    except (RpcError, ProtocolError) as e:
        print(f"❌ {type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_RPC

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
