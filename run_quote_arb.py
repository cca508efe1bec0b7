#!/usr/bin/env python3
"""
Router quote arbitrage checker (see quote_arb.cli for options)
"""
import sys

from quote_arb.cli import main

if __name__ == "__main__":
    sys.exit(main())
