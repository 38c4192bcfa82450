#!/usr/bin/env python
"""
Counter checkout from a source checkout (no install needed).

Usage:
    python scripts/checkout.py JAKR 5 20 2020-07-03
    python scripts/checkout.py --trace LADW 3 10 07/02/20
"""
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from tool_rental.cli import main


if __name__ == "__main__":
    args = sys.argv[1:]
    if args and args[0] not in ('checkout', 'tools', '--catalog', '-h', '--help'):
        args = ['checkout'] + args
    sys.exit(main(args))
