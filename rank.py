#!/usr/bin/env python3
"""
Print the position of a word in the sorted list of its anagrams.

Usage:
    python rank.py WORD [--dtype uint32] [--unbounded] [--direction remove]
"""

import sys
from pathlib import Path

# Add word_order to Python path if running from project root
sys.path.append(str(Path(__file__).parent))

from word_order.cli import main


if __name__ == "__main__":
    sys.exit(main())
