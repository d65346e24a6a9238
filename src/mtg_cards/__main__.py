"""Main entry point for the MTG cards client."""

import sys

from mtg_cards.cli import main

if __name__ == "__main__":
    sys.exit(main())
