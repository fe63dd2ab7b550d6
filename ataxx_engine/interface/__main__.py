"""
Main entry point for playing Ataxx from a terminal.

Usage:
    python -m ataxx_engine.interface
"""

from ataxx_engine.interface.protocol import main

if __name__ == "__main__":
    main()
