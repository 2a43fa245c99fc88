"""Entry point for running flashcard_trainer as a module.

Usage:
    python -m flashcard_trainer [-import <path>] [-export <path>]
"""
from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
