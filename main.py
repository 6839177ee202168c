#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--size N] [--mines M] [--seed S]
"""
from src.minefield.cli import main


if __name__ == "__main__":
    main()
