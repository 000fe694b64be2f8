#!/usr/bin/env python3
"""
Main entry point for the Oxygen factoid bot
"""

from oxygen.main import run

if __name__ == "__main__":
    run()
