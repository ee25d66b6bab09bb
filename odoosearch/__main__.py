"""
Entry point for running odoosearch as a module: python -m odoosearch
"""

from odoosearch.cli.commands import app

if __name__ == "__main__":
    app()
