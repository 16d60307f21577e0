"""
Entry point for running momentum as a module: python -m momentum
"""

from momentum.cli.main import app

if __name__ == "__main__":
    app()
