"""CLI Entry Point - Root Module.

Allows running the tool with `python main.py` from a checkout.
It imports from the prop_filter package.
"""

from prop_filter.main import cli

__all__ = [
    "cli",
]

if __name__ == "__main__":
    cli()
