"""Command interpreters for product logistics and a football league."""

__version__ = "1.0.0"
__all__ = ["hashing", "league", "league_cli", "logistics"]