"""
Initializes the config package.

The config package is responsible for loading and managing library-wide
configurations, making them accessible throughout the library.
"""

# This import is done to facilitate cleaner imports in the project
# `from config import TransactionConfig` instead of
# `from config.transactions import TransactionConfig`
from .transactions import TransactionConfig

__all__ = ["TransactionConfig"]
