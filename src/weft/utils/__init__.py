"""Utility modules for weft.

Provides:
- text: split_tokens for attribute rendering
- logger: get_logger for logging
"""

from weft.utils.logger import get_logger
from weft.utils.text import split_tokens

__all__ = [
    "get_logger",
    "split_tokens",
]
