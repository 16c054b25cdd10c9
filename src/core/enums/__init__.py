"""Shared enums.

ErrorCode identifies every failure a Result can carry; Environment selects
logging and debug behavior.

Usage:
    from src.core.enums import Environment, ErrorCode
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
