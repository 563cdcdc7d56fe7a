"""Core enums shared by every layer.

ErrorCode is the stable ``code`` field of problem responses; Environment
selects logging format and other runtime behavior.
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
