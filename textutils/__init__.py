"""String utility modules for textkit."""

from textutils.primitives import InvalidArgumentError
from textutils.string_utils import (
    abbreviate,
    initials,
    swap_case,
    wrap,
)
from textutils.formatter import TextFormatter

__all__ = [
    'abbreviate',
    'initials',
    'swap_case',
    'wrap',
    'InvalidArgumentError',
    'TextFormatter',
]
