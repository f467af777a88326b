# This file makes uibase.utils a Python package and exposes key utilities.

from .logger import setup_logger
from .random_data import random_alpha, random_alphanumeric, random_numeric

__all__ = [
    "setup_logger",
    "random_alpha",
    "random_numeric",
    "random_alphanumeric",
]
