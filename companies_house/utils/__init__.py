"""
Utility modules for the Companies House proxy.
"""
from companies_house.utils.logging import get_logger

__all__ = [
    "get_logger",
]
