"""
Parsers - Load items to sync from files.
"""

from .json_items import JsonItemParser

__all__ = ["JsonItemParser"]
