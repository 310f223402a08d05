"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: JWT verification
- identifiers: Lenient UUID parsing for filters and path parameters

Usage:
======
    from batinet.shared.utils.security import SecurityUtils
    from batinet.shared.utils.identifiers import parse_id
"""

from batinet.shared.utils.security import SecurityUtils
from batinet.shared.utils.identifiers import ID_PATTERN, parse_id, parse_id_list

__all__ = [
    "SecurityUtils",
    "ID_PATTERN",
    "parse_id",
    "parse_id_list",
]
