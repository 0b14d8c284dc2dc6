"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- taints: taint records, name/value grammar checks and the spec parser
"""

from domain.taints import Taint, TaintEffect, TaintSpecError, TaintToRemove, parse_taints

__all__ = [
    "Taint",
    "TaintEffect",
    "TaintToRemove",
    "TaintSpecError",
    "parse_taints",
]
