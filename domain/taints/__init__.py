"""
Taint specs: records, grammar checks and the spec parser.

All functions in this package are pure (no I/O, no logging).
"""

from domain.taints.errors import (
    DuplicateTaintError,
    InvalidTaintEffectError,
    InvalidTaintKeyError,
    InvalidTaintValueError,
    TaintSpecError,
    TaintSpecFormatError,
)
from domain.taints.models import Taint, TaintEffect, TaintToRemove
from domain.taints.parser import parse_taint, parse_taints, validate_taint_effect

__all__ = [
    # Records
    "Taint",
    "TaintEffect",
    "TaintToRemove",
    # Parsing
    "parse_taints",
    "parse_taint",
    "validate_taint_effect",
    # Errors
    "TaintSpecError",
    "TaintSpecFormatError",
    "InvalidTaintEffectError",
    "InvalidTaintKeyError",
    "InvalidTaintValueError",
    "DuplicateTaintError",
]
