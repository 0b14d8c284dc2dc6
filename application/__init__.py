"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure:
gathering specs from files and argv, parsing them, and reporting the outcome.
"""

from application.report import TaintParseReport
from application.serialize import render_report_text, serialize_report
from application.taints import collect_specs, parse_taint_specs

__all__ = [
    # Main workflow
    "collect_specs",
    "parse_taint_specs",
    "TaintParseReport",
    # Output
    "serialize_report",
    "render_report_text",
]
