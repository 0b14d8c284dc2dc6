"""Report serialization utilities."""

import json
import logging
from pathlib import Path

from application.constants import ADD_PREFIX, ERROR_PREFIX, REMOVE_PREFIX
from application.report import TaintParseReport
from infrastructure.io import write_text

logger = logging.getLogger(__name__)


def serialize_report(report: TaintParseReport, path: Path | None = None) -> str:
    """
    Render the report as JSON; also write it to path when given.

    Effects are serialized by value ('NoSchedule'); an absent removal effect is null.
    """
    text = json.dumps(report.model_dump(mode="json"), ensure_ascii=False, indent=2)
    if path is not None:
        write_text(path, text + "\n")
        logger.info("Saved report JSON: %s", path)
    return text


def render_report_text(report: TaintParseReport) -> str:
    """Human-readable listing: one '+ <taint>' or '- <selector>' line per entry."""
    if not report.ok:
        return f"{ERROR_PREFIX}{report.error}"

    lines = [f"{ADD_PREFIX}{taint}" for taint in report.to_add]
    lines.extend(f"{REMOVE_PREFIX}{selector}" for selector in report.to_remove)
    return "\n".join(lines)
