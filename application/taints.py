"""Taint parsing workflow: gather specs, parse, report."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from application.constants import ARGV_SOURCE
from application.report import TaintParseReport
from domain.taints import TaintSpecError, parse_taints
from infrastructure.config import load_taint_spec_file
from infrastructure.observability import set_log_context

logger = logging.getLogger(__name__)


def collect_specs(
    cli_specs: Sequence[str],
    spec_files: Sequence[Path],
) -> tuple[list[str], str]:
    """
    Gather raw specs from files (in the given order) followed by command line specs.

    Args:
        cli_specs: Specs passed as positional arguments
        spec_files: YAML or text spec files

    Returns:
        Tuple of (specs in order, source label for logs and reports)
    """
    specs: list[str] = []
    sources: list[str] = []

    for path in spec_files:
        spec_file = load_taint_spec_file(path)
        logger.debug("Loaded %d spec(s) from %s", len(spec_file.taints), path)
        if spec_file.resource:
            set_log_context(resource=spec_file.resource)
        specs.extend(spec_file.taints)
        sources.append(str(path))

    if cli_specs:
        specs.extend(cli_specs)
        sources.append(ARGV_SOURCE)

    return specs, ",".join(sources) or ARGV_SOURCE


def parse_taint_specs(specs: Iterable[str], *, source: str = ARGV_SOURCE) -> TaintParseReport:
    """
    Parse specs and convert the outcome into a TaintParseReport.

    Spec errors become a failed report; anything else propagates.
    """
    set_log_context(source=source)
    specs = list(specs)
    logger.debug("Parsing %d taint spec(s)", len(specs))

    try:
        to_add, to_remove = parse_taints(specs)
    except TaintSpecError as e:
        logger.warning("Rejected taint specs: %s", e)
        return TaintParseReport.failure(e, source=source)

    logger.info("Parsed %d taint(s) to add, %d to remove", len(to_add), len(to_remove))
    return TaintParseReport.success(to_add, to_remove, source=source)
