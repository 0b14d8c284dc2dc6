"""
CLI entrypoint for the taint spec parser.

This script performs the following steps:
- loads .env (if present) for a default spec file
- gathers specs from --file arguments and positional arguments
- parses them into taints to add and taints to remove
- prints (or saves) the report as JSON or text
- exits non-zero when a spec is rejected
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from application import collect_specs, parse_taint_specs, render_report_text, serialize_report
from application.constants import ERROR_PREFIX
from infrastructure.config import CliConfig
from infrastructure.config.models import LOG_LEVEL_NAMES
from infrastructure.constants import ENV_FILE, TAINT_SPECS_FILE_ENV
from infrastructure.io import ensure_exists, write_text
from infrastructure.observability import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_SPEC = 1


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Parse taint specs into taints to add and taints to remove",
        epilog=(
            "Spec forms: <key>=<value>:<effect>, <key>:<effect> (add); "
            "<key>=<value>:<effect>-, <key>:<effect>-, <key>- (remove). "
            "Effects: NoSchedule, PreferNoSchedule, NoExecute."
        ),
    )
    p.add_argument(
        "specs",
        nargs="*",
        metavar="SPEC",
        help="Taint specs, processed in order after any --file specs",
    )
    p.add_argument(
        "--file",
        dest="files",
        action="append",
        default=[],
        type=Path,
        help=f"YAML (.yaml/.yml) or text (.txt) spec file; repeatable (default: ${TAINT_SPECS_FILE_ENV})",
    )
    p.add_argument(
        "--env",
        type=str,
        default=str(ENV_FILE),
        help="Path to .env file, loaded only if it exists (default: .env)",
    )
    p.add_argument(
        "--format",
        dest="output_format",
        choices=["json", "text"],
        default="json",
        help="Report format (default: json)",
    )
    p.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="WARNING",
        choices=list(LOG_LEVEL_NAMES),
        help="Console log level (default: WARNING)",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=list(LOG_LEVEL_NAMES),
        help="File log level",
    )
    p.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Optional rotating log file",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    p_args = _parse_args(argv)

    env_file = Path(p_args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    cfg = CliConfig(
        console_level=p_args.console_level,
        file_level=p_args.file_level,
        log_file=p_args.log_file,
        output_format=p_args.output_format,
        output_path=p_args.output,
    )
    configure_logging(
        log_file=cfg.log_file,
        console_level=cfg.console_level_no,
        file_level=cfg.file_level_no,
    )

    spec_files: list[Path] = list(p_args.files)
    if not spec_files and not p_args.specs:
        default_file = os.environ.get(TAINT_SPECS_FILE_ENV)
        if not default_file:
            print(f"{ERROR_PREFIX}no taint specs given (pass SPEC arguments or --file)", file=sys.stderr)
            return 2
        spec_files.append(Path(default_file))
        logger.debug("Using spec file from $%s: %s", TAINT_SPECS_FILE_ENV, default_file)

    for path in spec_files:
        ensure_exists(path, "taint spec file")

    specs, source = collect_specs(p_args.specs, spec_files)
    report = parse_taint_specs(specs, source=source)

    if cfg.output_format == "json":
        text = serialize_report(report, cfg.output_path)
    else:
        text = render_report_text(report)
        if cfg.output_path is not None:
            write_text(cfg.output_path, text + "\n")

    if cfg.output_path is None:
        print(text)
    elif not report.ok:
        print(f"{ERROR_PREFIX}{report.error}", file=sys.stderr)

    return EXIT_OK if report.ok else EXIT_INVALID_SPEC


if __name__ == "__main__":
    sys.exit(main())
