"""
Logging setup with contextvars-based metadata injection.

- Adds the current spec source (file path or 'argv') into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers.
"""

import contextvars
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_source = contextvars.ContextVar("source", default="-")
cv_resource = contextvars.ContextVar("resource", default="-")


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.source = cv_source.get() or "-"
        record.resource = cv_resource.get() or "-"
        return True


def set_log_context(
    *,
    source: str | Path | None = None,
    resource: str | None = None,
) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if source is not None:
        cv_source.set(str(source))
    if resource is not None:
        cv_resource.set(str(resource))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {
        "source": str(cv_source.get() or "-"),
        "resource": str(cv_resource.get() or "-"),
    }


def clear_log_context() -> None:
    """Reset source and resource to defaults."""
    cv_source.set("-")
    cv_resource.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Console output goes to stderr so stdout stays clean for the report.

    Args:
        log_file: Path to log file
        console_level: Minimum level for console output (default: WARNING)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    # Formatter includes context fields injected by ContextInjectFilter
    console_fmt = "%(asctime)s [%(levelname)s] src=%(source)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | src=%(source)s res=%(resource)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    # File handler (detailed, DEBUG+, with rotation)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    # PyYAML and dotenv are quiet by default; keep them that way
    logging.getLogger("yaml").setLevel(logging.WARNING)
    logging.getLogger("dotenv").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
