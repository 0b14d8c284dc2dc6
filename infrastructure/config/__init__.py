"""
Configuration management: models and loading.

Handles:
- TaintSpecFile: raw taint specs read from YAML or text files
- CliConfig: logging and output settings for the command line

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_taint_spec_file
from infrastructure.config.models import CliConfig, TaintSpecFile

__all__ = [
    "TaintSpecFile",
    "CliConfig",
    "load_taint_spec_file",
]
