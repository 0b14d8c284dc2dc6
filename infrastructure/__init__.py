"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration and spec file loading (YAML, text, environment)
- Observability (logging)
- Filesystem helpers

This is the only layer that performs I/O operations.
"""

from infrastructure.config import CliConfig, TaintSpecFile, load_taint_spec_file

__all__ = [
    "load_taint_spec_file",
    "TaintSpecFile",
    "CliConfig",
]
