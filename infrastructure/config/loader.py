"""Taint spec file loading (YAML or plain text)."""

from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import TaintSpecFile
from infrastructure.constants import TEXT_SUFFIXES, YAML_SUFFIXES
from infrastructure.io.fs import read_text


def _load_yaml(path: Path) -> Any:
    """Load YAML file and return the parsed document."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _parse_text_specs(text: str) -> list[str]:
    """One spec per line; blank lines and '#' comments are skipped."""
    specs: list[str] = []
    for line in text.splitlines():
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        specs.append(s)
    return specs


def load_taint_spec_file(path: Path) -> TaintSpecFile:
    """
    Load taint specs from a file, dispatching on the file extension.

    Supported formats:
    - YAML (.yaml, .yml): a mapping with a `taints` list (and optional `resource`),
      or a bare list of specs
    - Text (.txt): one spec per line, '#' comments allowed

    Args:
        path: Path to spec file

    Returns:
        TaintSpecFile with the raw (unparsed) specs

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If the format is unsupported or the document has the wrong shape
    """
    suffix = path.suffix.lower()

    if suffix in YAML_SUFFIXES:
        data = _load_yaml(path)
        if data is None:
            return TaintSpecFile()
        if isinstance(data, list):
            return TaintSpecFile(taints=data)
        if not isinstance(data, dict):
            raise ValueError(f"Expected YAML mapping or list in {path}, got {type(data)}")
        unknown = set(data) - set(TaintSpecFile.model_fields)
        if unknown:
            raise ValueError(f"Unknown keys in {path}: {sorted(unknown)}")
        return TaintSpecFile(**data)
    elif suffix in TEXT_SUFFIXES:
        if not path.exists():
            raise FileNotFoundError(f"Spec file not found: {path}")
        return TaintSpecFile(taints=_parse_text_specs(read_text(path)))
    else:
        supported = ", ".join(YAML_SUFFIXES + TEXT_SUFFIXES)
        raise ValueError(f"Unsupported spec file format: {suffix}. Supported formats: {supported}")
