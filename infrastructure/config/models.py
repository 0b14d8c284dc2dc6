"""Configuration models (Pydantic classes)."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TaintSpecFile(BaseModel):
    """Contents of a taint spec file (YAML or plain text)."""

    taints: list[str] = Field(
        default_factory=list,
        description="Raw taint specs, in order (e.g. 'dedicated=gpu:NoSchedule', 'spot-').",
    )
    resource: str | None = Field(
        default=None,
        description="Free-form name of the resource the taints target. Only used in logs.",
    )

    @field_validator("taints", mode="before")
    @classmethod
    def _require_strings(cls, v: object) -> object:
        # YAML turns bare 'yes'/'1' into bool/int; refuse instead of coercing.
        if v is None:
            return []
        if isinstance(v, list):
            bad = [item for item in v if not isinstance(item, str)]
            if bad:
                raise ValueError(f"taints must be a list of strings, got non-string entries: {bad!r}")
        return v


class CliConfig(BaseModel):
    """
    Runtime configuration for the command line entrypoint.
    - Built from parsed argv
    - Consumed by main() to configure logging and output
    """

    console_level: str = Field(default="WARNING", description="Minimum level for console log output.")
    file_level: str = Field(default="DEBUG", description="Minimum level for file log output.")
    log_file: Path | None = Field(default=None, description="Optional rotating log file.")
    output_format: Literal["json", "text"] = Field(default="json", description="Report format on stdout.")
    output_path: Path | None = Field(default=None, description="Write the report here instead of stdout.")

    @field_validator("console_level", "file_level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in LOG_LEVEL_NAMES:
            raise ValueError(f"Unknown log level {v!r}. Expected one of {list(LOG_LEVEL_NAMES)}")
        return level

    @property
    def console_level_no(self) -> int:
        return getattr(logging, self.console_level)

    @property
    def file_level_no(self) -> int:
        return getattr(logging, self.file_level)
