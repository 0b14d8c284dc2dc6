"""Taint records produced by the spec parser."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TaintEffect(str, Enum):
    """Supported taint effects."""

    NO_SCHEDULE = "NoSchedule"
    PREFER_NO_SCHEDULE = "PreferNoSchedule"
    NO_EXECUTE = "NoExecute"


class Taint(BaseModel):
    """A single taint to apply to a resource."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Qualified name identifying the taint.")
    value: str = Field(default="", description="Optional label value; empty string when not given.")
    effect: TaintEffect = Field(..., description="How strongly the taint repels workloads.")

    def matches(self, other: "Taint") -> bool:
        """Two taints match when key and effect are equal; value is ignored."""
        return self.key == other.key and self.effect == other.effect

    def __str__(self) -> str:
        if not self.value:
            return f"{self.key}:{self.effect.value}"
        return f"{self.key}={self.value}:{self.effect.value}"


class TaintToRemove(BaseModel):
    """
    Selector for taints to remove.

    Carries only key and effect. An effect of None selects every taint
    with the given key.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    effect: TaintEffect | None = None

    def selects(self, taint: Taint) -> bool:
        if self.key != taint.key:
            return False
        return self.effect is None or self.effect == taint.effect

    def __str__(self) -> str:
        if self.effect is None:
            return f"{self.key}-"
        return f"{self.key}:{self.effect.value}-"
