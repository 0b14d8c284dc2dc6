"""Errors raised while parsing taint specs."""

from collections.abc import Sequence

from domain.taints.models import Taint


class TaintSpecError(ValueError):
    """Base error: a taint spec could not be parsed. `spec` is the offending fragment."""

    def __init__(self, message: str, spec: str) -> None:
        super().__init__(message)
        self.spec = spec


class TaintSpecFormatError(TaintSpecError):
    """Wrong number of ':' or '=' separators, or a missing effect on an addition."""

    def __init__(self, spec: str) -> None:
        super().__init__(f"invalid taint spec: {spec}", spec)


class InvalidTaintEffectError(TaintSpecError):
    def __init__(self, spec: str, effect: str) -> None:
        super().__init__(f"invalid taint effect: {effect}, unsupported taint effect", spec)
        self.effect = effect


class _GrammarError(TaintSpecError):
    def __init__(self, spec: str, details: Sequence[str]) -> None:
        super().__init__(f"invalid taint spec: {spec}, {'; '.join(details)}", spec)
        self.details = list(details)


class InvalidTaintKeyError(_GrammarError):
    """Key is not a valid qualified name."""


class InvalidTaintValueError(_GrammarError):
    """Value is not a valid label value."""


class DuplicateTaintError(TaintSpecError):
    def __init__(self, spec: str, taint: Taint) -> None:
        super().__init__(f"duplicated taints with the same key and effect: {taint}", spec)
        self.taint = taint
