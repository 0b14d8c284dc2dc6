"""Tagged parse outcome returned at the application boundary."""

from pydantic import BaseModel, Field

from domain.taints import Taint, TaintSpecError, TaintToRemove


class TaintParseReport(BaseModel):
    """
    Outcome of parsing one batch of specs.

    Exactly one of the two shapes is populated:
    - ok=True: to_add / to_remove hold the parsed records, error is None
    - ok=False: both lists are empty, error/error_type/spec describe the first failure
    """

    ok: bool
    source: str = Field(default="-", description="Where the specs came from (file path or 'argv').")
    to_add: list[Taint] = Field(default_factory=list)
    to_remove: list[TaintToRemove] = Field(default_factory=list)
    error: str | None = None
    error_type: str | None = Field(default=None, description="Exception class name, e.g. 'DuplicateTaintError'.")
    spec: str | None = Field(default=None, description="The offending spec fragment.")

    @classmethod
    def success(cls, to_add: list[Taint], to_remove: list[TaintToRemove], *, source: str = "-") -> "TaintParseReport":
        return cls(ok=True, source=source, to_add=list(to_add), to_remove=list(to_remove))

    @classmethod
    def failure(cls, exc: TaintSpecError, *, source: str = "-") -> "TaintParseReport":
        return cls(ok=False, source=source, error=str(exc), error_type=type(exc).__name__, spec=exc.spec)
