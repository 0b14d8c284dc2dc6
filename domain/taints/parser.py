"""
Taint spec parsing.

A spec is one of:
    <key>=<value>:<effect>    add a taint
    <key>:<effect>            add a taint with an empty value
    <key>=<value>:<effect>-   remove taints with this key and effect (value ignored)
    <key>:<effect>-           remove taints with this key and effect
    <key>-                    remove taints with this key, whatever the effect

All functions in this module are pure; they raise TaintSpecError subclasses
and never log.
"""

from collections.abc import Iterable

from pydantic import BaseModel

from domain.taints.errors import (
    DuplicateTaintError,
    InvalidTaintEffectError,
    InvalidTaintKeyError,
    InvalidTaintValueError,
    TaintSpecFormatError,
)
from domain.taints.models import Taint, TaintEffect, TaintToRemove
from domain.taints.validation import is_qualified_name, is_valid_label_value

REMOVE_SUFFIX = "-"


class TaintDescriptor(BaseModel):
    """Result of parsing one spec before the add/remove decision. Effect may be absent."""

    key: str
    value: str = ""
    effect: TaintEffect | None = None


def validate_taint_effect(raw: str, spec: str | None = None) -> TaintEffect:
    """
    Convert a raw effect string into a TaintEffect.

    Raises:
        InvalidTaintEffectError: If raw is not one of the supported effects (exact, case-sensitive)
    """
    try:
        return TaintEffect(raw)
    except ValueError as e:
        raise InvalidTaintEffectError(spec if spec is not None else raw, raw) from e


def parse_taint(spec: str) -> TaintDescriptor:
    """
    Parse a single '<key>=<value>:<effect>', '<key>:<effect>' or '<key>' string.

    Raises:
        TaintSpecFormatError: On too many ':' or '=' separators
        InvalidTaintEffectError: If the effect is not supported
        InvalidTaintValueError: If the value fails label value validation
        InvalidTaintKeyError: If the key fails qualified name validation
    """
    value = ""
    effect: TaintEffect | None = None

    parts = spec.split(":")
    if len(parts) == 1:
        key = parts[0]
    elif len(parts) == 2:
        effect = validate_taint_effect(parts[1], spec)

        parts_kv = parts[0].split("=")
        if len(parts_kv) > 2:
            raise TaintSpecFormatError(spec)
        key = parts_kv[0]
        if len(parts_kv) == 2:
            value = parts_kv[1]
            errs = is_valid_label_value(value)
            if errs:
                raise InvalidTaintValueError(spec, errs)
    else:
        raise TaintSpecFormatError(spec)

    errs = is_qualified_name(key)
    if errs:
        raise InvalidTaintKeyError(spec, errs)

    return TaintDescriptor(key=key, value=value, effect=effect)


def parse_taints(specs: Iterable[str]) -> tuple[list[Taint], list[TaintToRemove]]:
    """
    Split specs into taints to add and taints to remove, validating each one.

    The form '<key>' (no effect) may be used to remove a taint but not to add one.
    Adding the same (key, effect) pair twice is an error. Both lists keep the
    relative order of their entries in specs. The first invalid spec aborts
    the whole call.

    Examples:
        >>> to_add, to_remove = parse_taints(["dedicated=gpu:NoSchedule", "spot-"])
        >>> [str(t) for t in to_add], [str(t) for t in to_remove]
        (['dedicated=gpu:NoSchedule'], ['spot-'])

    Args:
        specs: Raw spec strings, in order

    Returns:
        Tuple of (taints to add, taints to remove)

    Raises:
        TaintSpecError: On the first spec that fails to parse or repeats a taint
    """
    taints: list[Taint] = []
    taints_to_remove: list[TaintToRemove] = []
    unique_taints: dict[TaintEffect, set[str]] = {}

    for spec in specs:
        if spec.endswith(REMOVE_SUFFIX):
            parsed = parse_taint(spec[: -len(REMOVE_SUFFIX)])
            taints_to_remove.append(TaintToRemove(key=parsed.key, effect=parsed.effect))
            continue

        parsed = parse_taint(spec)
        # an effect is required to add a taint
        if parsed.effect is None:
            raise TaintSpecFormatError(spec)
        new_taint = Taint(key=parsed.key, value=parsed.value, effect=parsed.effect)

        seen = unique_taints.setdefault(new_taint.effect, set())
        if new_taint.key in seen:
            raise DuplicateTaintError(spec, new_taint)
        seen.add(new_taint.key)

        taints.append(new_taint)

    return taints, taints_to_remove
