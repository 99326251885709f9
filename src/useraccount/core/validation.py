"""Validation failure tree and rule checks.

Value objects describe what is wrong with them as a failure tree instead of
raising. A tree maps field names to one of three node kinds:

- ``FieldFailure``: the rules a scalar field broke
- ``StructFailure``: the failure tree of a nested value object
- ``ListFailure``: failure trees of the failing elements of a sequence

Rule checks return ``RuleFailure | None`` so they compose with
``field_failure``:

Usage:
    from useraccount.core.validation import check_length, check_range, field_failure

    def validation_errors(self) -> ValidationErrors:
        return collect_errors(
            ("name", field_failure(check_length(self.name, min=5, max=64))),
            ("age", field_failure(check_range(self.age, min=17, max=64))),
        )
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True, slots=True)
class RuleFailure:
    """A single broken rule.

    Attributes:
        code: Rule identifier (``length``, ``range``, ``email``, ...).
        params: Rule parameters, rendered as JSON on the wire.
    """

    code: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FieldFailure:
    """Rules broken by a scalar field, in check order."""

    rules: tuple[RuleFailure, ...]


@dataclass(frozen=True, slots=True)
class StructFailure:
    """Failure tree of a nested value object."""

    errors: ValidationErrors


@dataclass(frozen=True, slots=True)
class ListFailure:
    """Failure trees of sequence elements, keyed by element index."""

    items: tuple[tuple[int, ValidationErrors], ...]


type FailureNode = FieldFailure | StructFailure | ListFailure
type ValidationErrors = dict[str, FailureNode]


class Validatable(Protocol):
    """Anything that can describe its own validation failures.

    ``validation_errors`` returns an empty mapping when the object is valid.
    """

    def validation_errors(self) -> ValidationErrors: ...


# =============================================================================
# Rule checks
# =============================================================================


def check_length(
    value: str,
    *,
    min: int | None = None,
    max: int | None = None,
    include_value: bool = True,
) -> RuleFailure | None:
    """Check the character count of a string.

    Args:
        value: String to check.
        min: Inclusive lower bound (no bound when None).
        max: Inclusive upper bound (no bound when None).
        include_value: Whether to echo the value in the failure params.
            Disable for secrets.

    Returns:
        RuleFailure with code ``length`` when out of bounds, None otherwise.
    """
    size = len(value)
    if (min is None or size >= min) and (max is None or size <= max):
        return None
    return RuleFailure("length", _bounds(min, max, value if include_value else None))


def check_range(
    value: int | float,
    *,
    min: int | float | None = None,
    max: int | float | None = None,
) -> RuleFailure | None:
    """Check that a number lies in an inclusive range.

    Returns:
        RuleFailure with code ``range`` when out of range, None otherwise.
    """
    if (min is None or value >= min) and (max is None or value <= max):
        return None
    return RuleFailure("range", _bounds(min, max, value))


def check_email(value: str) -> RuleFailure | None:
    """Check email shape (local@domain, dotted domain, no whitespace).

    Uses email-validator without a deliverability (DNS) lookup.

    Returns:
        RuleFailure with code ``email`` when malformed, None otherwise.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return RuleFailure("email", {"value": value})
    return None


def check_custom(
    predicate: Callable[[Any], bool],
    value: Any,
    code: str,
    params: dict[str, Any] | None = None,
) -> RuleFailure | None:
    """Run an arbitrary predicate as a named rule.

    Args:
        predicate: Returns True when ``value`` is acceptable.
        value: Value handed to the predicate (never echoed).
        code: Rule identifier reported on failure.
        params: Optional params reported on failure.

    Returns:
        RuleFailure with ``code`` when the predicate fails, None otherwise.
    """
    if predicate(value):
        return None
    return RuleFailure(code, dict(params or {}))


def _bounds(min: Any, max: Any, value: Any) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if min is not None:
        params["min"] = min
    if max is not None:
        params["max"] = max
    if value is not None:
        params["value"] = value
    return params


# =============================================================================
# Tree builders
# =============================================================================


def field_failure(*rules: RuleFailure | None) -> FieldFailure | None:
    """Collect the failed rules of one field.

    Returns:
        FieldFailure with the non-None rules, or None when all passed.
    """
    failed = tuple(rule for rule in rules if rule is not None)
    return FieldFailure(failed) if failed else None


def nested(errors: ValidationErrors) -> StructFailure | None:
    """Wrap a nested object's failure tree, or None when it is valid."""
    return StructFailure(errors) if errors else None


def nested_list(trees: Iterable[ValidationErrors]) -> ListFailure | None:
    """Index the failing element trees of a sequence.

    Valid elements are skipped but still advance the index.
    """
    items = tuple((index, tree) for index, tree in enumerate(trees) if tree)
    return ListFailure(items) if items else None


def collect_errors(*entries: tuple[str, FailureNode | None]) -> ValidationErrors:
    """Build a failure tree from ``(name, node)`` pairs, dropping passing fields."""
    return {name: node for name, node in entries if node is not None}
