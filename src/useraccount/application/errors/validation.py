"""Conversion of validation failure trees into ApplicationError.

Rendering rules (one list of strings per top-level field):

- FieldFailure: one string per broken rule, ``{"<code>": <params-json>}``
- StructFailure: one string per nested field,
  ``{"<name>": errors: <code>: <params-json>, ...}``; deeper structs are
  prefixed with ``<name>.`` and deeper lists with ``<name>[<index>]``
- ListFailure: one string per failing element, ``<index>: <nested> | <nested>``

Field order follows the iteration order of the failure tree.
"""

import json
from typing import Any

from useraccount.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorStatus,
)
from useraccount.core.container import get_logger
from useraccount.core.validation import (
    FailureNode,
    FieldFailure,
    ListFailure,
    RuleFailure,
    StructFailure,
    Validatable,
    ValidationErrors,
)

INVALID_INPUT_CODE = 400
INVALID_INPUT_ERROR = "invalid_input"
INVALID_INPUT_DESCRIPTION = "Please check your input"


def validate(obj: Validatable) -> ApplicationError | None:
    """Validate ``obj`` and wrap its failures in a validation error.

    Args:
        obj: Object exposing ``validation_errors()``.

    Returns:
        None if ``obj`` is valid, otherwise an ApplicationError with status
        ``VALIDATION_ERROR`` whose ``fields`` lists every failing field.
    """
    return from_validation_errors(obj.validation_errors())


def from_validation_errors(errors: ValidationErrors) -> ApplicationError | None:
    """Convert a failure tree into a validation error (None when empty)."""
    if not errors:
        return None

    fields = {name: render_node(node) for name, node in errors.items()}
    get_logger().debug("Input validation failed", fields=list(fields))

    return ApplicationError(
        status=ApplicationErrorStatus.VALIDATION_ERROR,
        code=INVALID_INPUT_CODE,
        error=INVALID_INPUT_ERROR,
        description=INVALID_INPUT_DESCRIPTION,
        fields=fields,
    )


def render_node(node: FailureNode) -> list[str]:
    """Render the failures of one top-level field."""
    match node:
        case FieldFailure(rules=rules):
            return [f'{{"{rule.code}": {_params(rule)}}}' for rule in rules]
        case StructFailure(errors=errors):
            return describe(errors)
        case ListFailure(items=items):
            return [f"{index}: {' | '.join(describe(tree))}" for index, tree in items]
    raise TypeError(f"Unknown failure node: {type(node).__name__}")


def describe(errors: ValidationErrors) -> list[str]:
    """Flatten a nested failure tree into descriptive strings."""
    lines: list[str] = []
    for name, node in errors.items():
        match node:
            case FieldFailure(rules=rules):
                joined = ", ".join(f"{rule.code}: {_params(rule)}" for rule in rules)
                lines.append(f'{{"{name}": errors: {joined}}}')
            case StructFailure(errors=inner):
                lines.extend(f"{name}.{line}" for line in describe(inner))
            case ListFailure(items=items):
                lines.extend(
                    f"{name}[{index}]: {' | '.join(describe(tree))}"
                    for index, tree in items
                )
            case _:
                raise TypeError(f"Unknown failure node: {type(node).__name__}")
    return lines


def _params(rule: RuleFailure) -> str:
    return json.dumps(rule.params, default=_json_default)


def _json_default(value: Any) -> str:
    return str(value)
