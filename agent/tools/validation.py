"""
Argument validation for tool calls.

validate(name, raw_args) narrows an untyped argument bag to the operation's
pydantic model, or raises a ValidationFailure:

  UnknownOperation   name not in the catalogue
  MissingField       a required field is absent
  InvalidField       wrong type, out of range, outside enum, empty string

Pure and synchronous. Extra fields are ignored. save_path is split off and
never forwarded upstream.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from agent.mcp.errors import InvalidField, MissingField, UnknownOperation
from agent.tools.base import Operation, ToolArgs
from agent.tools.catalogue import get_operation


SAVE_PATH_FIELD = "save_path"


@dataclass(frozen=True)
class ValidatedArgs:
    """Arguments that passed validation, ready for the upstream call."""

    operation: Operation
    args: ToolArgs
    save_path: Optional[str]
    upstream_input: Dict[str, Any]


def _field_name(error: Dict[str, Any]) -> str:
    loc = error.get("loc") or ("arguments",)
    return ".".join(str(part) for part in loc)


def _reason(error: Dict[str, Any]) -> str:
    msg = str(error.get("msg", "is invalid"))
    return msg[:1].lower() + msg[1:]


def _to_failure(operation: Operation, exc: ValidationError) -> Exception:
    errors = exc.errors()
    for error in errors:
        if error.get("type") == "missing":
            return MissingField(operation.name, _field_name(error))
    first = errors[0]
    return InvalidField(operation.name, _field_name(first), _reason(first))


def validate(name: str, raw_args: Optional[Mapping[str, Any]]) -> ValidatedArgs:
    """
    Validate raw tool arguments.

    Args:
        name:     Operation name as sent by the host.
        raw_args: Argument mapping (None is treated as empty).

    Returns:
        ValidatedArgs with the typed model and the upstream input dict.

    Raises:
        UnknownOperation, MissingField, InvalidField
    """
    operation = get_operation(name)
    if operation is None:
        raise UnknownOperation(name)

    if raw_args is None:
        raw_args = {}
    if not isinstance(raw_args, Mapping):
        raise InvalidField(operation.name, "arguments", "must be an object")

    try:
        args = operation.args_model.model_validate(dict(raw_args))
    except ValidationError as e:
        raise _to_failure(operation, e) from e

    upstream_input = args.model_dump(
        exclude={SAVE_PATH_FIELD}, exclude_unset=True, exclude_none=True
    )
    return ValidatedArgs(
        operation=operation,
        args=args,
        save_path=getattr(args, SAVE_PATH_FIELD, None) or None,
        upstream_input=upstream_input,
    )
