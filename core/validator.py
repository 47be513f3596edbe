# core/validator.py
"""Binding and validation of request payloads.

Request models declare their constraints on the fields (length, ranges,
ISBN checksum, ...). Failures are split in two groups so clients can tell
them apart:

- binding errors: the payload is not an object, a field is missing or has
  the wrong type -> ``Code.BINDING_ERROR``
- validation errors: a field is well formed but breaks a constraint ->
  ``Code.VALIDATION_ERROR`` with one message per violation, in field
  declaration order
"""
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel, ValidationError
from pydantic_core import ErrorDetails

from core.codes import Code

ModelT = TypeVar('ModelT', bound=BaseModel)

CONSTRAINT_ERROR_TYPES = {
    'required',
    'string_too_short',
    'string_too_long',
    'too_short',
    'too_long',
    'greater_than',
    'greater_than_equal',
    'less_than',
    'less_than_equal',
    'isbn',
}


@dataclass
class BindResult(Generic[ModelT]):
    code: Code
    request: Optional[ModelT] = None
    errors: List[str] = field(default_factory=list)
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.code == Code.SUCCESS


def _field_name(error: ErrorDetails) -> str:
    loc = error.get('loc') or ()
    return '.'.join(str(part) for part in loc) or 'value'


def _format_number(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value:,}"
    return str(value)


def _is_zero_value(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, int, float)):
        return not value
    if isinstance(value, UUID):
        return value.int == 0
    return value is None


def translate_error(error: ErrorDetails) -> str:
    """Render a single constraint violation as a readable sentence"""
    name = _field_name(error)
    kind = error['type']
    ctx = error.get('ctx') or {}

    if kind == 'required' or _is_zero_value(error.get('input')):
        return f"{name} is a required field"
    if kind in ('string_too_short', 'too_short'):
        limit = ctx.get('min_length')
        unit = 'character' if limit == 1 else 'characters'
        return f"{name} must be at least {limit} {unit} in length"
    if kind in ('string_too_long', 'too_long'):
        limit = ctx.get('max_length')
        unit = 'character' if limit == 1 else 'characters'
        return f"{name} must be a maximum of {limit} {unit} in length"
    if kind == 'greater_than_equal':
        return f"{name} must be {_format_number(ctx.get('ge'))} or greater"
    if kind == 'greater_than':
        return f"{name} must be greater than {_format_number(ctx.get('gt'))}"
    if kind == 'less_than_equal':
        return f"{name} must be {_format_number(ctx.get('le'))} or less"
    if kind == 'less_than':
        return f"{name} must be less than {_format_number(ctx.get('lt'))}"
    if kind == 'isbn':
        return f"{name} must be a valid ISBN number"
    return f"{name} is invalid"


def translate_errors(errors: Sequence[ErrorDetails]) -> List[str]:
    return [translate_error(error) for error in errors]


def _binding_detail(errors: Sequence[ErrorDetails]) -> str:
    return '; '.join(f"{_field_name(e)}: {e['msg']}" for e in errors)


class Validator:
    """Binds raw payloads to request models and checks their constraints"""

    def bind(self, model: Type[ModelT], payload: Any) -> BindResult[ModelT]:
        if not isinstance(payload, dict):
            return BindResult(
                code=Code.BINDING_ERROR,
                detail=f"expected a JSON object, got {type(payload).__name__}",
            )

        try:
            request = model.model_validate(payload)
        except ValidationError as e:
            errors = e.errors(include_url=False)
            shape_errors = [err for err in errors if err['type'] not in CONSTRAINT_ERROR_TYPES]
            if shape_errors:
                return BindResult(code=Code.BINDING_ERROR, detail=_binding_detail(shape_errors))
            return BindResult(code=Code.VALIDATION_ERROR, errors=translate_errors(errors))

        return BindResult(code=Code.SUCCESS, request=request)

    def validate(self, request: BaseModel) -> List[str]:
        """Re-check the constraints of an already built request.

        Useful for models created without validation (``model_construct``),
        e.g. pagination requests assembled from query strings.
        """
        try:
            type(request).model_validate(request.model_dump(by_alias=True))
        except ValidationError as e:
            return translate_errors(e.errors(include_url=False))
        return []
