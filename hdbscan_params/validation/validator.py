"""
Structural parameter validator.

Checks a parameter mapping against the schema of a mode: required fields,
value kinds, integrality and inclusive bounds. Fields outside the active
tier are ignored.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
import math

import numpy as np

from ..params.schema import FieldDescriptor, FieldKind, Mode, schema_for
from .messages import StructuralResult


def is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def is_number(value: Any) -> bool:
    """True for finite real numbers (bools excluded)."""
    if is_boolean(value):
        return False
    if isinstance(value, (int, np.integer)):
        return True
    if not isinstance(value, (float, np.floating)):
        return False
    return math.isfinite(value)


def _is_integral(value: Any) -> bool:
    if isinstance(value, (int, np.integer)):
        return True
    return float(value).is_integer()


def _format_bound(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class StructuralValidator:
    """Validates parameter mappings against per-mode schemas.

    Validation never raises for invalid values; every violation becomes a
    field-scoped message. Passing something that is not a mapping is a
    caller error and is not handled here.

    Example:
        validator = StructuralValidator()
        result = validator.validate({'minClusterSize': 1}, 'basic')
        if not result.is_valid:
            print(result.errors['minClusterSize'])
    """

    def validate(
        self,
        params: Mapping[str, Any],
        mode: Union[str, Mode] = Mode.BASIC
    ) -> StructuralResult:
        """Validate parameters for a mode.

        Args:
            params: Parameter mapping
            mode: Mode selecting the schema tier

        Returns:
            StructuralResult with per-field error lists
        """
        schema = schema_for(mode)
        errors: Dict[str, List[str]] = {}

        for descriptor in schema.fields:
            messages = self._validate_field(descriptor, params.get(descriptor.name))
            if messages:
                errors[descriptor.name] = messages

        return StructuralResult.from_errors(errors)

    def _validate_field(self, descriptor: FieldDescriptor, value: Any) -> List[str]:
        """Validate one field; returns its messages in the order found."""
        name = descriptor.name

        if value is None:
            if descriptor.required:
                return [f"{name} is required"]
            return []

        type_error = self._check_kind(descriptor, value)
        if type_error:
            # Range checks are meaningless on a value of the wrong kind
            return [type_error]

        messages = []
        if descriptor.kind == FieldKind.INTEGER and not _is_integral(value):
            messages.append(f"{name} must be an integer")
        if descriptor.is_numeric:
            messages.extend(self._check_range(descriptor, value))
        return messages

    def _check_kind(self, descriptor: FieldDescriptor, value: Any) -> Optional[str]:
        name = descriptor.name
        kind = descriptor.kind

        if kind in (FieldKind.INTEGER, FieldKind.REAL):
            if not is_number(value):
                return f"{name} must be a finite number"
        elif kind == FieldKind.BOOLEAN:
            if not is_boolean(value):
                return f"{name} must be a boolean"
        elif kind == FieldKind.ENUM:
            if not isinstance(value, str) or value not in descriptor.allowed_values:
                return f"{name} must be one of: {', '.join(descriptor.allowed_values)}"
        return None

    def _check_range(self, descriptor: FieldDescriptor, value: Any) -> List[str]:
        name = descriptor.name
        messages = []
        if descriptor.min is not None and value < descriptor.min:
            messages.append(f"{name} must be at least {_format_bound(descriptor.min)}")
        if descriptor.max is not None and value > descriptor.max:
            messages.append(f"{name} cannot exceed {_format_bound(descriptor.max)}")
        return messages


_default_validator = StructuralValidator()


def validate_structure(
    params: Mapping[str, Any],
    mode: Union[str, Mode] = Mode.BASIC
) -> StructuralResult:
    """Convenience function to validate parameters against a mode's schema.

    Args:
        params: Parameter mapping
        mode: Mode selecting the schema tier

    Returns:
        StructuralResult
    """
    return _default_validator.validate(params, mode)
