"""
Validation result types.

Provides immutable validation results that can be displayed by editor
surfaces and serialized for frontend communication:
- StructuralResult: Schema conformance of a parameter set
- ValidationResult: Structural result merged with orchestrator advice
- DependencyValidationResult: Cross-field issues, independent of mode
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Any, List, Tuple, Mapping, Sequence


# Reserved error key for failures that are not tied to a field
GENERAL_ERROR_KEY = "_general"
GENERAL_ERROR_MESSAGE = "Unexpected validation error"


ErrorMap = Mapping[str, Tuple[str, ...]]


def _freeze_errors(errors: Mapping[str, Sequence[str]]) -> ErrorMap:
    """Read-only copy of an error mapping with tuple message lists."""
    return MappingProxyType(
        {name: tuple(messages) for name, messages in errors.items() if messages}
    )


def _empty_errors() -> ErrorMap:
    return MappingProxyType({})


def _hash_errors(errors: ErrorMap) -> int:
    return hash(tuple(sorted(errors.items())))


@dataclass(frozen=True)
class StructuralResult:
    """Outcome of checking a parameter set against a mode's schema.

    Attributes:
        is_valid: True when no field violates its descriptor
        errors: Field name -> messages, in the order they were found
    """
    is_valid: bool = True
    errors: ErrorMap = field(default_factory=_empty_errors)

    def __post_init__(self):
        object.__setattr__(self, 'errors', _freeze_errors(self.errors))

    def __hash__(self) -> int:
        return hash((self.is_valid, _hash_errors(self.errors)))

    @classmethod
    def from_errors(cls, errors: Mapping[str, Sequence[str]]) -> 'StructuralResult':
        frozen = _freeze_errors(errors)
        return cls(is_valid=not frozen, errors=frozen)


@dataclass(frozen=True)
class ValidationResult:
    """Complete validation result returned to editor surfaces.

    is_valid reflects schema conformance only. Warnings and suggestions
    never change it.

    Attributes:
        is_valid: Whether the parameters conform to the mode's schema
        errors: Field name -> error messages
        warnings: Non-blocking advisories
        suggestions: Corrective hints paired with warnings
    """
    is_valid: bool = True
    errors: ErrorMap = field(default_factory=_empty_errors)
    warnings: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'errors', _freeze_errors(self.errors))

    def __hash__(self) -> int:
        return hash((self.is_valid, _hash_errors(self.errors), self.warnings, self.suggestions))

    @classmethod
    def success(cls) -> 'ValidationResult':
        """Create an empty, valid result."""
        return cls()

    @classmethod
    def general_failure(cls, message: str = GENERAL_ERROR_MESSAGE) -> 'ValidationResult':
        """Create the synthetic result used when validation itself fails."""
        return cls(is_valid=False, errors={GENERAL_ERROR_KEY: (message,)})

    @classmethod
    def build(
        cls,
        structural: StructuralResult,
        warnings: Sequence[str] = (),
        suggestions: Sequence[str] = ()
    ) -> 'ValidationResult':
        """Merge a structural result with advisory messages."""
        return cls(
            is_valid=structural.is_valid,
            errors=structural.errors,
            warnings=tuple(warnings),
            suggestions=tuple(suggestions),
        )

    def field_errors(self, name: str) -> Tuple[str, ...]:
        """Get error messages for one field (empty if none)."""
        return self.errors.get(name, ())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'isValid': self.is_valid,
            'errors': {name: list(messages) for name, messages in self.errors.items()},
            'warnings': list(self.warnings),
            'suggestions': list(self.suggestions),
        }

    def __bool__(self) -> bool:
        """Allow using result in boolean context."""
        return self.is_valid


@dataclass(frozen=True)
class DependencyValidationResult:
    """Cross-field validation result.

    Recomputed from the current parameters on every change; carries no
    identity of its own.

    Attributes:
        errors: Contradictory combinations
        warnings: Legal but semantically poor combinations
        suggestions: Corrective hints for the above
    """
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()

    @property
    def has_issues(self) -> bool:
        return bool(self.errors or self.warnings)

    @classmethod
    def from_lists(
        cls,
        errors: List[str],
        warnings: List[str],
        suggestions: List[str]
    ) -> 'DependencyValidationResult':
        return cls(
            errors=tuple(errors),
            warnings=tuple(warnings),
            suggestions=tuple(suggestions),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'errors': list(self.errors),
            'warnings': list(self.warnings),
            'suggestions': list(self.suggestions),
            'hasIssues': self.has_issues,
        }
