"""
Base editor class and feedback structures.

Editors are the consumers of the validation engine. Each editor owns:
- The parameter mapping under edit (the only mutable shared state)
- A RealtimeValidator for debounced structural feedback
- A DependencyWatcher for cross-field feedback

and decides whether the current parameters may be submitted.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
import logging
import math

from ..params.config import ClusteringConfig
from ..params.schema import Mode, Schema, apply_defaults, schema_for
from ..pipeline.realtime import DEFAULT_DEBOUNCE_MS, RealtimeValidator
from ..validation.dependencies import DependencyWatcher
from ..validation.messages import DependencyValidationResult


logger = logging.getLogger(__name__)

SubmitCallback = Callable[[ClusteringConfig], None]


@dataclass(frozen=True)
class EditorSection:
    """A titled group of fields in an editor form."""
    title: str
    fields: Tuple[str, ...]


@dataclass(frozen=True)
class EditorLayout:
    """Form layout of an editor.

    Attributes:
        title: Form heading
        description: Short description shown under the heading
        sections: Field groups in display order
        option_labels: Display labels for enum members, per field
    """
    title: str
    description: str
    sections: Tuple[EditorSection, ...]
    option_labels: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'title': self.title,
            'description': self.description,
            'sections': [
                {'title': s.title, 'fields': list(s.fields)} for s in self.sections
            ],
            'optionLabels': {k: dict(v) for k, v in self.option_labels.items()},
        }


@dataclass(frozen=True)
class EditorFeedback:
    """Everything an editor surface renders from validation.

    Attributes:
        field_errors: Structural errors per field
        general_errors: Dependency errors (form-scoped)
        warnings: Orchestrator warnings followed by dependency warnings
        suggestions: Orchestrator suggestions followed by dependency suggestions
        is_valid: Structural validity
        is_validating: A validation pass is pending or running
        has_dependency_issues: Dependency errors or warnings present
        can_submit: Whether submission is currently allowed
    """
    field_errors: Mapping[str, Tuple[str, ...]]
    general_errors: Tuple[str, ...]
    warnings: Tuple[str, ...]
    suggestions: Tuple[str, ...]
    is_valid: bool
    is_validating: bool
    has_dependency_issues: bool
    can_submit: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'fieldErrors': {k: list(v) for k, v in self.field_errors.items()},
            'generalErrors': list(self.general_errors),
            'warnings': list(self.warnings),
            'suggestions': list(self.suggestions),
            'isValid': self.is_valid,
            'isValidating': self.is_validating,
            'hasDependencyIssues': self.has_dependency_issues,
            'canSubmit': self.can_submit,
        }


class SubmissionBlockedError(Exception):
    """Raised when submit() is called on parameters that may not be submitted."""

    def __init__(self, feedback: EditorFeedback):
        reasons = []
        if not feedback.is_valid:
            reasons.append("parameters do not match the schema")
        if feedback.has_dependency_issues:
            reasons.append("parameter dependencies have issues")
        super().__init__("Submission blocked: " + "; ".join(reasons or ["validation pending"]))
        self.feedback = feedback


def normalize_input(value: Any) -> Any:
    """Map cleared form inputs to None.

    Empty strings, None and NaN mean the field is unset; 0 is kept so that
    it is reported by validation instead of silently disappearing.
    """
    if value is None or value == "":
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


class BaseEditor(ABC):
    """Base class for mode-specific parameter editors.

    Each editor handles:
    1. Holding the parameters under edit
    2. Feeding every change to debounced live validation
    3. Merging structural and dependency feedback
    4. Gating and performing submission

    Subclasses must define:
    - mode: Mode the editor validates against
    - default_params: Initial parameters
    - get_layout(): Form layout for the frontend

    Editors use asyncio timers and must be driven from a running event loop.
    """

    mode: Mode = Mode.BASIC
    default_params: Dict[str, Any] = {}

    def __init__(
        self,
        initial_params: Optional[Mapping[str, Any]] = None,
        *,
        on_submit: Optional[SubmitCallback] = None,
        debounce_ms: float = DEFAULT_DEBOUNCE_MS,
        validate_on_mount: bool = True,
        block_on_dependency_issues: bool = True
    ):
        """Initialize editor.

        Args:
            initial_params: Starting parameters (default: the editor's defaults)
            on_submit: Called with the configuration built by submit()
            debounce_ms: Debounce window for live validation
            validate_on_mount: Validate immediately when mounted
            block_on_dependency_issues: Treat dependency errors and warnings
                as blocking for submission
        """
        params = self.default_params if initial_params is None else initial_params
        self.on_submit = on_submit
        self.block_on_dependency_issues = block_on_dependency_issues
        self._live = RealtimeValidator(
            params,
            mode=self.mode,
            debounce_ms=debounce_ms,
            validate_on_mount=validate_on_mount,
        )
        self._dependencies = DependencyWatcher()

    @abstractmethod
    def get_layout(self) -> EditorLayout:
        """Get the form layout for this editor."""
        pass

    @property
    def schema(self) -> Schema:
        return schema_for(self.mode)

    @property
    def params(self) -> Dict[str, Any]:
        """Copy of the parameters under edit."""
        return self._live.params

    @property
    def live(self) -> RealtimeValidator:
        return self._live

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def mount(self) -> None:
        """Start live validation."""
        self._live.mount()

    def dispose(self) -> None:
        """Stop live validation; pending passes are cancelled."""
        self._live.dispose()

    def __enter__(self) -> 'BaseEditor':
        self.mount()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def update_param(self, name: str, value: Any) -> None:
        """Set one parameter.

        Args:
            name: Field name; must belong to this editor's tier
            value: New value; cleared inputs unset the field

        Raises:
            KeyError: If the field is not editable in this mode
        """
        if name not in self.schema:
            raise KeyError(f"{name} is not editable in {self.mode.value} mode")

        params = self._live.params
        value = normalize_input(value)
        if value is None:
            params.pop(name, None)
        else:
            params[name] = value
        self._live.update(params)

    def update_params(self, values: Mapping[str, Any]) -> None:
        """Set several parameters as one edit."""
        for name in values:
            if name not in self.schema:
                raise KeyError(f"{name} is not editable in {self.mode.value} mode")

        params = self._live.params
        for name, value in values.items():
            value = normalize_input(value)
            if value is None:
                params.pop(name, None)
            else:
                params[name] = value
        self._live.update(params)

    # -------------------------------------------------------------------------
    # Feedback and submission
    # -------------------------------------------------------------------------

    @property
    def dependency_result(self) -> DependencyValidationResult:
        return self._dependencies(self._live.params)

    def feedback(self) -> EditorFeedback:
        """Merge live structural feedback with dependency feedback."""
        result = self._live.result
        dependencies = self.dependency_result
        is_validating = self._live.is_validating

        return EditorFeedback(
            field_errors=result.errors,
            general_errors=dependencies.errors,
            warnings=result.warnings + dependencies.warnings,
            suggestions=result.suggestions + dependencies.suggestions,
            is_valid=result.is_valid,
            is_validating=is_validating,
            has_dependency_issues=dependencies.has_issues,
            can_submit=self._allows_submission(result.is_valid, dependencies, is_validating),
        )

    @property
    def can_submit(self) -> bool:
        return self.feedback().can_submit

    def _allows_submission(
        self,
        is_valid: bool,
        dependencies: DependencyValidationResult,
        is_validating: bool
    ) -> bool:
        if not is_valid or is_validating:
            return False
        if dependencies.errors:
            return False
        if self.block_on_dependency_issues and dependencies.has_issues:
            return False
        return True

    def submit(self, name: Optional[str] = None) -> ClusteringConfig:
        """Validate immediately and submit the parameters.

        Args:
            name: Configuration name (default: derived from the mode)

        Returns:
            ClusteringConfig with tier defaults applied

        Raises:
            SubmissionBlockedError: If validation does not allow submission
        """
        self._live.validate()
        feedback = self.feedback()
        if not feedback.can_submit:
            raise SubmissionBlockedError(feedback)

        config = ClusteringConfig(
            name=name or f"{self.mode.value} configuration",
            mode=self.mode,
            parameters=apply_defaults(self._live.params, self.mode),
        )
        logger.info("Submitting %s configuration %s", self.mode.value, config.config_id)

        if self.on_submit:
            self.on_submit(config)
        return config
