"""
HDBSCAN Params - Parameter validation for HDBSCAN clustering

This package validates the parameters a user sets for an HDBSCAN clustering
run before anything reaches the clustering engine.

## Architecture

The package is organized into layers:
- params/: Per-mode schemas (basic, advanced, super-advanced) and the
  submitted configuration type
- validation/: Structural validation, dependency rules and the orchestrator
- pipeline/: Debounced live validation for editing sessions
- editor/: Mode-specific editors that gate submission on validation
- api/: Request parsing, error codes and the HTTP response envelope

## Main Entry Points

One-shot validation:
    from hdbscan_params import validate_clustering_params
    result = validate_clustering_params({'minClusterSize': 6}, 'basic')

Cross-field checks:
    from hdbscan_params import validate_dependencies
    issues = validate_dependencies({'minClusterSize': 6, 'minSamples': 8})

Editing session (inside a running event loop):
    from hdbscan_params import create_editor
    with create_editor('advanced', on_submit=run) as editor:
        editor.update_param('alpha', 0.5)
        editor.submit()
"""

__version__ = "1.0.0"

# =============================================================================
# Params Layer
# =============================================================================
from .params.schema import (
    Mode,
    FieldKind,
    FieldDescriptor,
    Schema,
    schema_for,
    apply_defaults,
)
from .params.config import ClusteringConfig, to_engine_kwargs

# =============================================================================
# Validation Layer
# =============================================================================
from .validation.messages import (
    GENERAL_ERROR_KEY,
    StructuralResult,
    ValidationResult,
    DependencyValidationResult,
)
from .validation.validator import StructuralValidator, validate_structure
from .validation.dependencies import (
    DependencyValidator,
    DependencyWatcher,
    validate_dependencies,
)
from .validation.orchestrator import (
    ClusteringParamsValidator,
    validate_clustering_params,
)

# =============================================================================
# Pipeline Layer
# =============================================================================
from .pipeline.realtime import RealtimeValidator, DEFAULT_DEBOUNCE_MS

# =============================================================================
# Editor Layer
# =============================================================================
from .editor.base import BaseEditor, EditorFeedback, SubmissionBlockedError
from .editor.basic import BasicEditor
from .editor.advanced import AdvancedEditor
from .editor.super_advanced import SuperAdvancedEditor
from .editor.factory import create_editor

# =============================================================================
# API Layer
# =============================================================================
from .api.errors import ApiError, ApiErrorCode, ApiRequestError
from .api.response import ApiResponse

__all__ = [
    # Version
    '__version__',

    # Params
    'Mode',
    'FieldKind',
    'FieldDescriptor',
    'Schema',
    'schema_for',
    'apply_defaults',
    'ClusteringConfig',
    'to_engine_kwargs',

    # Validation
    'GENERAL_ERROR_KEY',
    'StructuralResult',
    'ValidationResult',
    'DependencyValidationResult',
    'StructuralValidator',
    'validate_structure',
    'DependencyValidator',
    'DependencyWatcher',
    'validate_dependencies',
    'ClusteringParamsValidator',
    'validate_clustering_params',

    # Pipeline
    'RealtimeValidator',
    'DEFAULT_DEBOUNCE_MS',

    # Editor
    'BaseEditor',
    'EditorFeedback',
    'SubmissionBlockedError',
    'BasicEditor',
    'AdvancedEditor',
    'SuperAdvancedEditor',
    'create_editor',

    # API
    'ApiError',
    'ApiErrorCode',
    'ApiRequestError',
    'ApiResponse',
]
