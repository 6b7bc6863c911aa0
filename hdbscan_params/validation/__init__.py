"""
Validation layer for clustering parameters.

This module provides:
- Structural validation against per-mode schemas
- Cross-field dependency rules
- The orchestrator merging structural errors with advisory messages
"""

from .messages import (
    GENERAL_ERROR_KEY,
    StructuralResult,
    ValidationResult,
    DependencyValidationResult,
)
from .validator import (
    StructuralValidator,
    validate_structure,
)
from .dependencies import (
    DependencyValidator,
    DependencyWatcher,
    validate_dependencies,
)
from .orchestrator import (
    ClusteringParamsValidator,
    validate_clustering_params,
)

__all__ = [
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
]
