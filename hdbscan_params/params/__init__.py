"""
Parameter layer: per-mode schemas and the submitted configuration type.
"""

from .schema import (
    Mode,
    FieldKind,
    FieldDescriptor,
    Schema,
    FIELD_DESCRIPTORS,
    MODE_FIELDS,
    schema_for,
    apply_defaults,
)
from .config import ClusteringConfig, ENGINE_KWARGS, to_engine_kwargs

__all__ = [
    'Mode',
    'FieldKind',
    'FieldDescriptor',
    'Schema',
    'FIELD_DESCRIPTORS',
    'MODE_FIELDS',
    'schema_for',
    'apply_defaults',
    'ClusteringConfig',
    'ENGINE_KWARGS',
    'to_engine_kwargs',
]
