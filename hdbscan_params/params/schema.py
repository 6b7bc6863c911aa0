"""
Parameter schemas for HDBSCAN clustering.

This module defines the declarative constraint layer:
- Mode: Editing mode selecting which parameter tier applies
- FieldKind: Value kind of a parameter
- FieldDescriptor: Immutable constraint definition for one parameter
- Schema: The set of descriptors legal in a mode

Tiers are strictly nested: basic ⊂ advanced ⊂ super-advanced. A field legal
in a lower tier keeps the same descriptor in every higher tier.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Dict, Any, Mapping, Union
from enum import Enum


class Mode(str, Enum):
    """Editing mode / parameter tier.

    - BASIC: minClusterSize and minSamples only
    - ADVANCED: adds metric, alpha and clusterSelectionEpsilon
    - SUPER_ADVANCED: every parameter the engine accepts
    """
    BASIC = "basic"
    ADVANCED = "advanced"
    SUPER_ADVANCED = "super-advanced"

    @classmethod
    def from_string(cls, value: Union[str, 'Mode']) -> 'Mode':
        """Create from a mode literal."""
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == value:
                return mode
        raise ValueError(
            f"Unknown mode: {value!r}. "
            f"Supported modes: {', '.join(m.value for m in cls)}"
        )


class FieldKind(Enum):
    """Value kind of a parameter field."""
    INTEGER = "integer"
    REAL = "real"
    BOOLEAN = "boolean"
    ENUM = "enum"


@dataclass(frozen=True)
class FieldDescriptor:
    """Constraint definition for a single parameter (immutable).

    Attributes:
        name: Parameter name as it appears in the parameter mapping
        kind: Value kind
        required: Whether the field must be present
        min: Inclusive lower bound (numeric kinds only)
        max: Inclusive upper bound, None for unbounded (numeric kinds only)
        allowed_values: Legal members (enum kind only)
        default: Value used when the field is absent
        label: Short human-readable label for form surfaces
        help_text: Helper text shown next to the input
    """
    name: str
    kind: FieldKind
    required: bool = False
    min: Optional[float] = None
    max: Optional[float] = None
    allowed_values: Optional[Tuple[str, ...]] = None
    default: Any = None
    label: str = ""
    help_text: str = ""

    @property
    def is_numeric(self) -> bool:
        return self.kind in (FieldKind.INTEGER, FieldKind.REAL)

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            'name': self.name,
            'kind': self.kind.value,
            'required': self.required,
        }
        if self.min is not None:
            result['min'] = self.min
        if self.max is not None:
            result['max'] = self.max
        if self.allowed_values is not None:
            result['allowedValues'] = list(self.allowed_values)
        if self.has_default:
            result['default'] = self.default
        if self.label:
            result['label'] = self.label
        if self.help_text:
            result['helpText'] = self.help_text
        return result


# =============================================================================
# Field Definitions
# =============================================================================

METRICS = ('euclidean', 'manhattan', 'cosine', 'haversine')
ALGORITHMS = ('auto', 'ball_tree', 'kd_tree', 'brute')
CLUSTER_SELECTION_METHODS = ('eom', 'leaf')

FIELD_DESCRIPTORS: Dict[str, FieldDescriptor] = {
    d.name: d for d in (
        # Basic tier
        FieldDescriptor(
            name='minClusterSize', kind=FieldKind.INTEGER, required=True,
            min=2, max=1000,
            label='Minimum cluster size',
            help_text='Smallest number of points that can form a cluster (2-1000)',
        ),
        FieldDescriptor(
            name='minSamples', kind=FieldKind.INTEGER,
            min=1, max=100,
            label='Minimum samples',
            help_text='Density sensitivity (1-100). Recommended: below minClusterSize',
        ),
        # Advanced tier
        FieldDescriptor(
            name='metric', kind=FieldKind.ENUM,
            allowed_values=METRICS, default='euclidean',
            label='Distance metric',
            help_text='Distance function used between points',
        ),
        FieldDescriptor(
            name='alpha', kind=FieldKind.REAL,
            min=0.0, max=1.0, default=1.0,
            label='Alpha',
            help_text='Distance scaling for robust single linkage (0.0-1.0)',
        ),
        FieldDescriptor(
            name='clusterSelectionEpsilon', kind=FieldKind.REAL,
            min=0.0, default=0.0,
            label='Cluster selection epsilon',
            help_text='Distance threshold below which clusters are merged',
        ),
        # Super-advanced tier
        FieldDescriptor(
            name='algorithm', kind=FieldKind.ENUM,
            allowed_values=ALGORITHMS, default='auto',
            label='Algorithm',
            help_text='Neighbor search strategy',
        ),
        FieldDescriptor(
            name='leafSize', kind=FieldKind.INTEGER,
            min=1, default=30,
            label='Leaf size',
            help_text='Leaf size for tree-based neighbor search',
        ),
        FieldDescriptor(
            name='approxMinSpanTree', kind=FieldKind.BOOLEAN, default=True,
            label='Approximate minimum spanning tree',
        ),
        FieldDescriptor(
            name='genMinSpanTree', kind=FieldKind.BOOLEAN, default=False,
            label='Generate minimum spanning tree',
        ),
        FieldDescriptor(
            name='coreDistNJobs', kind=FieldKind.INTEGER,
            min=1, default=1,
            label='Core distance jobs',
            help_text='Parallel jobs used to compute core distances',
        ),
        FieldDescriptor(
            name='clusterSelectionMethod', kind=FieldKind.ENUM,
            allowed_values=CLUSTER_SELECTION_METHODS, default='eom',
            label='Cluster selection method',
            help_text='eom (excess of mass) or leaf',
        ),
        FieldDescriptor(
            name='allowSingleCluster', kind=FieldKind.BOOLEAN, default=False,
            label='Allow single cluster',
        ),
        FieldDescriptor(
            name='predictionData', kind=FieldKind.BOOLEAN, default=False,
            label='Store prediction data',
        ),
        FieldDescriptor(
            name='matchReferenceImplementation', kind=FieldKind.BOOLEAN, default=False,
            label='Match reference implementation',
        ),
    )
}

_BASIC_FIELDS = ('minClusterSize', 'minSamples')
_ADVANCED_FIELDS = _BASIC_FIELDS + ('metric', 'alpha', 'clusterSelectionEpsilon')
_SUPER_ADVANCED_FIELDS = _ADVANCED_FIELDS + (
    'algorithm',
    'leafSize',
    'approxMinSpanTree',
    'genMinSpanTree',
    'coreDistNJobs',
    'clusterSelectionMethod',
    'allowSingleCluster',
    'predictionData',
    'matchReferenceImplementation',
)

MODE_FIELDS: Dict[Mode, Tuple[str, ...]] = {
    Mode.BASIC: _BASIC_FIELDS,
    Mode.ADVANCED: _ADVANCED_FIELDS,
    Mode.SUPER_ADVANCED: _SUPER_ADVANCED_FIELDS,
}


@dataclass(frozen=True)
class Schema:
    """Constraint set for one mode (pure value, no behavior beyond lookups).

    Attributes:
        mode: Mode this schema belongs to
        fields: Field descriptors in declaration order
    """
    mode: Mode
    fields: Tuple[FieldDescriptor, ...]

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.required)

    def get(self, name: str) -> Optional[FieldDescriptor]:
        """Get the descriptor for a field, or None if outside this tier."""
        for descriptor in self.fields:
            if descriptor.name == name:
                return descriptor
        return None

    def __contains__(self, name: object) -> bool:
        return self.get(name) is not None

    def defaults(self) -> Dict[str, Any]:
        """Default values of every field in this tier that has one."""
        return {f.name: f.default for f in self.fields if f.has_default}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'mode': self.mode.value,
            'fields': [f.to_dict() for f in self.fields],
        }


_SCHEMAS: Dict[Mode, Schema] = {
    mode: Schema(mode=mode, fields=tuple(FIELD_DESCRIPTORS[n] for n in names))
    for mode, names in MODE_FIELDS.items()
}


def schema_for(mode: Union[str, Mode] = Mode.BASIC) -> Schema:
    """Get the schema for a mode.

    Args:
        mode: Mode enum or one of 'basic', 'advanced', 'super-advanced'

    Returns:
        Schema for the requested tier

    Raises:
        ValueError: If mode is not recognized
    """
    return _SCHEMAS[Mode.from_string(mode)]


def apply_defaults(
    params: Mapping[str, Any],
    mode: Union[str, Mode] = Mode.BASIC
) -> Dict[str, Any]:
    """Fill absent fields of a tier with their defaults.

    The input mapping is not modified. Fields outside the tier are carried
    over unchanged.

    Args:
        params: Parameter mapping
        mode: Tier whose defaults are applied

    Returns:
        New parameter dictionary
    """
    result = dict(params)
    for name, default in schema_for(mode).defaults().items():
        if result.get(name) is None:
            result[name] = default
    return result
