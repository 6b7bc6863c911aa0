"""
Submitted clustering configuration.

A ClusteringConfig is what an editor hands over once its parameters pass
validation. It is the boundary object towards the external clustering
engine, which takes snake_case keyword arguments.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Any, Union
import uuid

from .schema import Mode, apply_defaults


# camelCase parameter name -> engine keyword argument
ENGINE_KWARGS: Dict[str, str] = {
    'minClusterSize': 'min_cluster_size',
    'minSamples': 'min_samples',
    'metric': 'metric',
    'alpha': 'alpha',
    'clusterSelectionEpsilon': 'cluster_selection_epsilon',
    'algorithm': 'algorithm',
    'leafSize': 'leaf_size',
    'approxMinSpanTree': 'approx_min_span_tree',
    'genMinSpanTree': 'gen_min_span_tree',
    'coreDistNJobs': 'core_dist_n_jobs',
    'clusterSelectionMethod': 'cluster_selection_method',
    'allowSingleCluster': 'allow_single_cluster',
    'predictionData': 'prediction_data',
    'matchReferenceImplementation': 'match_reference_implementation',
}


def to_engine_kwargs(
    params: Dict[str, Any],
    mode: Union[str, Mode] = Mode.BASIC
) -> Dict[str, Any]:
    """Convert a parameter mapping to engine keyword arguments.

    Tier defaults are applied first. Unset fields and names the engine
    does not know are dropped.

    Args:
        params: Parameter mapping (camelCase names)
        mode: Tier whose defaults are applied

    Returns:
        Dictionary of snake_case keyword arguments

    Example:
        >>> to_engine_kwargs({'minClusterSize': 6}, 'advanced')['min_cluster_size']
        6
    """
    full = apply_defaults(params, mode)
    return {
        ENGINE_KWARGS[name]: value
        for name, value in full.items()
        if name in ENGINE_KWARGS and value is not None
    }


@dataclass
class ClusteringConfig:
    """A named, validated parameter set.

    Attributes:
        name: Descriptive name of the configuration
        mode: Mode the parameters were edited in
        parameters: Parameter mapping with tier defaults applied
        config_id: Unique identifier
        created_at: Creation timestamp (UTC)
    """
    name: str
    mode: Mode
    parameters: Dict[str, Any]
    config_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_engine_kwargs(self) -> Dict[str, Any]:
        """Get keyword arguments for the clustering engine."""
        return to_engine_kwargs(self.parameters, self.mode)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.config_id,
            'name': self.name,
            'mode': self.mode.value,
            'parameters': dict(self.parameters),
            'createdAt': self.created_at.isoformat(),
        }
