"""
Cross-field dependency validation.

Detects parameter combinations that pass the schema but are semantically
poor. Rules read whichever fields are present, regardless of mode, and
every applicable rule fires on each run.
"""

from typing import Any, Dict, List, Mapping, Optional

from .messages import DependencyValidationResult
from .validator import is_boolean, is_number


# Neighbor search strategies that do not build a tree
_NON_TREE_ALGORITHMS = ('brute', 'auto')

EPSILON_WARNING_THRESHOLD = 0.5
ALPHA_LOW_THRESHOLD = 0.1
ALPHA_HIGH_THRESHOLD = 0.9
MIN_TREE_LEAF_SIZE = 10
MAX_USEFUL_CORE_DIST_JOBS = 8
SINGLE_CLUSTER_SIZE_THRESHOLD = 50


def _number(params: Mapping[str, Any], name: str) -> Optional[float]:
    """Get a field only if it holds a real number."""
    value = params.get(name)
    return value if is_number(value) else None


class DependencyValidator:
    """Validates relations between clustering parameters.

    Example:
        result = DependencyValidator().validate({'minClusterSize': 6, 'minSamples': 8})
        if result.has_issues:
            print(result.errors)
    """

    def validate(self, params: Mapping[str, Any]) -> DependencyValidationResult:
        """Run every dependency rule.

        Args:
            params: Parameter mapping (any tier)

        Returns:
            DependencyValidationResult
        """
        errors: List[str] = []
        warnings: List[str] = []
        suggestions: List[str] = []

        self._check_min_samples(params, errors, warnings, suggestions)
        self._check_epsilon(params, warnings, suggestions)
        self._check_alpha(params, warnings)
        self._check_leaf_size(params, warnings, suggestions)
        self._check_core_dist_jobs(params, warnings)
        self._check_single_cluster(params, warnings, suggestions)

        return DependencyValidationResult.from_lists(errors, warnings, suggestions)

    def _check_min_samples(self, params, errors, warnings, suggestions) -> None:
        min_samples = _number(params, 'minSamples')
        min_cluster_size = _number(params, 'minClusterSize')
        if min_samples is None or min_cluster_size is None:
            return

        if min_samples > min_cluster_size:
            errors.append(
                "minSamples cannot exceed minClusterSize. "
                "This produces only outliers."
            )
            suggestions.append(
                f"Set minSamples to {min_cluster_size} or less so clusters can form."
            )
        elif min_samples == min_cluster_size:
            warnings.append(
                "minSamples is equal to minClusterSize. "
                "This may produce overly strict clusters."
            )
            suggestions.append(
                f"Consider setting minSamples to {max(1, min_cluster_size - 1)} "
                f"for more flexibility."
            )

    def _check_epsilon(self, params, warnings, suggestions) -> None:
        epsilon = _number(params, 'clusterSelectionEpsilon')
        if epsilon is not None and epsilon > EPSILON_WARNING_THRESHOLD:
            warnings.append(
                f"A very high clusterSelectionEpsilon (> {EPSILON_WARNING_THRESHOLD}) "
                f"may merge distinct clusters."
            )
            suggestions.append(
                "Consider a smaller value (0.0-0.3) for finer cluster granularity."
            )

    def _check_alpha(self, params, warnings) -> None:
        alpha = _number(params, 'alpha')
        if alpha is None:
            return
        if alpha < ALPHA_LOW_THRESHOLD:
            warnings.append(
                f"A very low alpha (< {ALPHA_LOW_THRESHOLD}) may produce too many small clusters."
            )
        elif alpha > ALPHA_HIGH_THRESHOLD:
            warnings.append(
                f"A very high alpha (> {ALPHA_HIGH_THRESHOLD}) may produce few large clusters."
            )

    def _check_leaf_size(self, params, warnings, suggestions) -> None:
        algorithm = params.get('algorithm')
        if not isinstance(algorithm, str) or not algorithm or algorithm in _NON_TREE_ALGORITHMS:
            return
        leaf_size = _number(params, 'leafSize')
        if leaf_size is not None and leaf_size < MIN_TREE_LEAF_SIZE:
            warnings.append(
                f"A very small leafSize (< {MIN_TREE_LEAF_SIZE}) for {algorithm} "
                f"may be inefficient."
            )
            suggestions.append(
                f"Consider a leafSize of at least {MIN_TREE_LEAF_SIZE} for better performance."
            )

    def _check_core_dist_jobs(self, params, warnings) -> None:
        jobs = _number(params, 'coreDistNJobs')
        if jobs is not None and jobs > MAX_USEFUL_CORE_DIST_JOBS:
            warnings.append(
                f"A very high coreDistNJobs (> {MAX_USEFUL_CORE_DIST_JOBS}) "
                f"is unlikely to improve performance."
            )

    def _check_single_cluster(self, params, warnings, suggestions) -> None:
        allow_single_cluster = params.get('allowSingleCluster')
        if not (is_boolean(allow_single_cluster) and allow_single_cluster):
            return
        min_cluster_size = _number(params, 'minClusterSize')
        if min_cluster_size is not None and min_cluster_size > SINGLE_CLUSTER_SIZE_THRESHOLD:
            warnings.append(
                "allowSingleCluster with a large minClusterSize "
                "risks a single giant cluster."
            )
            suggestions.append(
                "Consider disabling allowSingleCluster or reducing minClusterSize."
            )


_default_validator = DependencyValidator()


def validate_dependencies(params: Mapping[str, Any]) -> DependencyValidationResult:
    """Convenience function to run the dependency rules.

    Args:
        params: Parameter mapping

    Returns:
        DependencyValidationResult
    """
    return _default_validator.validate(params)


class DependencyWatcher:
    """Recomputes dependency results only when parameter values change.

    The last evaluated mapping is kept as a snapshot, so in-place edits of
    the caller's mapping are still detected.

    Example:
        watcher = DependencyWatcher()
        result = watcher(params)   # evaluated
        result = watcher(params)   # cached, values unchanged
    """

    def __init__(self, validator: Optional[DependencyValidator] = None):
        self.validator = validator or _default_validator
        self._snapshot: Optional[Dict[str, Any]] = None
        self._result: Optional[DependencyValidationResult] = None

    def __call__(self, params: Mapping[str, Any]) -> DependencyValidationResult:
        if self._result is not None and self._snapshot == params:
            return self._result
        self._snapshot = dict(params)
        self._result = self.validator.validate(params)
        return self._result

    @property
    def result(self) -> Optional[DependencyValidationResult]:
        """Last computed result, None before the first evaluation."""
        return self._result
