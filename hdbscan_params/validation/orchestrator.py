"""
Validation orchestrator.

Combines the structural validator with the orchestrator's own advisory
checks into a single ValidationResult. Dependency rules are a separate
channel (see dependencies.py) and are merged by the caller.
"""

from typing import Any, List, Mapping, Union

from ..params.schema import Mode
from .messages import ValidationResult
from .validator import StructuralValidator, is_number


SMALL_MIN_CLUSTER_SIZE = 5
LARGE_MIN_CLUSTER_SIZE = 100


class ClusteringParamsValidator:
    """Validates clustering parameters for a mode.

    Attributes:
        structural: Schema validator used for field-level errors

    Example:
        validator = ClusteringParamsValidator()
        result = validator.validate({'minClusterSize': 6, 'minSamples': 2}, 'basic')
    """

    def __init__(self, structural: StructuralValidator = None):
        self.structural = structural or StructuralValidator()

    def validate(
        self,
        params: Mapping[str, Any],
        mode: Union[str, Mode] = Mode.BASIC
    ) -> ValidationResult:
        """Validate parameters and collect advisory messages.

        Args:
            params: Parameter mapping
            mode: Mode selecting the schema tier

        Returns:
            ValidationResult; is_valid reflects schema conformance only

        Raises:
            ValueError: If mode is not recognized
        """
        structural = self.structural.validate(params, mode)

        warnings: List[str] = []
        suggestions: List[str] = []
        self._collect_advice(params, warnings, suggestions)

        return ValidationResult.build(structural, warnings, suggestions)

    def _collect_advice(self, params, warnings: List[str], suggestions: List[str]) -> None:
        """Mode-independent warnings on the basic parameters."""
        min_cluster_size = params.get('minClusterSize')
        min_samples = params.get('minSamples')
        if not is_number(min_cluster_size):
            return

        # Also checked by the dependency rules, where it is blocking
        if is_number(min_samples) and min_samples > min_cluster_size:
            warnings.append(
                "minSamples is greater than minClusterSize. "
                "This may produce more outliers."
            )
            suggestions.append(
                f"Consider setting minSamples to {min_cluster_size} or less."
            )

        if min_cluster_size < SMALL_MIN_CLUSTER_SIZE:
            warnings.append(
                f"A very small minClusterSize (< {SMALL_MIN_CLUSTER_SIZE}) "
                f"risks insignificant clusters."
            )

        if min_cluster_size > LARGE_MIN_CLUSTER_SIZE:
            warnings.append(
                f"A very large minClusterSize (> {LARGE_MIN_CLUSTER_SIZE}) "
                f"risks few clusters or many outliers."
            )


_default_validator = ClusteringParamsValidator()


def validate_clustering_params(
    params: Mapping[str, Any],
    mode: Union[str, Mode] = Mode.BASIC
) -> ValidationResult:
    """Validate clustering parameters for a mode.

    Pure function of its inputs: identical calls give equal results.

    Args:
        params: Parameter mapping
        mode: 'basic', 'advanced' or 'super-advanced'

    Returns:
        ValidationResult with errors, warnings and suggestions

    Example:
        result = validate_clustering_params({'minClusterSize': 6, 'minSamples': 2})
        if not result.is_valid:
            print(result.errors)
    """
    return _default_validator.validate(params, mode)
