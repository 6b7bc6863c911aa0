"""
Advanced editor: basic parameters plus metric, alpha and epsilon.
"""

from ..params.schema import Mode
from .base import BaseEditor, EditorLayout, EditorSection


METRIC_LABELS = {
    'euclidean': 'Euclidean',
    'manhattan': 'Manhattan',
    'cosine': 'Cosine',
    'haversine': 'Haversine',
}


class AdvancedEditor(BaseEditor):
    """Editor for the advanced tier."""

    mode = Mode.ADVANCED
    default_params = {
        'minClusterSize': 6,
        'minSamples': 2,
        'metric': 'euclidean',
        'alpha': 1.0,
        'clusterSelectionEpsilon': 0.0,
    }

    def get_layout(self) -> EditorLayout:
        return EditorLayout(
            title="Advanced configuration",
            description="Configure advanced parameters for finer control of the algorithm.",
            sections=(
                EditorSection("Basic parameters", ('minClusterSize', 'minSamples')),
                EditorSection(
                    "Advanced parameters",
                    ('metric', 'alpha', 'clusterSelectionEpsilon'),
                ),
            ),
            option_labels={'metric': METRIC_LABELS},
        )
