"""
Super-advanced editor: every parameter the clustering engine accepts.
"""

from ..params.schema import Mode
from .advanced import AdvancedEditor, METRIC_LABELS
from .base import EditorLayout, EditorSection


ALGORITHM_LABELS = {
    'auto': 'Automatic',
    'ball_tree': 'Ball Tree',
    'kd_tree': 'KD Tree',
    'brute': 'Brute force',
}

CLUSTER_SELECTION_METHOD_LABELS = {
    'eom': 'Excess of Mass (EOM)',
    'leaf': 'Leaf',
}


class SuperAdvancedEditor(AdvancedEditor):
    """Editor for the full parameter set.

    Inherits the advanced defaults and adds the engine tuning knobs.
    """

    mode = Mode.SUPER_ADVANCED
    default_params = {
        **AdvancedEditor.default_params,
        'algorithm': 'auto',
        'leafSize': 30,
        'approxMinSpanTree': True,
        'genMinSpanTree': False,
        'coreDistNJobs': 1,
        'clusterSelectionMethod': 'eom',
        'allowSingleCluster': False,
        'predictionData': False,
        'matchReferenceImplementation': False,
    }

    def get_layout(self) -> EditorLayout:
        return EditorLayout(
            title="Super-advanced configuration",
            description="Full control over every HDBSCAN parameter.",
            sections=(
                EditorSection("Basic parameters", ('minClusterSize', 'minSamples')),
                EditorSection(
                    "Advanced parameters",
                    ('metric', 'alpha', 'clusterSelectionEpsilon'),
                ),
                EditorSection(
                    "Super-advanced parameters",
                    (
                        'algorithm',
                        'leafSize',
                        'coreDistNJobs',
                        'clusterSelectionMethod',
                        'approxMinSpanTree',
                        'genMinSpanTree',
                        'allowSingleCluster',
                        'predictionData',
                        'matchReferenceImplementation',
                    ),
                ),
            ),
            option_labels={
                'metric': METRIC_LABELS,
                'algorithm': ALGORITHM_LABELS,
                'clusterSelectionMethod': CLUSTER_SELECTION_METHOD_LABELS,
            },
        )
