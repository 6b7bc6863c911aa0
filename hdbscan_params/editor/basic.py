"""
Basic editor: the two essential clustering parameters.
"""

from ..params.schema import Mode
from .base import BaseEditor, EditorLayout, EditorSection


class BasicEditor(BaseEditor):
    """Editor for minClusterSize and minSamples.

    Example:
        with BasicEditor(on_submit=run_clustering) as editor:
            editor.update_param('minClusterSize', 12)
            config = editor.submit()
    """

    mode = Mode.BASIC
    default_params = {
        'minClusterSize': 6,
        'minSamples': 2,
    }

    def get_layout(self) -> EditorLayout:
        return EditorLayout(
            title="Basic configuration",
            description="Configure the essential clustering parameters.",
            sections=(
                EditorSection("Basic parameters", ('minClusterSize', 'minSamples')),
            ),
        )
