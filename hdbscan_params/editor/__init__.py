"""
Editor surfaces: mode-specific consumers of the validation engine.
"""

from .base import (
    BaseEditor,
    EditorFeedback,
    EditorLayout,
    EditorSection,
    SubmissionBlockedError,
    normalize_input,
)
from .basic import BasicEditor
from .advanced import AdvancedEditor
from .super_advanced import SuperAdvancedEditor
from .factory import EDITORS, create_editor

__all__ = [
    'BaseEditor',
    'EditorFeedback',
    'EditorLayout',
    'EditorSection',
    'SubmissionBlockedError',
    'normalize_input',
    'BasicEditor',
    'AdvancedEditor',
    'SuperAdvancedEditor',
    'EDITORS',
    'create_editor',
]
