"""
Editor factory for creating the editor of a mode.
"""

from typing import Any, Dict, Type, Union

from ..params.schema import Mode
from .base import BaseEditor
from .basic import BasicEditor
from .advanced import AdvancedEditor
from .super_advanced import SuperAdvancedEditor


EDITORS: Dict[Mode, Type[BaseEditor]] = {
    Mode.BASIC: BasicEditor,
    Mode.ADVANCED: AdvancedEditor,
    Mode.SUPER_ADVANCED: SuperAdvancedEditor,
}


def create_editor(mode: Union[str, Mode], **kwargs: Any) -> BaseEditor:
    """Create the editor for a mode.

    Args:
        mode: 'basic', 'advanced' or 'super-advanced'
        **kwargs: Passed to the editor constructor

    Returns:
        Editor instance (not yet mounted)

    Raises:
        ValueError: If mode is not recognized
    """
    return EDITORS[Mode.from_string(mode)](**kwargs)
